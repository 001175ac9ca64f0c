import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from ds_product_intel.config import settings
from ds_product_intel.pipeline.runner import run_scoring

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def _run_async(coro_func):
    """Wrapper for APScheduler to run async functions."""
    async def wrapper():
        try:
            await coro_func()
        except Exception as e:
            logger.error("Scheduled job %s failed: %s", coro_func.__name__, e)
    return wrapper


def setup_scheduler():
    """Configure and return the scheduler with all jobs."""
    scheduler.add_job(
        _run_async(run_scoring),
        "interval",
        hours=settings.scoring_interval_hours,
        id="scoring",
        max_instances=1,
        replace_existing=True,
        name="Product Scoring",
    )
    return scheduler
