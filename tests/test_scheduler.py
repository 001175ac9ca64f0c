"""
Tests for scheduler wiring.
"""
from unittest.mock import AsyncMock

from ds_product_intel.config import settings
from ds_product_intel.scheduler.jobs import _run_async, setup_scheduler

class TestSetupScheduler:
    """Tests for setup_scheduler."""

    def test_registers_scoring_job(self):
        sched = setup_scheduler()
        job = sched.get_job("scoring")
        assert job is not None
        assert job.name == "Product Scoring"
        assert job.max_instances == 1
        assert job.trigger.interval.total_seconds() == settings.scoring_interval_hours * 3600


class TestRunAsync:
    """Tests for the async job wrapper."""

    async def test_runs_coroutine(self):
        func = AsyncMock()
        func.__name__ = "job"
        await _run_async(func)()
        func.assert_awaited_once()

    async def test_swallows_job_failure(self):
        func = AsyncMock(side_effect=RuntimeError("db down"))
        func.__name__ = "job"
        await _run_async(func)()
        func.assert_awaited_once()
