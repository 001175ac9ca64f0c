import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ds_product_intel.config import settings
from ds_product_intel.db.session import init_db
from ds_product_intel.scheduler.jobs import setup_scheduler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting DS Product Intel...")
    await init_db()
    sched = setup_scheduler()
    sched.start()
    logger.info("Scheduler started with %d jobs", len(sched.get_jobs()))
    yield
    # Shutdown
    sched.shutdown()
    logger.info("Scheduler shut down.")


def create_app() -> FastAPI:
    app = FastAPI(title="DS Product Intel", version="0.1.0", lifespan=lifespan)

    # Register routes
    from ds_product_intel.api.routes.analytics import router as analytics_router
    from ds_product_intel.api.routes.products import router as products_router

    app.include_router(products_router)
    app.include_router(analytics_router)

    return app


app = create_app()
