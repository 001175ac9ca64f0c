import logging

from ds_product_intel.db.session import async_session_factory

from .product_scorer import score_all_products

logger = logging.getLogger(__name__)


async def run_scoring():
    """Score all products."""
    logger.info("Starting scoring pipeline...")
    async with async_session_factory() as session:
        count = await score_all_products(session)
    logger.info("Scoring complete: %d products scored", count)
    return count
