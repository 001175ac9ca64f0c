"""Per-product intelligence: scores plus ad creatives for qualifying products.

evaluate_product is a pure function of its input record, so a batch can be
evaluated in any order or in parallel. score_product / score_all_products
persist the results: a new ProductScore history row per run, refreshed latest
scores on the product and a regenerated set of creatives.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ds_product_intel.config import settings
from ds_product_intel.db.models import AdCreative, Product, ProductScore
from ds_product_intel.generation.creatives import AdCreativeRecord, build_creatives

from .models import DEFAULT_THRESHOLDS, ClassificationThresholds, ProductRecord, ScoreResult
from .overall_score import calculate_all_scores, should_generate_ad_creatives

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductIntelligence:
    scores: ScoreResult
    creatives: tuple[AdCreativeRecord, ...] = ()


def evaluate_product(
    record: ProductRecord,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
) -> ProductIntelligence:
    scores = calculate_all_scores(record.signals, thresholds)
    if not should_generate_ad_creatives(scores.overall_score, thresholds):
        return ProductIntelligence(scores=scores)
    return ProductIntelligence(scores=scores, creatives=tuple(build_creatives(record.product_info())))


def evaluate_products(
    records: list[ProductRecord],
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    max_workers: int = 0,
) -> list[ProductIntelligence]:
    """Evaluate a batch, optionally on a thread pool. Results keep input order."""
    evaluate = partial(evaluate_product, thresholds=thresholds)
    if max_workers <= 0 or len(records) < 2:
        return [evaluate(r) for r in records]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(evaluate, records))


async def _apply_intelligence(
    session: AsyncSession, product: Product, intel: ProductIntelligence
) -> ProductScore:
    scores = intel.scores

    row = ProductScore(
        product_id=product.id,
        trend_score=scores.trend_score,
        competition_score=scores.competition_score,
        margin_score=scores.margin_score,
        overall_score=scores.overall_score,
        google_trends_value=product.google_trends_growth or 0.0,
        social_mentions=product.social_momentum or 0.0,
        ad_library_count=product.ad_library_count or 0,
        competitor_store_count=product.shopify_store_count or 0,
    )
    session.add(row)

    product.trend_score = scores.trend_score
    product.competition_score = scores.competition_score
    product.margin_score = scores.margin_score
    product.overall_score = scores.overall_score

    await session.execute(delete(AdCreative).where(AdCreative.product_id == product.id))
    for creative in intel.creatives:
        session.add(AdCreative(
            product_id=product.id,
            type=creative.type.value,
            platform=creative.platform.value,
            headline=creative.headline,
            primary_text=creative.primary_text,
            description=creative.description,
            call_to_action=creative.call_to_action,
            framework=creative.framework,
            image_prompt=creative.image_prompt,
            video_script=creative.video_script,
        ))

    if scores.should_trigger_alert:
        logger.info("Alert: '%s' scored %d", product.name, scores.overall_score)
    logger.debug(
        "Scored '%s': trend=%d competition=%d margin=%d overall=%d creatives=%d",
        product.name,
        scores.trend_score,
        scores.competition_score,
        scores.margin_score,
        scores.overall_score,
        len(intel.creatives),
    )
    return row


async def score_product(
    session: AsyncSession,
    product: Product,
    thresholds: ClassificationThresholds | None = None,
) -> ProductScore:
    """Score one product and stage the history row and creatives on the session."""
    thresholds = thresholds or ClassificationThresholds.from_settings(settings)
    intel = evaluate_product(product.to_record(), thresholds)
    return await _apply_intelligence(session, product, intel)


async def score_all_products(
    session: AsyncSession,
    thresholds: ClassificationThresholds | None = None,
) -> int:
    """Score all active products. Returns count of scored products."""
    thresholds = thresholds or ClassificationThresholds.from_settings(settings)
    products = (
        await session.execute(select(Product).where(Product.is_active.is_(True)))
    ).scalars().all()

    results = evaluate_products(
        [p.to_record() for p in products],
        thresholds=thresholds,
        max_workers=settings.batch_workers,
    )
    for product, intel in zip(products, results):
        await _apply_intelligence(session, product, intel)

    await session.commit()
    logger.info("Scored %d products", len(products))
    return len(products)
