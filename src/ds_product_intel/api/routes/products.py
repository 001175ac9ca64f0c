import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ds_product_intel.access.tier_access import (
    UNLIMITED,
    SubscriptionTier,
    filter_creatives_for_tier,
    get_products_limit,
    hide_scores_if_needed,
)
from ds_product_intel.api.views import ProductView, creative_to_dict, gate_products, get_tier
from ds_product_intel.config import settings
from ds_product_intel.db.models import AdCreative, Product, ProductScore
from ds_product_intel.db.session import get_session
from ds_product_intel.pipeline.product_scorer import score_all_products

logger = logging.getLogger(__name__)

router = APIRouter()

_SORT_COLUMNS = {
    "overall_score": Product.overall_score,
    "trend_score": Product.trend_score,
    "competition_score": Product.competition_score,
    "margin_score": Product.margin_score,
    "first_seen": Product.first_seen,
}


@router.get("/api/products")
async def api_products(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    category: str | None = None,
    min_score: int = Query(0, ge=0, le=100),
    sort_by: str = Query("overall_score", pattern="^(overall_score|trend_score|competition_score|margin_score|first_seen)$"),
    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: ranked product list, truncated and masked per tier."""
    column = _SORT_COLUMNS[sort_by]
    stmt = select(Product).where(Product.is_active.is_(True))
    if category:
        stmt = stmt.where(Product.category == category)
    if min_score > 0:
        stmt = stmt.where(Product.overall_score >= min_score)

    total = (
        await session.execute(select(func.count()).select_from(stmt.subquery()))
    ).scalar() or 0

    skip = (page - 1) * limit
    # Tier truncation applies to the ranking as a whole, so load the prefix up to this page
    ordered = stmt.order_by(desc(column) if sort_order == "desc" else column, Product.id)
    prefix = (await session.execute(ordered.limit(skip + limit))).scalars().all()

    visible = gate_products(list(prefix), tier)[skip:skip + limit]

    cap = get_products_limit(tier)
    if cap != UNLIMITED:
        total = min(total, cap)

    return {
        "products": visible,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": (total + limit - 1) // limit,
        },
        "tier": tier.value,
    }


@router.get("/api/products/hot")
async def api_hot_products(
    limit: int = Query(10, ge=1, le=100),
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: hot products (overall score at or above the hot threshold)."""
    products = (
        await session.execute(
            select(Product)
            .where(Product.is_active.is_(True))
            .where(Product.overall_score >= settings.hot_product_threshold)
            .order_by(desc(Product.overall_score), Product.id)
            .limit(limit)
        )
    ).scalars().all()
    return {"products": gate_products(list(products), tier), "tier": tier.value}


@router.get("/api/products/{product_id}")
async def api_product_detail(
    product_id: int,
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: product detail + creatives the tier may see."""
    product = await session.get(Product, product_id)
    if not product:
        return JSONResponse({"error": "not found"}, status_code=404)

    creatives = (
        await session.execute(
            select(AdCreative)
            .where(AdCreative.product_id == product_id)
            .order_by(AdCreative.id)
        )
    ).scalars().all()

    view = hide_scores_if_needed([ProductView.from_product(product)], tier)[0]
    return {
        "product": view.to_dict(),
        "creatives": [creative_to_dict(c) for c in filter_creatives_for_tier(creatives, tier)],
        "tier": tier.value,
    }


@router.get("/api/products/{product_id}/creatives")
async def api_product_creatives(
    product_id: int,
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: generated ad creatives, filtered by tier."""
    product = await session.get(Product, product_id)
    if not product:
        return JSONResponse({"error": "not found"}, status_code=404)

    creatives = (
        await session.execute(
            select(AdCreative)
            .where(AdCreative.product_id == product_id)
            .order_by(AdCreative.id)
        )
    ).scalars().all()
    allowed = filter_creatives_for_tier(creatives, tier)
    return {
        "creatives": [creative_to_dict(c) for c in allowed],
        "hidden_count": len(creatives) - len(allowed),
    }


@router.post("/api/scoring/trigger")
async def trigger_scoring(session: AsyncSession = Depends(get_session)):
    """Manually trigger a scoring run over all active products."""
    try:
        scored = await score_all_products(session)
        return {"status": "ok", "scored": scored}
    except Exception as e:
        logger.error("Manual trigger failed: %s", e)
        return JSONResponse({"status": "error", "detail": str(e)}, status_code=500)


@router.get("/api/health")
async def health(session: AsyncSession = Depends(get_session)):
    """Health check: DB connectivity + last scoring time."""
    last_scored = (
        await session.execute(select(func.max(ProductScore.recorded_at)))
    ).scalar()
    product_count = (
        await session.execute(select(func.count(Product.id)))
    ).scalar()
    return {
        "status": "ok",
        "last_scoring": last_scored.isoformat() if last_scored else None,
        "product_count": product_count,
    }
