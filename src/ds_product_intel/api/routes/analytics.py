import logging
from dataclasses import asdict
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ds_product_intel.access.tier_access import (
    SubscriptionTier,
    can_view_score_history,
    can_view_scores,
    get_minimum_tier_for_feature,
    get_tier_limits,
)
from ds_product_intel.api.views import gate_products, get_tier, score_to_dict
from ds_product_intel.config import settings
from ds_product_intel.db.models import Product, ProductScore
from ds_product_intel.db.session import get_session

logger = logging.getLogger(__name__)

router = APIRouter()

_TIME_RANGES = {"7d": 7, "30d": 30, "90d": 90}


def _utcnow() -> datetime:
    # Stored timestamps are naive UTC (CURRENT_TIMESTAMP)
    return datetime.now(timezone.utc).replace(tzinfo=None)


@router.get("/api/products/{product_id}/history")
async def api_product_history(
    product_id: int,
    days: int = Query(settings.score_history_days, ge=1, le=90),
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: score history for a product, oldest first."""
    if not can_view_score_history(tier):
        return JSONResponse(
            {
                "error": "upgrade required",
                "minimum_tier": get_minimum_tier_for_feature("score_history").value,
            },
            status_code=403,
        )

    product = await session.get(Product, product_id)
    if not product:
        return JSONResponse({"error": "not found"}, status_code=404)

    cutoff = _utcnow() - timedelta(days=days)
    rows = (
        await session.execute(
            select(ProductScore)
            .where(ProductScore.product_id == product_id)
            .where(ProductScore.recorded_at >= cutoff)
            .order_by(ProductScore.recorded_at, ProductScore.id)
        )
    ).scalars().all()

    return {"product_id": product_id, "score_history": [score_to_dict(s) for s in rows]}


@router.get("/api/dashboard-stats")
async def api_dashboard_stats(
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: new products today, average score, top category, hot products."""
    now = _utcnow()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    new_today = (
        await session.execute(
            select(func.count(Product.id))
            .where(Product.is_active.is_(True))
            .where(Product.first_seen >= today)
        )
    ).scalar() or 0

    average = (
        await session.execute(
            select(func.avg(Product.overall_score)).where(Product.is_active.is_(True))
        )
    ).scalar()

    top_category = (
        await session.execute(
            select(Product.category)
            .where(Product.is_active.is_(True))
            .group_by(Product.category)
            .order_by(desc(func.count(Product.id)), Product.category)
            .limit(1)
        )
    ).scalar()

    hot = (
        await session.execute(
            select(Product)
            .where(Product.is_active.is_(True))
            .where(Product.overall_score >= settings.hot_product_threshold)
            .order_by(desc(Product.overall_score), Product.id)
            .limit(6)
        )
    ).scalars().all()

    return {
        "new_products_today": new_today,
        "average_score": round(average or 0) if can_view_scores(tier) else None,
        "top_category": top_category,
        "hot_products": gate_products(hot, tier),
    }


@router.get("/api/categories")
async def api_categories(session: AsyncSession = Depends(get_session)):
    """JSON endpoint: active categories with product counts."""
    rows = (
        await session.execute(
            select(Product.category, func.count(Product.id).label("count"))
            .where(Product.is_active.is_(True))
            .group_by(Product.category)
            .order_by(desc("count"), Product.category)
        )
    ).all()
    return {"categories": [{"category": cat, "count": count} for cat, count in rows]}


@router.get("/api/trends")
async def api_trends(
    time_range: str = Query("30d", pattern="^(7d|30d|90d)$"),
    tier: SubscriptionTier = Depends(get_tier),
    session: AsyncSession = Depends(get_session),
):
    """JSON endpoint: trending categories, top movers and new entries."""
    now = _utcnow()
    start = now - timedelta(days=_TIME_RANGES[time_range])

    category_rows = (
        await session.execute(
            select(
                Product.category,
                func.count(Product.id).label("product_count"),
                func.avg(Product.overall_score).label("avg_score"),
            )
            .where(Product.is_active.is_(True))
            .where(Product.first_seen >= start)
            .group_by(Product.category)
            .order_by(desc("avg_score"), Product.category)
            .limit(10)
        )
    ).all()

    top_movers = (
        await session.execute(
            select(Product)
            .where(Product.is_active.is_(True))
            .where(Product.trend_score >= settings.hot_product_threshold)
            .order_by(desc(Product.trend_score), Product.id)
            .limit(10)
        )
    ).scalars().all()

    new_entries = (
        await session.execute(
            select(Product)
            .where(Product.is_active.is_(True))
            .where(Product.first_seen >= now - timedelta(days=7))
            .order_by(desc(Product.first_seen), desc(Product.id))
            .limit(10)
        )
    ).scalars().all()

    show_scores = can_view_scores(tier)
    return {
        "trending_categories": [
            {
                "category": cat,
                "product_count": count,
                "avg_score": round(avg or 0, 1) if show_scores else None,
            }
            for cat, count, avg in category_rows
        ],
        "top_movers": gate_products(top_movers, tier),
        "new_entries": gate_products(new_entries, tier),
    }


@router.get("/api/tiers/{tier_name}")
async def api_tier_limits(tier_name: str):
    """JSON endpoint: limits for a tier (unknown names resolve to FREE)."""
    tier = SubscriptionTier.parse(tier_name)
    return {"tier": tier.value, "limits": asdict(get_tier_limits(tier))}
