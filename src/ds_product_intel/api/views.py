"""Presentation shapes for the JSON API and the tier dependency."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass

from fastapi import Header

from ds_product_intel.access.tier_access import (
    SubscriptionTier,
    filter_products_for_tier,
    hide_scores_if_needed,
)
from ds_product_intel.config import settings
from ds_product_intel.db.models import AdCreative, Product, ProductScore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductView:
    id: int
    name: str
    category: str
    description: str | None
    image_url: str | None
    source_url: str | None
    cost_price: float | None
    suggested_retail_price: float | None
    shipping_weight: float | None
    key_features: list[str]
    pain_points: list[str]
    trend_score: int | None
    competition_score: int | None
    margin_score: int | None
    overall_score: int | None
    first_seen: str | None

    @classmethod
    def from_product(cls, p: Product) -> ProductView:
        return cls(
            id=p.id,
            name=p.name,
            category=p.category,
            description=p.description,
            image_url=p.image_url,
            source_url=p.source_url,
            cost_price=p.cost_price,
            suggested_retail_price=p.suggested_retail_price,
            shipping_weight=p.shipping_weight,
            key_features=p.key_features,
            pain_points=p.pain_points,
            trend_score=p.trend_score,
            competition_score=p.competition_score,
            margin_score=p.margin_score,
            overall_score=p.overall_score,
            first_seen=p.first_seen.isoformat() if p.first_seen else None,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def creative_to_dict(c: AdCreative) -> dict:
    video_script = None
    if c.video_script:
        try:
            video_script = json.loads(c.video_script)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Creative %s has an unreadable video script", c.id)
    return {
        "id": c.id,
        "type": c.type,
        "platform": c.platform,
        "headline": c.headline,
        "primary_text": c.primary_text,
        "description": c.description,
        "call_to_action": c.call_to_action,
        "framework": c.framework,
        "image_prompt": c.image_prompt,
        "video_script": video_script,
        "generated_at": c.generated_at.isoformat() if c.generated_at else None,
    }


def score_to_dict(s: ProductScore) -> dict:
    return {
        "trend_score": s.trend_score,
        "competition_score": s.competition_score,
        "margin_score": s.margin_score,
        "overall_score": s.overall_score,
        "google_trends_value": s.google_trends_value,
        "social_mentions": s.social_mentions,
        "ad_library_count": s.ad_library_count,
        "competitor_store_count": s.competitor_store_count,
        "recorded_at": s.recorded_at.isoformat() if s.recorded_at else None,
    }


def get_tier(tier: str | None = Header(None, alias=settings.tier_header)) -> SubscriptionTier:
    """Subscription tier supplied upstream by the auth/billing layer."""
    return SubscriptionTier.parse(tier)


def gate_products(products: list[Product], tier: SubscriptionTier) -> list[dict]:
    """Product dicts the tier may see: truncated to its daily quota, scores masked if needed."""
    views = [ProductView.from_product(p) for p in products]
    return [v.to_dict() for v in hide_scores_if_needed(filter_products_for_tier(views, tier), tier)]
