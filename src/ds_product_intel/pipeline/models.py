"""Value objects flowing through the scoring pipeline.

All records are frozen dataclasses: a new ScoreResult is produced on every
scoring run and appended to the product's history, never mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class RawSignalInput:
    # Trend
    google_trends_growth: float | None = 0.0
    sales_velocity: float | None = 0.0
    social_momentum: float | None = 0.0
    # Competition
    ad_library_count: float | None = 0.0
    shopify_store_count: float | None = 0.0
    amazon_seller_count: float | None = 0.0
    # Margin
    cost_price: float | None = 0.0
    suggested_retail_price: float | None = 0.0
    shipping_weight: float | None = None  # grams


@dataclass(frozen=True)
class TrendScoreInput:
    google_trends_growth: float | None = 0.0
    sales_velocity: float | None = 0.0
    social_momentum: float | None = 0.0


@dataclass(frozen=True)
class CompetitionScoreInput:
    ad_library_count: float | None = 0.0
    shopify_store_count: float | None = 0.0
    amazon_seller_count: float | None = 0.0


@dataclass(frozen=True)
class MarginScoreInput:
    cost_price: float | None = 0.0
    suggested_retail_price: float | None = 0.0
    shipping_weight: float | None = None


@dataclass(frozen=True)
class FullScoreInput:
    trend: TrendScoreInput
    competition: CompetitionScoreInput
    margin: MarginScoreInput

    @classmethod
    def from_signals(cls, signals: RawSignalInput) -> FullScoreInput:
        return cls(
            trend=TrendScoreInput(
                google_trends_growth=signals.google_trends_growth,
                sales_velocity=signals.sales_velocity,
                social_momentum=signals.social_momentum,
            ),
            competition=CompetitionScoreInput(
                ad_library_count=signals.ad_library_count,
                shopify_store_count=signals.shopify_store_count,
                amazon_seller_count=signals.amazon_seller_count,
            ),
            margin=MarginScoreInput(
                cost_price=signals.cost_price,
                suggested_retail_price=signals.suggested_retail_price,
                shipping_weight=signals.shipping_weight,
            ),
        )


@dataclass(frozen=True)
class ClassificationThresholds:
    hot_product: int = 70
    alert: int = 85
    ad_creatives: int = 60

    @classmethod
    def from_settings(cls, settings) -> ClassificationThresholds:
        return cls(
            hot_product=settings.hot_product_threshold,
            alert=settings.alert_threshold,
            ad_creatives=settings.creative_threshold,
        )


DEFAULT_THRESHOLDS = ClassificationThresholds()


@dataclass(frozen=True)
class ScoreResult:
    trend_score: int
    competition_score: int
    margin_score: int
    overall_score: int
    is_hot_product: bool
    should_trigger_alert: bool


class Scored(Protocol):
    """Anything carrying an overall score (products, list rows, snapshots)."""

    overall_score: int | None


class ScoreFields(Scored, Protocol):
    trend_score: int | None
    competition_score: int | None
    margin_score: int | None


@dataclass(frozen=True)
class ProductInfo:
    """Product attributes used by the creative generators."""

    product_name: str
    category: str
    price: float = 0.0
    original_price: float | None = None
    product_description: str | None = None
    target_demographic: str | None = None
    key_features: tuple[str, ...] = ()
    pain_points: tuple[str, ...] = ()
    image_url: str | None = None


@dataclass(frozen=True)
class ProductRecord:
    """Per-product input record as supplied by storage."""

    name: str
    category: str
    signals: RawSignalInput = field(default_factory=RawSignalInput)
    description: str | None = None
    key_features: tuple[str, ...] = ()
    pain_points: tuple[str, ...] = ()
    target_demographic: str | None = None
    original_price: float | None = None
    image_url: str | None = None

    def product_info(self) -> ProductInfo:
        return ProductInfo(
            product_name=self.name,
            category=self.category,
            price=self.signals.suggested_retail_price or 0.0,
            original_price=self.original_price,
            product_description=self.description,
            target_demographic=self.target_demographic,
            key_features=tuple(self.key_features or ()),
            pain_points=tuple(self.pain_points or ()),
            image_url=self.image_url,
        )
