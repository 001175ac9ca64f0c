"""Subscription-tier access policy.

- FREE: top 10 products/day with scores hidden, 5 detail views/day, ad copy only
- STARTER: top 50 products, ad copy + images
- PRO: all products, all creatives including video scripts, alerts, history
- AGENCY: everything in PRO plus API access

TIER_LIMITS is built once at import and is read-only. Every policy function
takes the table as a parameter (defaulting to TIER_LIMITS) instead of reading
mutable module state.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol, TypeVar

from ds_product_intel.generation.creatives import CreativeType
from ds_product_intel.pipeline.models import ScoreFields

logger = logging.getLogger(__name__)

UNLIMITED = -1

_SCORE_FIELDS = ("trend_score", "competition_score", "margin_score", "overall_score")


class SubscriptionTier(str, enum.Enum):
    FREE = "FREE"
    STARTER = "STARTER"
    PRO = "PRO"
    AGENCY = "AGENCY"

    @classmethod
    def parse(cls, value) -> SubscriptionTier:
        """Parse a tier from user input; anything unrecognized is FREE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            logger.debug("Unknown subscription tier %r, falling back to FREE", value)
            return cls.FREE

    @property
    def rank(self) -> int:
        return TIER_ORDER.index(self)


# Ascending entitlement breadth
TIER_ORDER = (
    SubscriptionTier.FREE,
    SubscriptionTier.STARTER,
    SubscriptionTier.PRO,
    SubscriptionTier.AGENCY,
)


@dataclass(frozen=True)
class TierLimits:
    products_per_day: int
    detail_views_per_day: int
    show_scores: bool
    ad_copy_access: bool
    image_access: bool
    video_script_access: bool
    api_access: bool
    email_alerts: bool
    score_history: bool


FEATURES = tuple(f.name for f in dataclasses.fields(TierLimits))

TIER_LIMITS: Mapping[SubscriptionTier, TierLimits] = MappingProxyType({
    SubscriptionTier.FREE: TierLimits(
        products_per_day=10,
        detail_views_per_day=5,
        show_scores=False,
        ad_copy_access=True,
        image_access=False,
        video_script_access=False,
        api_access=False,
        email_alerts=False,
        score_history=False,
    ),
    SubscriptionTier.STARTER: TierLimits(
        products_per_day=50,
        detail_views_per_day=50,
        show_scores=True,
        ad_copy_access=True,
        image_access=True,
        video_script_access=False,
        api_access=False,
        email_alerts=False,
        score_history=False,
    ),
    SubscriptionTier.PRO: TierLimits(
        products_per_day=UNLIMITED,
        detail_views_per_day=UNLIMITED,
        show_scores=True,
        ad_copy_access=True,
        image_access=True,
        video_script_access=True,
        api_access=False,
        email_alerts=True,
        score_history=True,
    ),
    SubscriptionTier.AGENCY: TierLimits(
        products_per_day=UNLIMITED,
        detail_views_per_day=UNLIMITED,
        show_scores=True,
        ad_copy_access=True,
        image_access=True,
        video_script_access=True,
        api_access=True,
        email_alerts=True,
        score_history=True,
    ),
})


class HasCreativeType(Protocol):
    type: str


T = TypeVar("T")
S = TypeVar("S", bound=ScoreFields)
C = TypeVar("C", bound=HasCreativeType)


def get_tier_limits(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> TierLimits:
    return table.get(SubscriptionTier.parse(tier)) or table[SubscriptionTier.FREE]


def can_access_feature(tier, feature: str, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    """Boolean flags are returned as-is; numeric limits grant access when non-zero."""
    value = getattr(get_tier_limits(tier, table), feature, None)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return False


def get_products_limit(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> int:
    return get_tier_limits(tier, table).products_per_day


def get_detail_views_limit(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> int:
    return get_tier_limits(tier, table).detail_views_per_day


def can_view_scores(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).show_scores


def can_access_ad_copy(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).ad_copy_access


def can_access_images(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).image_access


def can_access_video_scripts(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).video_script_access


def can_access_api(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).api_access


def can_receive_email_alerts(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).email_alerts


def can_view_score_history(tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS) -> bool:
    return get_tier_limits(tier, table).score_history


def get_minimum_tier_for_feature(
    feature: str, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS
) -> SubscriptionTier:
    for tier in TIER_ORDER:
        if can_access_feature(tier, feature, table):
            return tier
    return SubscriptionTier.AGENCY


def filter_products_for_tier(
    products: Sequence[T], tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS
) -> list[T]:
    """Keep the first products_per_day items, in order; -1 keeps everything."""
    limit = get_products_limit(tier, table)
    if limit == UNLIMITED:
        return list(products)
    return list(products[:max(limit, 0)])


def _without_scores(product):
    cleared = {name: None for name in _SCORE_FIELDS}
    if isinstance(product, Mapping):
        return {**product, **cleared}
    if dataclasses.is_dataclass(product) and not isinstance(product, type):
        return dataclasses.replace(product, **cleared)
    # ORM rows and other live objects must be converted to a view first
    raise TypeError(f"cannot hide scores on {type(product).__name__}; pass a dataclass or mapping")


def hide_scores_if_needed(
    products: Sequence[S], tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS
) -> list[S]:
    """Copies with the four score fields cleared when the tier cannot see scores.

    Only dataclass instances and plain mappings are supported (anything else
    raises TypeError); all other fields pass through unchanged.
    """
    if can_view_scores(tier, table):
        return list(products)
    return [_without_scores(p) for p in products]


def filter_creatives_for_tier(
    creatives: Sequence[C], tier, table: Mapping[SubscriptionTier, TierLimits] = TIER_LIMITS
) -> list[C]:
    limits = get_tier_limits(tier, table)

    def allowed(creative) -> bool:
        if creative.type == CreativeType.VIDEO_SCRIPT:
            return limits.video_script_access
        if creative.type in (CreativeType.STATIC_IMAGE, CreativeType.CAROUSEL):
            return limits.image_access or limits.ad_copy_access
        return limits.ad_copy_access

    return [c for c in creatives if allowed(c)]
