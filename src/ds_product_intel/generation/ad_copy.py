"""Template-based ad copy for Facebook/Instagram ads.

Three copywriting frameworks (AIDA, PAS, Feature-Benefit) plus lists of
alternative headlines, primary texts and descriptions. Every field is cut to
the ad network's character limits after it is generated.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from ds_product_intel.pipeline.models import ProductInfo
from ds_product_intel.pipeline.normalizer import coerce_signal, round_score

from .text import pick

logger = logging.getLogger(__name__)

HEADLINE_MAX_CHARS = 40
PRIMARY_TEXT_MAX_CHARS = 125
DESCRIPTION_MAX_CHARS = 30

CALL_TO_ACTIONS = ("Shop Now", "Learn More", "Order Now", "Get Yours", "Buy Now")


class AdFramework(str, enum.Enum):
    AIDA = "AIDA"
    PAS = "PAS"
    FEATURE_BENEFIT = "FEATURE_BENEFIT"


@dataclass(frozen=True)
class AdCopyVariation:
    headline: str
    primary_text: str
    description: str
    call_to_action: str
    framework: AdFramework


@dataclass(frozen=True)
class GeneratedAdCopy:
    headlines: list[str]
    primary_texts: list[str]
    descriptions: list[str]
    call_to_actions: list[str]
    variations: list[AdCopyVariation]


def truncate(text: str, limit: int) -> str:
    """Hard cut to at most ``limit`` characters (code points)."""
    return text[:limit]


def _variation(headline, primary_text, description, call_to_action, framework) -> AdCopyVariation:
    return AdCopyVariation(
        headline=truncate(headline, HEADLINE_MAX_CHARS),
        primary_text=truncate(primary_text, PRIMARY_TEXT_MAX_CHARS),
        description=truncate(description, DESCRIPTION_MAX_CHARS),
        call_to_action=call_to_action,
        framework=framework,
    )


def discount_percent(price, original_price) -> int:
    """Whole-number discount implied by an original price, 0 when there is none."""
    original = coerce_signal(original_price)
    if original <= 0:
        return 0
    # Negative discounts (price above original) are not advertised
    raw = (1 - coerce_signal(price) / original) * 100
    return round_score(raw) if raw > 0 else 0


def generate_ad_copy_system_prompt(target_demographic: str | None) -> str:
    audience = target_demographic or "the target audience"
    return (
        "You are a Facebook/Instagram ad copywriter. Write compelling ad copy that "
        "drives clicks and conversions. Use power words, create urgency without being "
        "pushy, and focus on benefits over features. Avoid clichés like 'game-changer' "
        "or 'revolutionary'. Include social proof elements where appropriate. "
        f"Match the tone to {audience}."
    )


def generate_aida_copy(info: ProductInfo) -> AdCopyVariation:
    """Attention-Interest-Desire-Action."""
    discount = discount_percent(info.price, info.original_price)
    if discount > 0:
        headline = f"{discount}% OFF - {info.product_name}"
    else:
        headline = f"Discover {info.product_name}"

    opener = pick(info.key_features, 0, "Finally, a solution that works")
    body = info.product_description or f"The {info.product_name} you've been waiting for"
    primary_text = (
        f"{opener}. {body}. Join thousands of happy customers who made the switch. "
        "Limited time offer - don't miss out!"
    )
    description = f"Premium {info.category.lower()} at an unbeatable price"

    return _variation(headline, primary_text, description, "Shop Now", AdFramework.AIDA)


def generate_pas_copy(info: ProductInfo) -> AdCopyVariation:
    """Problem-Agitate-Solution."""
    pain_point = pick(info.pain_points, 0, "everyday frustrations")
    headline = "Stop " + " ".join(pain_point.split(" ")[:3])

    feature = pick(info.key_features, 0, "It works")
    primary_text = (
        f"Tired of {pain_point}? You're not alone. That's why we created "
        f"{info.product_name}. {feature}. See the difference for yourself."
    )

    return _variation(
        headline, primary_text, "The solution you've been looking for", "Learn More", AdFramework.PAS
    )


def generate_feature_benefit_copy(info: ProductInfo) -> AdCopyVariation:
    feature = pick(info.key_features, 0, "premium quality")
    benefit = pick(info.key_features, 1, "saves you time")

    headline = f"{info.product_name} - {feature}"
    body = info.product_description or f"Experience the {info.product_name} difference"
    primary_text = (
        f"{feature[:1].upper()}{feature[1:]} means {benefit}. {body}. "
        "Order now and see why customers love it."
    )

    return _variation(
        headline,
        primary_text,
        "Free shipping on orders over $50",
        "Order Now",
        AdFramework.FEATURE_BENEFIT,
    )


def generate_headlines(info: ProductInfo) -> list[str]:
    headlines = [
        f"{info.product_name} - Must Have",
        f"New: {info.product_name}",
        f"Get Your {info.product_name} Today",
        f"{info.category} Essential",
        f"Limited Stock: {info.product_name}",
    ]
    return [truncate(h, HEADLINE_MAX_CHARS) for h in headlines]


def generate_primary_texts(info: ProductInfo) -> list[str]:
    texts = [
        f"{info.product_description or info.product_name}. Order now and get free shipping!",
        f"Join thousands who love {info.product_name}. See why it's trending.",
        f"{pick(info.key_features, 0, 'Premium quality')} at an amazing price. Limited time offer!",
    ]
    return [truncate(t, PRIMARY_TEXT_MAX_CHARS) for t in texts]


def generate_descriptions(info: ProductInfo) -> list[str]:
    descriptions = [
        "Free shipping available",
        "30-day money back guarantee",
        "As seen on social media",
    ]
    return [truncate(d, DESCRIPTION_MAX_CHARS) for d in descriptions]


def generate_all_ad_copy(info: ProductInfo) -> GeneratedAdCopy:
    """Complete ad copy package: 3 framework variations plus option lists."""
    copy = GeneratedAdCopy(
        headlines=generate_headlines(info),
        primary_texts=generate_primary_texts(info),
        descriptions=generate_descriptions(info),
        call_to_actions=list(CALL_TO_ACTIONS),
        variations=[
            generate_aida_copy(info),
            generate_pas_copy(info),
            generate_feature_benefit_copy(info),
        ],
    )
    logger.debug("Generated ad copy for '%s'", info.product_name)
    return copy
