"""Margin score: profitability under typical dropshipping economics.

    gross margin % = (retail - cost - shipping) / retail * 100
    score          = (gross margin % - 30) * 2.5, clamped

so 30% maps to 0, 50% to 50 and 70% or more to 100. Below 30% gross margin the
product is not viable and scores 0.
"""

from .models import MarginScoreInput
from .normalizer import coerce_signal, round_score

MIN_VIABLE_MARGIN_PCT = 30.0
MARGIN_SCORE_MULTIPLIER = 2.5

# Shipping step function (USD by weight in grams)
_DEFAULT_SHIPPING = 5.0
_LIGHT_SHIPPING = 3.0
_MEDIUM_SHIPPING = 7.0
_HEAVY_SHIPPING = 15.0
_LIGHT_MAX_GRAMS = 500
_MEDIUM_MAX_GRAMS = 2000


def calculate_estimated_shipping(weight=None) -> float:
    """Estimated shipping cost (USD) from product weight in grams."""
    grams = coerce_signal(weight)
    if grams <= 0:
        return _DEFAULT_SHIPPING
    if grams < _LIGHT_MAX_GRAMS:
        return _LIGHT_SHIPPING
    if grams <= _MEDIUM_MAX_GRAMS:
        return _MEDIUM_SHIPPING
    return _HEAVY_SHIPPING


def calculate_gross_margin_percent(cost_price, suggested_retail_price, estimated_shipping) -> float:
    retail = coerce_signal(suggested_retail_price)
    if retail <= 0:
        return 0.0
    gross_profit = retail - coerce_signal(cost_price) - coerce_signal(estimated_shipping)
    return gross_profit / retail * 100


def calculate_margin_score(data: MarginScoreInput) -> int:
    if coerce_signal(data.suggested_retail_price) <= 0:
        return 0

    shipping = calculate_estimated_shipping(data.shipping_weight)
    margin_pct = calculate_gross_margin_percent(data.cost_price, data.suggested_retail_price, shipping)

    if margin_pct < MIN_VIABLE_MARGIN_PCT:
        return 0

    return round_score((margin_pct - MIN_VIABLE_MARGIN_PCT) * MARGIN_SCORE_MULTIPLIER)


def calculate_suggested_retail_price(cost_price, target_margin_percent, shipping_weight=None) -> float:
    """Retail price at which the gross margin equals target_margin_percent.

    Returns 0.0 when the target is 100% or more (no finite price achieves it).
    """
    target = coerce_signal(target_margin_percent)
    if target >= 100:
        return 0.0
    total_cost = coerce_signal(cost_price) + calculate_estimated_shipping(shipping_weight)
    return total_cost / (1 - target / 100)
