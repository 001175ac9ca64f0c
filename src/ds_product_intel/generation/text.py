"""Small text helpers shared by the creative generators."""

import math
from decimal import ROUND_HALF_UP, Decimal

from ds_product_intel.pipeline.normalizer import coerce_signal

_CENTS = Decimal("0.01")
# Floats this large are whole numbers, so there is no cent tie to round
_EXACT_CENTS_LIMIT = 2.0 ** 53


def pick(items, index: int, fallback: str) -> str:
    """items[index] when present and non-empty, else fallback."""
    if items and len(items) > index and items[index]:
        return items[index]
    return fallback


def format_price(value) -> str:
    """Dollar amount with two decimals, ties rounded up ($0.125 -> $0.13)."""
    amount = coerce_signal(value)
    if not math.isfinite(amount):
        amount = 0.0
    if abs(amount) >= _EXACT_CENTS_LIMIT:
        return f"${amount:.2f}"
    # repr is the shortest decimal that round-trips, so 0.125 stays an exact tie
    cents = Decimal(repr(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"${cents}"
