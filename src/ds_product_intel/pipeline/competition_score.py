"""Competition score on an inverted scale: higher score = less competition.

Each channel count maps to a 0-100 saturation via a linear ramp between a
floor and a cap, then the weighted saturation is subtracted from 100.
"""

from .models import CompetitionScoreInput
from .normalizer import normalize, round_score

W_AD_LIBRARY = 0.4
W_SHOPIFY = 0.3
W_AMAZON = 0.3

AD_LIBRARY_CAP = 50
SHOPIFY_STORE_CAP = 20
# A lone Amazon seller is negligible competition, so the ramp starts at 1
AMAZON_SELLER_FLOOR = 1
AMAZON_SELLER_CAP = 50


def normalize_ad_library_count(count) -> float:
    return normalize(count, 0, AD_LIBRARY_CAP)


def normalize_shopify_store_count(count) -> float:
    return normalize(count, 0, SHOPIFY_STORE_CAP)


def normalize_amazon_seller_count(count) -> float:
    return normalize(count, AMAZON_SELLER_FLOOR, AMAZON_SELLER_CAP)


def calculate_saturation(data: CompetitionScoreInput) -> float:
    return (
        W_AD_LIBRARY * normalize_ad_library_count(data.ad_library_count)
        + W_SHOPIFY * normalize_shopify_store_count(data.shopify_store_count)
        + W_AMAZON * normalize_amazon_seller_count(data.amazon_seller_count)
    )


def calculate_competition_score(data: CompetitionScoreInput) -> int:
    return round_score(100 - calculate_saturation(data))
