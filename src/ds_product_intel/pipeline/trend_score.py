"""Trend score: how fast interest in a product is growing (0-100)."""

from .models import TrendScoreInput
from .normalizer import clamp, coerce_signal, round_score

W_GOOGLE_TRENDS = 0.4
W_SALES_VELOCITY = 0.3
W_SOCIAL_MOMENTUM = 0.3


def calculate_trend_score(data: TrendScoreInput) -> int:
    score = (
        W_GOOGLE_TRENDS * clamp(data.google_trends_growth)
        + W_SALES_VELOCITY * clamp(data.sales_velocity)
        + W_SOCIAL_MOMENTUM * clamp(data.social_momentum)
    )
    return round_score(score)


def calculate_google_trends_growth(current_value, previous_value) -> float:
    """Growth of Google Trends interest vs. the previous period (30 days ago)."""
    current = coerce_signal(current_value)
    previous = coerce_signal(previous_value)
    if previous == 0:
        # Any growth from nothing counts as maximal
        return 100.0 if current > 0 else 0.0
    return clamp((current - previous) / previous * 100)


def calculate_sales_velocity(current_week_orders, previous_week_orders) -> float:
    """Week-over-week order growth as a 0-100 velocity score."""
    current = coerce_signal(current_week_orders)
    previous = coerce_signal(previous_week_orders)
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return clamp((current / previous - 1) * 100)


def calculate_social_momentum(reddit_upvotes, pinterest_saves, category_average) -> float:
    """Social engagement relative to the category average; the average maps to 50."""
    total_engagement = coerce_signal(reddit_upvotes) + coerce_signal(pinterest_saves)
    average = coerce_signal(category_average)
    if average == 0:
        return 50.0 if total_engagement > 0 else 0.0
    return clamp(total_engagement / average * 50)
