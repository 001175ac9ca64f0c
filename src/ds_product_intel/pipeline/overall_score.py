"""Overall score aggregation and classification.

    overall = trend * 0.35 + competition * 0.30 + margin * 0.35

Products at or above the hot-product threshold (70) are "Hot Products", at or
above the alert threshold (85) they trigger alerts, and at or above the
creative threshold (60) ad creatives are generated. The thresholds are
independent policy values carried by ClassificationThresholds.
"""

from __future__ import annotations

from .competition_score import calculate_competition_score
from .margin_score import calculate_margin_score
from .models import (
    DEFAULT_THRESHOLDS,
    ClassificationThresholds,
    FullScoreInput,
    RawSignalInput,
    ScoreResult,
)
from .normalizer import clamp, coerce_signal, round_score
from .trend_score import calculate_trend_score

W_TREND = 0.35
W_COMPETITION = 0.30
W_MARGIN = 0.35


def calculate_overall_score(trend_score, competition_score, margin_score) -> int:
    score = (
        W_TREND * clamp(trend_score)
        + W_COMPETITION * clamp(competition_score)
        + W_MARGIN * clamp(margin_score)
    )
    return round_score(score)


def is_hot_product(overall_score, thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS) -> bool:
    return coerce_signal(overall_score) >= thresholds.hot_product


def should_trigger_alert(overall_score, thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS) -> bool:
    return coerce_signal(overall_score) >= thresholds.alert


def should_generate_ad_creatives(
    overall_score, thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS
) -> bool:
    return coerce_signal(overall_score) >= thresholds.ad_creatives


def calculate_all_scores(
    data: FullScoreInput | RawSignalInput,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
) -> ScoreResult:
    """Run every calculator and classify the result."""
    if isinstance(data, RawSignalInput):
        data = FullScoreInput.from_signals(data)

    trend = calculate_trend_score(data.trend)
    competition = calculate_competition_score(data.competition)
    margin = calculate_margin_score(data.margin)
    overall = calculate_overall_score(trend, competition, margin)

    return ScoreResult(
        trend_score=trend,
        competition_score=competition,
        margin_score=margin,
        overall_score=overall,
        is_hot_product=is_hot_product(overall, thresholds),
        should_trigger_alert=should_trigger_alert(overall, thresholds),
    )
