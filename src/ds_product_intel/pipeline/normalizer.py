import math

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def coerce_signal(value) -> float:
    """Turn a raw signal into a float. Missing, NaN or non-numeric input becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        value = float(value)
    except OverflowError:
        # Integers beyond float range saturate like infinity
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def clamp(value, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return min(high, max(low, coerce_signal(value)))


def normalize(value, min_value: float, max_value: float) -> float:
    """Linearly scale value from [min_value, max_value] onto 0-100, clamped."""
    if max_value <= min_value:
        return SCORE_MIN
    scaled = (coerce_signal(value) - min_value) / (max_value - min_value) * 100
    return clamp(scaled)


def round_score(value) -> int:
    """Round half up and clamp to an integer score in [0, 100]."""
    return int(math.floor(clamp(value) + 0.5))
