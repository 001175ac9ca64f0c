"""
Tests for the shared signal normalization helpers.
"""
import math

from ds_product_intel.pipeline.models import RawSignalInput
from ds_product_intel.pipeline.normalizer import clamp, coerce_signal, normalize, round_score
from ds_product_intel.pipeline.overall_score import calculate_all_scores


class TestCoerceSignal:
    """Tests for coerce_signal."""

    def test_numbers_pass_through(self):
        """Test that ints and floats come back as floats."""
        assert coerce_signal(5) == 5.0
        assert coerce_signal(-2.5) == -2.5

    def test_missing_values_become_zero(self):
        """Test that None, NaN and junk coerce to 0."""
        assert coerce_signal(None) == 0.0
        assert coerce_signal(math.nan) == 0.0
        assert coerce_signal("not a number") == 0.0
        assert coerce_signal(True) == 0.0

    def test_numeric_strings(self):
        """Test that numeric strings are parsed."""
        assert coerce_signal("42") == 42.0


class TestClamp:
    """Tests for clamp."""

    def test_within_range(self):
        assert clamp(55) == 55.0

    def test_out_of_range(self):
        """Test both bounds."""
        assert clamp(-10) == 0.0
        assert clamp(250) == 100.0

    def test_custom_bounds(self):
        assert clamp(7, 1, 5) == 5.0


class TestNormalize:
    """Tests for normalize."""

    def test_linear_scaling(self):
        assert normalize(25, 0, 50) == 50.0

    def test_clamped_above_cap(self):
        assert normalize(500, 0, 50) == 100.0

    def test_degenerate_range(self):
        """Test that an empty range yields 0 instead of dividing by zero."""
        assert normalize(10, 5, 5) == 0.0
        assert normalize(10, 6, 5) == 0.0


class TestRoundScore:
    """Tests for round_score."""

    def test_rounds_half_up(self):
        assert round_score(44.5) == 45
        assert round_score(0.5) == 1
        assert round_score(44.4) == 44

    def test_clamps(self):
        assert round_score(-3) == 0
        assert round_score(130) == 100

    def test_returns_int(self):
        assert isinstance(round_score(12.2), int)


class TestOversizedIntegers:
    """Tests for integers too large to convert to float."""

    def test_saturate_by_sign(self):
        assert coerce_signal(10**400) == math.inf
        assert coerce_signal(-10**400) == -math.inf

    def test_clamped_into_score_range(self):
        assert clamp(10**400) == 100.0
        assert clamp(-10**400) == 0.0
        assert normalize(10**400, 0, 50) == 100.0
        assert round_score(10**400) == 100

    def test_full_scoring_does_not_raise(self):
        """Test that oversized signals give valid scores instead of an exception."""
        result = calculate_all_scores(RawSignalInput(
            google_trends_growth=10**400,
            ad_library_count=10**400,
            cost_price=10**400,
            suggested_retail_price=25,
        ))
        assert result.trend_score == 40
        assert result.competition_score == 60
        assert result.margin_score == 0
        for score in (result.trend_score, result.competition_score, result.margin_score, result.overall_score):
            assert 0 <= score <= 100
