"""
Tests for the competition score calculator.
"""
import pytest

from ds_product_intel.pipeline.competition_score import (
    calculate_competition_score,
    calculate_saturation,
    normalize_ad_library_count,
    normalize_amazon_seller_count,
    normalize_shopify_store_count,
)
from ds_product_intel.pipeline.models import CompetitionScoreInput


class TestChannelSaturation:
    """Tests for the per-channel normalizers."""

    def test_ad_library(self):
        assert normalize_ad_library_count(0) == 0.0
        assert normalize_ad_library_count(25) == 50.0
        assert normalize_ad_library_count(500) == 100.0

    def test_shopify_stores(self):
        assert normalize_shopify_store_count(10) == 50.0
        assert normalize_shopify_store_count(20) == 100.0

    def test_amazon_sellers_floor(self):
        """Test that a single seller counts as no saturation."""
        assert normalize_amazon_seller_count(1) == 0.0
        assert normalize_amazon_seller_count(0) == 0.0
        assert normalize_amazon_seller_count(50) == 100.0


class TestCalculateCompetitionScore:
    """Tests for calculate_competition_score."""

    def test_fully_saturated(self):
        data = CompetitionScoreInput(ad_library_count=50, shopify_store_count=20, amazon_seller_count=50)
        assert calculate_saturation(data) == pytest.approx(100.0)
        assert calculate_competition_score(data) == 0

    def test_untouched_market(self):
        data = CompetitionScoreInput(ad_library_count=0, shopify_store_count=0, amazon_seller_count=1)
        assert calculate_saturation(data) == 0.0
        assert calculate_competition_score(data) == 100

    def test_partial_saturation(self):
        data = CompetitionScoreInput(ad_library_count=25, shopify_store_count=10, amazon_seller_count=1)
        # 0.4*50 + 0.3*50 + 0 = 35
        assert calculate_competition_score(data) == 65

    def test_negative_counts(self):
        """Test that negative counts behave like zero."""
        data = CompetitionScoreInput(ad_library_count=-5, shopify_store_count=-1, amazon_seller_count=-3)
        assert calculate_competition_score(data) == 100
