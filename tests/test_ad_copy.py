"""
Tests for template-based ad copy generation.
"""
from ds_product_intel.generation.ad_copy import (
    CALL_TO_ACTIONS,
    DESCRIPTION_MAX_CHARS,
    HEADLINE_MAX_CHARS,
    PRIMARY_TEXT_MAX_CHARS,
    AdFramework,
    discount_percent,
    generate_aida_copy,
    generate_all_ad_copy,
    generate_feature_benefit_copy,
    generate_pas_copy,
    truncate,
)
from ds_product_intel.pipeline.models import ProductInfo

LONG_NAME = "Ultra Premium Self-Heating Ergonomic Neck and Shoulder Massager Deluxe Edition"


def _info(**overrides) -> ProductInfo:
    fields = dict(
        product_name="Posture Corrector",
        category="Health & Beauty",
        price=29.99,
        product_description="Adjustable brace that relieves back pain",
        key_features=("Adjustable straps", "Breathable fabric"),
        pain_points=("constant back pain at work",),
    )
    fields.update(overrides)
    return ProductInfo(**fields)


class TestTruncate:
    """Tests for truncate."""

    def test_short_text_unchanged(self):
        assert truncate("hello", 40) == "hello"

    def test_long_text_cut_to_limit(self):
        assert len(truncate("x" * 100, 40)) == 40


class TestDiscountPercent:
    """Tests for discount_percent."""

    def test_discount(self):
        assert discount_percent(25, 50) == 50

    def test_no_original_price(self):
        assert discount_percent(25, None) == 0
        assert discount_percent(25, 0) == 0

    def test_price_above_original(self):
        assert discount_percent(60, 50) == 0


class TestFrameworks:
    """Tests for the AIDA, PAS and Feature-Benefit generators."""

    def test_aida_with_discount(self):
        copy = generate_aida_copy(_info(original_price=59.98))
        assert copy.headline == "50% OFF - Posture Corrector"
        assert copy.call_to_action == "Shop Now"
        assert copy.framework is AdFramework.AIDA

    def test_aida_without_discount(self):
        copy = generate_aida_copy(_info())
        assert copy.headline == "Discover Posture Corrector"
        assert copy.primary_text.startswith("Adjustable straps. ")

    def test_pas_uses_first_pain_point_words(self):
        copy = generate_pas_copy(_info())
        assert copy.headline == "Stop constant back pain"
        assert copy.call_to_action == "Learn More"
        assert copy.framework is AdFramework.PAS

    def test_feature_benefit(self):
        copy = generate_feature_benefit_copy(_info())
        assert copy.headline == "Posture Corrector - Adjustable straps"
        assert copy.call_to_action == "Order Now"
        assert copy.primary_text.startswith("Adjustable straps means Breathable fabric.")

    def test_missing_text_fields_fall_back(self):
        """Test that products with no description, features or pain points still get copy."""
        bare = ProductInfo(product_name="Gadget", category="Electronics")
        for generator in (generate_aida_copy, generate_pas_copy, generate_feature_benefit_copy):
            copy = generator(bare)
            assert copy.headline
            assert copy.primary_text
            assert copy.description
        assert generate_pas_copy(bare).headline == "Stop everyday frustrations"


class TestCharacterLimits:
    """Tests that every generated field respects the ad network limits."""

    def test_long_inputs_are_truncated_exactly(self):
        info = _info(product_name=LONG_NAME, product_description="d" * 300)
        copy = generate_all_ad_copy(info)

        assert len(copy.variations[0].headline) == HEADLINE_MAX_CHARS
        assert len(copy.variations[0].primary_text) == PRIMARY_TEXT_MAX_CHARS
        for variation in copy.variations:
            assert len(variation.headline) <= HEADLINE_MAX_CHARS
            assert len(variation.primary_text) <= PRIMARY_TEXT_MAX_CHARS
            assert len(variation.description) <= DESCRIPTION_MAX_CHARS
        assert all(len(h) <= HEADLINE_MAX_CHARS for h in copy.headlines)
        assert all(len(t) <= PRIMARY_TEXT_MAX_CHARS for t in copy.primary_texts)
        assert all(len(d) <= DESCRIPTION_MAX_CHARS for d in copy.descriptions)

    def test_aida_description_truncated(self):
        copy = generate_aida_copy(_info())
        assert len(copy.description) == DESCRIPTION_MAX_CHARS


class TestGenerateAllAdCopy:
    """Tests for generate_all_ad_copy."""

    def test_package_shape(self):
        copy = generate_all_ad_copy(_info())
        assert len(copy.headlines) == 5
        assert len(copy.primary_texts) == 3
        assert len(copy.descriptions) == 3
        assert copy.call_to_actions == list(CALL_TO_ACTIONS)
        assert [v.framework for v in copy.variations] == [
            AdFramework.AIDA,
            AdFramework.PAS,
            AdFramework.FEATURE_BENEFIT,
        ]

    def test_deterministic(self):
        assert generate_all_ad_copy(_info()) == generate_all_ad_copy(_info())
