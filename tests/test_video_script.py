"""
Tests for video ad script templates.
"""
import json

from ds_product_intel.generation.video_script import (
    ScriptType,
    VideoPlatform,
    generate_all_video_scripts,
    generate_problem_solution_script,
    generate_product_showcase_script,
    generate_ugc_testimonial_script,
    generate_video_script_system_prompt,
)
from ds_product_intel.pipeline.models import ProductInfo


def _info(**overrides) -> ProductInfo:
    fields = dict(
        product_name="Neck Massager",
        category="Health & Beauty",
        price=69.99,
        key_features=("melts away tension", "heats up in seconds"),
        pain_points=("stiff shoulders after work",),
    )
    fields.update(overrides)
    return ProductInfo(**fields)


class TestTemplates:
    """Tests for the per-type script templates."""

    def test_ugc_testimonial(self):
        script = generate_ugc_testimonial_script(_info())
        assert script.type is ScriptType.UGC_TESTIMONIAL
        assert script.platform is VideoPlatform.TIKTOK
        assert script.total_duration == 15
        assert len(script.scenes) == 4
        assert script.scenes[-1].text_overlay == "Only $69.99 - LINK IN BIO"

    def test_problem_solution(self):
        script = generate_problem_solution_script(_info())
        assert script.type is ScriptType.PROBLEM_SOLUTION
        assert script.platform is VideoPlatform.FACEBOOK
        assert script.total_duration == 30
        assert len(script.scenes) == 6
        assert script.scenes[0].voiceover_text == "Are you tired of stiff shoulders after work?"
        assert script.scenes[2].text_overlay == "NECK MASSAGER"

    def test_product_showcase(self):
        script = generate_product_showcase_script(_info())
        assert script.type is ScriptType.PRODUCT_SHOWCASE
        assert script.platform is VideoPlatform.INSTAGRAM
        assert script.total_duration == 15
        assert script.scenes[2].text_overlay == "MELTS AWAY TENSION"

    def test_scene_durations_sum_to_total(self):
        for script in generate_all_video_scripts(_info()):
            assert sum(s.duration_seconds for s in script.scenes) == script.total_duration
            assert [s.scene_number for s in script.scenes] == list(range(1, len(script.scenes) + 1))

    def test_fallback_prose(self):
        """Test that missing features and pain points use generic prose."""
        bare = ProductInfo(product_name="Gadget", category="Electronics")
        assert generate_product_showcase_script(bare).scenes[2].text_overlay == "AMAZING RESULTS"
        problem = generate_problem_solution_script(bare)
        assert "struggling with everyday problems" in problem.scenes[0].voiceover_text
        assert "$0.00" in problem.scenes[-1].text_overlay


class TestSerialization:
    """Tests for VideoScript.to_json."""

    def test_json_round_trip_shape(self):
        data = json.loads(generate_ugc_testimonial_script(_info()).to_json())
        assert data["type"] == "ugc_testimonial"
        assert data["platform"] == "tiktok"
        assert len(data["scenes"]) == 4
        assert data["scenes"][0]["scene_number"] == 1

    def test_byte_identical(self):
        assert generate_problem_solution_script(_info()).to_json() == generate_problem_solution_script(_info()).to_json()


class TestSystemPrompt:
    """Tests for generate_video_script_system_prompt."""

    def test_with_pain_points(self):
        prompt = generate_video_script_system_prompt("busy parents", ["no time", "mess"])
        assert "Target busy parents audience" in prompt
        assert "no time, mess" in prompt

    def test_defaults(self):
        prompt = generate_video_script_system_prompt(None)
        assert "common frustrations with existing solutions" in prompt


def test_generate_all_video_scripts_order():
    types = [s.type for s in generate_all_video_scripts(_info())]
    assert types == [ScriptType.UGC_TESTIMONIAL, ScriptType.PROBLEM_SOLUTION, ScriptType.PRODUCT_SHOWCASE]


def test_price_ties_round_up_in_overlays():
    script = generate_ugc_testimonial_script(_info(price=0.125))
    assert script.scenes[-1].text_overlay == "Only $0.13 - LINK IN BIO"
