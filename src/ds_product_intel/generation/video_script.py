"""Video ad scripts for TikTok, Facebook and Instagram.

Each script type is a hand-written template with a fixed number of scenes,
fixed per-scene durations and a fixed total duration. Product details are
substituted into the prose; identical input always yields identical output.
"""

from __future__ import annotations

import enum
import json
from dataclasses import asdict, dataclass

from ds_product_intel.pipeline.models import ProductInfo

from .text import format_price, pick


class ScriptType(str, enum.Enum):
    UGC_TESTIMONIAL = "ugc_testimonial"
    PROBLEM_SOLUTION = "problem_solution"
    PRODUCT_SHOWCASE = "product_showcase"


class VideoPlatform(str, enum.Enum):
    TIKTOK = "tiktok"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


@dataclass(frozen=True)
class VideoScene:
    scene_number: int
    duration_seconds: int
    visual_description: str
    voiceover_text: str
    text_overlay: str
    music_suggestion: str


@dataclass(frozen=True)
class VideoScript:
    type: ScriptType
    total_duration: int
    scenes: tuple[VideoScene, ...]
    platform: VideoPlatform

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        data["platform"] = self.platform.value
        data["scenes"] = [asdict(s) for s in self.scenes]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def generate_video_script_system_prompt(target_demographic: str | None, pain_points=None) -> str:
    pain_points_text = ", ".join(pain_points) if pain_points else "common frustrations with existing solutions"
    audience = target_demographic or "a broad"
    return (
        "You are an expert direct-response video ad copywriter specializing in TikTok and "
        "Facebook ads. Create scroll-stopping video scripts that follow the "
        "hook-problem-solution-CTA framework. The hook must capture attention in the first "
        "2 seconds. Use conversational, relatable language. Include specific text overlays "
        f"that reinforce key points. Target {audience} audience with pain points around "
        f"{pain_points_text}."
    )


def generate_ugc_testimonial_script(info: ProductInfo) -> VideoScript:
    """15-second UGC-style testimonial for TikTok."""
    scenes = (
        VideoScene(
            scene_number=1,
            duration_seconds=3,
            visual_description="Close-up of person looking excited, holding phone/product",
            voiceover_text=f"OMG you guys, I finally found the perfect {info.product_name}!",
            text_overlay="GAME CHANGER",
            music_suggestion="Upbeat trending TikTok sound",
        ),
        VideoScene(
            scene_number=2,
            duration_seconds=5,
            visual_description="Product demonstration in natural setting",
            voiceover_text="Look at this - it actually works! I've been using it for a week and I'm obsessed.",
            text_overlay="Watch this...",
            music_suggestion="Continue same track",
        ),
        VideoScene(
            scene_number=3,
            duration_seconds=4,
            visual_description="Before/after or results showcase",
            voiceover_text="The difference is insane. Why didn't I get this sooner?",
            text_overlay="THE RESULTS",
            music_suggestion="Build to climax",
        ),
        VideoScene(
            scene_number=4,
            duration_seconds=3,
            visual_description="Person pointing at link, excited expression",
            voiceover_text="Link in bio - trust me, you need this!",
            text_overlay=f"Only {format_price(info.price)} - LINK IN BIO",
            music_suggestion="Sound drop/beat",
        ),
    )
    return VideoScript(
        type=ScriptType.UGC_TESTIMONIAL,
        total_duration=15,
        scenes=scenes,
        platform=VideoPlatform.TIKTOK,
    )


def generate_problem_solution_script(info: ProductInfo) -> VideoScript:
    """30-second problem/solution ad for Facebook."""
    pain_point = pick(info.pain_points, 0, "struggling with everyday problems")
    first_feature = pick(info.key_features, 0, "solves the problem instantly")
    second_feature = pick(info.key_features, 1, "is incredibly easy to use")
    price = format_price(info.price)

    scenes = (
        VideoScene(
            scene_number=1,
            duration_seconds=3,
            visual_description="Person frustrated with current solution",
            voiceover_text=f"Are you tired of {pain_point}?",
            text_overlay="STOP STRUGGLING",
            music_suggestion="Tense, building music",
        ),
        VideoScene(
            scene_number=2,
            duration_seconds=5,
            visual_description="Montage of common frustrations",
            voiceover_text="I used to spend hours dealing with this. Nothing worked. Until I found this.",
            text_overlay="I tried EVERYTHING",
            music_suggestion="Continue building",
        ),
        VideoScene(
            scene_number=3,
            duration_seconds=3,
            visual_description="Product reveal with dramatic lighting",
            voiceover_text=f"Introducing the {info.product_name}.",
            text_overlay=info.product_name.upper(),
            music_suggestion="Music shift - positive, uplifting",
        ),
        VideoScene(
            scene_number=4,
            duration_seconds=8,
            visual_description="Product demonstration showing key features",
            voiceover_text=f"It {first_feature}. Plus, it {second_feature}.",
            text_overlay="WATCH THIS",
            music_suggestion="Upbeat, confident",
        ),
        VideoScene(
            scene_number=5,
            duration_seconds=5,
            visual_description="Happy customer using product, lifestyle shot",
            voiceover_text="Now I can finally enjoy my day without worrying about this. Life changing.",
            text_overlay="FINALLY!",
            music_suggestion="Feel-good vibes",
        ),
        VideoScene(
            scene_number=6,
            duration_seconds=6,
            visual_description="Product shot with price, CTA overlay",
            voiceover_text=f"Get yours today for just {price}. Limited stock available. Click the link now!",
            text_overlay=f"{price} - TAP TO SHOP",
            music_suggestion="Urgency beat",
        ),
    )
    return VideoScript(
        type=ScriptType.PROBLEM_SOLUTION,
        total_duration=30,
        scenes=scenes,
        platform=VideoPlatform.FACEBOOK,
    )


def generate_product_showcase_script(info: ProductInfo) -> VideoScript:
    """15-second product showcase for Instagram."""
    price = format_price(info.price)
    scenes = (
        VideoScene(
            scene_number=1,
            duration_seconds=2,
            visual_description="Eye-catching product shot, dramatic reveal",
            voiceover_text=f"This {info.product_name} is going viral.",
            text_overlay="TRENDING NOW",
            music_suggestion="Trending audio hook",
        ),
        VideoScene(
            scene_number=2,
            duration_seconds=4,
            visual_description="360-degree product view, highlighting design",
            voiceover_text="Premium quality. Stunning design.",
            text_overlay="PREMIUM QUALITY",
            music_suggestion="Sleek, modern beat",
        ),
        VideoScene(
            scene_number=3,
            duration_seconds=5,
            visual_description="Product in action, demonstrating key feature",
            voiceover_text="And it actually works. See for yourself.",
            text_overlay=pick(info.key_features, 0, "").upper() or "AMAZING RESULTS",
            music_suggestion="Build momentum",
        ),
        VideoScene(
            scene_number=4,
            duration_seconds=4,
            visual_description="Price reveal with urgency elements",
            voiceover_text=f"Only {price}. Selling fast. Get yours now.",
            text_overlay=f"{price} - SHOP NOW",
            music_suggestion="Drop/impact sound",
        ),
    )
    return VideoScript(
        type=ScriptType.PRODUCT_SHOWCASE,
        total_duration=15,
        scenes=scenes,
        platform=VideoPlatform.INSTAGRAM,
    )


def generate_all_video_scripts(info: ProductInfo) -> list[VideoScript]:
    return [
        generate_ugc_testimonial_script(info),
        generate_problem_solution_script(info),
        generate_product_showcase_script(info),
    ]
