"""Ad creative records assembled from the generators.

An AdCreativeRecord is the storage/presentation shape of one creative: ad copy,
a static image brief, or a serialized video script.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ds_product_intel.pipeline.models import ProductInfo

from .ad_copy import generate_all_ad_copy
from .image_prompts import generate_ad_composition_specs, generate_multiple_lifestyle_prompts
from .video_script import generate_all_video_scripts


class CreativeType(str, enum.Enum):
    AD_COPY = "AD_COPY"
    STATIC_IMAGE = "STATIC_IMAGE"
    CAROUSEL = "CAROUSEL"
    VIDEO_SCRIPT = "VIDEO_SCRIPT"


class AdPlatform(str, enum.Enum):
    FACEBOOK = "FACEBOOK"
    INSTAGRAM = "INSTAGRAM"
    TIKTOK = "TIKTOK"


@dataclass(frozen=True)
class AdCreativeRecord:
    type: CreativeType
    platform: AdPlatform
    headline: str | None = None
    primary_text: str | None = None
    description: str | None = None
    call_to_action: str | None = None
    framework: str | None = None
    image_prompt: str | None = None
    video_script: str | None = None  # JSON


def build_creatives(info: ProductInfo) -> list[AdCreativeRecord]:
    """Ad copy variations, one static image brief and the three video scripts."""
    creatives: list[AdCreativeRecord] = []

    ad_copy = generate_all_ad_copy(info)
    for variation in ad_copy.variations:
        creatives.append(AdCreativeRecord(
            type=CreativeType.AD_COPY,
            platform=AdPlatform.FACEBOOK,
            headline=variation.headline,
            primary_text=variation.primary_text,
            description=variation.description,
            call_to_action=variation.call_to_action,
            framework=variation.framework.value,
        ))

    specs = generate_ad_composition_specs(info.price)
    creatives.append(AdCreativeRecord(
        type=CreativeType.STATIC_IMAGE,
        platform=AdPlatform.INSTAGRAM,
        headline=specs.price_badge,
        description=specs.urgency_text,
        call_to_action=specs.call_to_action,
        image_prompt=generate_multiple_lifestyle_prompts(info)[0],
    ))

    for script in generate_all_video_scripts(info):
        creatives.append(AdCreativeRecord(
            type=CreativeType.VIDEO_SCRIPT,
            platform=AdPlatform(script.platform.value.upper()),
            video_script=script.to_json(),
        ))

    return creatives
