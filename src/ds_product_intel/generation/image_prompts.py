"""Image creative briefs: lifestyle photo prompts and ad composition specs.

Produces the text brief an image model or designer would work from. No image
is generated here.
"""

from __future__ import annotations

from dataclasses import dataclass

from ds_product_intel.pipeline.models import ProductInfo

from .text import format_price

_DEMOGRAPHICS = {
    "Electronics": "tech-savvy young professionals",
    "Home & Garden": "modern homeowners",
    "Beauty": "style-conscious women aged 25-45",
    "Fashion Accessories": "fashion-forward millennials",
    "Sports": "active fitness enthusiasts",
    "Toys": "parents with young children",
    "Kitchen": "home cooking enthusiasts",
    "Fitness": "health-conscious adults",
    "Pet": "devoted pet owners",
    "Baby": "new parents",
}

_SETTINGS = {
    "Electronics": "a modern minimalist home office",
    "Home & Garden": "a beautifully decorated living space",
    "Beauty": "a bright, clean bathroom vanity",
    "Fashion Accessories": "an urban street setting",
    "Sports": "an outdoor fitness environment",
    "Toys": "a bright, cheerful playroom",
    "Kitchen": "a modern, well-lit kitchen",
    "Fitness": "a home gym or outdoor workout space",
    "Pet": "a cozy home environment",
    "Baby": "a warm, safe nursery",
}


@dataclass(frozen=True)
class OutputFormat:
    name: str
    width: int
    height: int
    platform: str


OUTPUT_FORMATS = (
    OutputFormat("square", 1080, 1080, "Instagram/Facebook feed"),
    OutputFormat("story", 1080, 1920, "Stories/Reels"),
    OutputFormat("link", 1200, 628, "Facebook link ads"),
)


@dataclass(frozen=True)
class AdCompositionSpecs:
    price_badge: str
    urgency_text: str
    call_to_action: str
    typography: str


def get_target_demographic(category: str) -> str:
    return _DEMOGRAPHICS.get(category, "modern consumers")


def get_setting_for_category(category: str) -> str:
    return _SETTINGS.get(category, "a clean, modern environment")


def generate_lifestyle_image_prompt(
    product_name: str,
    product_description: str,
    target_demographic: str,
    setting: str,
) -> str:
    return (
        f"Professional product photography of {product_name}, {product_description}, "
        f"being used by {target_demographic} in {setting}. Lifestyle photography style, "
        "soft natural lighting, shallow depth of field, high-end e-commerce aesthetic. "
        "No text overlays."
    )


def generate_multiple_lifestyle_prompts(info: ProductInfo) -> list[str]:
    """Three lifestyle prompts: category setting, studio, aspirational."""
    demographic = info.target_demographic or get_target_demographic(info.category)
    description = info.product_description or info.product_name
    settings = [
        get_setting_for_category(info.category),
        "a bright, naturally lit studio",
        "an aspirational lifestyle setting",
    ]
    return [
        generate_lifestyle_image_prompt(info.product_name, description, demographic, setting)
        for setting in settings
    ]


def generate_ad_composition_specs(price) -> AdCompositionSpecs:
    return AdCompositionSpecs(
        price_badge=f"Only {format_price(price)}",
        urgency_text="Limited Stock",
        call_to_action="Shop Now",
        typography="Inter or Poppins",
    )


def get_output_formats() -> list[OutputFormat]:
    return list(OUTPUT_FORMATS)
