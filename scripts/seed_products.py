"""Seed the products table with sample dropshipping products and score them."""

import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from sqlalchemy import select

from ds_product_intel.db.models import Product
from ds_product_intel.db.session import async_session_factory, init_db
from ds_product_intel.pipeline.runner import run_scoring

# name, category, description, cost, retail, weight (g),
# (trends growth, sales velocity, social momentum), (ad library, shopify stores, amazon sellers),
# key features
PRODUCTS = [
    (
        "LED Strip Lights RGB 5M", "Home & Garden",
        "Color changing LED strip lights with remote control, perfect for room decoration and gaming setups.",
        4.99, 24.99, 300, (85, 78, 92), (45, 120, 89),
        ["16 million colors", "Remote control included", "Easy peel-and-stick install"],
    ),
    (
        "Portable Blender USB Rechargeable", "Kitchen",
        "Mini portable blender for smoothies and shakes, USB rechargeable with 6 blades.",
        8.50, 34.99, 500, (72, 88, 95), (78, 200, 156),
        ["6 stainless steel blades", "USB rechargeable", "Fits in any bag"],
    ),
    (
        "Wireless Earbuds Pro", "Electronics",
        "True wireless earbuds with noise cancellation, 30 hour battery life, and touch controls.",
        12.99, 49.99, 100, (65, 92, 88), (150, 350, 280),
        ["Active noise cancellation", "30 hour battery life", "Touch controls"],
    ),
    (
        "Posture Corrector Back Brace", "Health & Beauty",
        "Adjustable posture corrector for men and women, helps relieve back pain and improve posture.",
        5.99, 29.99, 200, (78, 85, 82), (65, 180, 145),
        ["Adjustable straps", "Breathable fabric", "Invisible under clothes"],
    ),
    (
        "Smart Watch Fitness Tracker", "Electronics",
        "Waterproof smart watch with heart rate monitor, sleep tracking, and 7-day battery life.",
        15.99, 59.99, 150, (70, 90, 85), (200, 400, 320),
        ["Heart rate monitor", "Sleep tracking", "7-day battery life"],
    ),
    (
        "Pet Hair Remover Roller", "Pet Supplies",
        "Reusable pet hair remover for furniture, clothes, and car seats. No batteries or refills needed.",
        3.50, 19.99, 250, (82, 75, 90), (35, 95, 78),
        ["Reusable", "No batteries needed", "Works on any fabric"],
    ),
    (
        "Magnetic Phone Mount for Car", "Automotive",
        "Universal magnetic car phone holder with strong magnets and 360 degree rotation.",
        2.99, 14.99, 100, (55, 70, 65), (180, 450, 380),
        ["Strong magnets", "360 degree rotation", "Universal fit"],
    ),
    (
        "Silicone Kitchen Utensil Set", "Kitchen",
        "10-piece heat resistant silicone cooking utensils with wooden handles.",
        9.99, 39.99, 800, (60, 72, 68), (90, 220, 175),
        ["10 pieces", "Heat resistant", "Wooden handles"],
    ),
    (
        "Neck Massager with Heat", "Health & Beauty",
        "Electric neck and shoulder massager with heat therapy and adjustable intensity.",
        18.99, 69.99, 600, (88, 82, 78), (55, 140, 110),
        ["Heat therapy", "Adjustable intensity", "Cordless design"],
    ),
    (
        "Collapsible Water Bottle", "Sports & Outdoors",
        "BPA-free silicone collapsible water bottle, perfect for travel and outdoor activities.",
        4.50, 22.99, 200, (75, 68, 72), (42, 110, 95),
        ["BPA-free silicone", "Collapses to pocket size", "Leak-proof lid"],
    ),
    (
        "Ring Light with Tripod Stand", "Electronics",
        "10 inch LED ring light with phone holder and adjustable tripod for streaming and selfies.",
        11.99, 44.99, 1200, (68, 85, 92), (120, 280, 220),
        ["10 inch LED ring", "Adjustable tripod", "Phone holder"],
    ),
    (
        "Resistance Bands Set", "Sports & Outdoors",
        "5-piece resistance bands set with different resistance levels for home workouts.",
        6.99, 29.99, 400, (72, 78, 80), (85, 200, 165),
        ["5 resistance levels", "Door anchor included", "Carry bag"],
    ),
]


async def seed() -> int:
    await init_db()
    created = 0
    async with async_session_factory() as session:
        for (name, category, description, cost, retail, weight,
             (growth, velocity, momentum), (ads, stores, sellers), features) in PRODUCTS:
            existing = (
                await session.execute(select(Product).where(Product.name == name))
            ).scalar_one_or_none()
            if existing:
                print(f"  Exists:  {name}")
                continue
            session.add(Product(
                name=name,
                category=category,
                description=description,
                key_features_json=json.dumps(features),
                cost_price=cost,
                suggested_retail_price=retail,
                shipping_weight=weight,
                google_trends_growth=growth,
                sales_velocity=velocity,
                social_momentum=momentum,
                ad_library_count=ads,
                shopify_store_count=stores,
                amazon_seller_count=sellers,
            ))
            created += 1
            print(f"  Created: {name}")
        await session.commit()
    return created


async def main():
    created = await seed()
    print(f"\nSeeded {created} products.")
    scored = await run_scoring()
    print(f"Scored {scored} products.")


if __name__ == "__main__":
    asyncio.run(main())
