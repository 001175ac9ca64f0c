import json
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from ds_product_intel.pipeline.models import ProductRecord, RawSignalInput


class Base(DeclarativeBase):
    pass


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    source_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    key_features_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")  # JSON list
    pain_points_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")  # JSON list
    target_demographic: Mapped[str | None] = mapped_column(String(200), nullable=True)
    # Pricing
    cost_price: Mapped[float] = mapped_column(Float, default=0.0)
    suggested_retail_price: Mapped[float] = mapped_column(Float, default=0.0)
    original_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    shipping_weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # grams
    # Raw signals (supplied by collectors)
    google_trends_growth: Mapped[float] = mapped_column(Float, default=0.0)
    sales_velocity: Mapped[float] = mapped_column(Float, default=0.0)
    social_momentum: Mapped[float] = mapped_column(Float, default=0.0)
    ad_library_count: Mapped[int] = mapped_column(Integer, default=0)
    shopify_store_count: Mapped[int] = mapped_column(Integer, default=0)
    amazon_seller_count: Mapped[int] = mapped_column(Integer, default=0)
    # Latest scores (null until first scored)
    trend_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    competition_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    margin_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overall_score: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    first_seen: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    scores: Mapped[list["ProductScore"]] = relationship(back_populates="product")
    ad_creatives: Mapped[list["AdCreative"]] = relationship(back_populates="product")

    @property
    def key_features(self) -> list[str]:
        return _load_list(self.key_features_json)

    @property
    def pain_points(self) -> list[str]:
        return _load_list(self.pain_points_json)

    def to_record(self) -> ProductRecord:
        return ProductRecord(
            name=self.name,
            category=self.category,
            signals=RawSignalInput(
                google_trends_growth=self.google_trends_growth,
                sales_velocity=self.sales_velocity,
                social_momentum=self.social_momentum,
                ad_library_count=self.ad_library_count,
                shopify_store_count=self.shopify_store_count,
                amazon_seller_count=self.amazon_seller_count,
                cost_price=self.cost_price,
                suggested_retail_price=self.suggested_retail_price,
                shipping_weight=self.shipping_weight,
            ),
            description=self.description,
            key_features=tuple(self.key_features),
            pain_points=tuple(self.pain_points),
            target_demographic=self.target_demographic,
            original_price=self.original_price,
            image_url=self.image_url,
        )


class ProductScore(Base):
    """One scoring run. Rows are only ever appended."""

    __tablename__ = "product_scores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), nullable=False, index=True)
    trend_score: Mapped[int] = mapped_column(Integer, nullable=False)
    competition_score: Mapped[int] = mapped_column(Integer, nullable=False)
    margin_score: Mapped[int] = mapped_column(Integer, nullable=False)
    overall_score: Mapped[int] = mapped_column(Integer, nullable=False)
    # Raw signal snapshot at scoring time
    google_trends_value: Mapped[float] = mapped_column(Float, default=0.0)
    social_mentions: Mapped[float] = mapped_column(Float, default=0.0)
    ad_library_count: Mapped[int] = mapped_column(Integer, default=0)
    competitor_store_count: Mapped[int] = mapped_column(Integer, default=0)
    recorded_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    product: Mapped[Product] = relationship(back_populates="scores")


class AdCreative(Base):
    __tablename__ = "ad_creatives"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(30), nullable=False)  # CreativeType
    platform: Mapped[str] = mapped_column(String(30), nullable=False)  # AdPlatform
    headline: Mapped[str | None] = mapped_column(String(100), nullable=True)
    primary_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(String(100), nullable=True)
    call_to_action: Mapped[str | None] = mapped_column(String(50), nullable=True)
    framework: Mapped[str | None] = mapped_column(String(30), nullable=True)
    image_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_script: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON blob
    generated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    product: Mapped[Product] = relationship(back_populates="ad_creatives")


def _load_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return []
    return [str(item) for item in data] if isinstance(data, list) else []
