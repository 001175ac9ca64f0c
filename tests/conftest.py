"""
Shared pytest fixtures: sample product rows, an in-memory async session and an
API client backed by a temporary SQLite file.
"""
import json

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool, StaticPool

from ds_product_intel.api.app import create_app
from ds_product_intel.db.models import Base, Product
from ds_product_intel.db.session import get_session


def make_product(name: str = "Neck Massager", **overrides) -> Product:
    """A product whose default signals score hot (overall 85+)."""
    fields = dict(
        name=name,
        category="Health & Beauty",
        description="Electric neck massager with heat therapy",
        key_features_json=json.dumps(["Heat therapy", "Adjustable intensity"]),
        pain_points_json=json.dumps(["stiff shoulders"]),
        cost_price=10.0,
        suggested_retail_price=60.0,
        shipping_weight=300,
        google_trends_growth=90,
        sales_velocity=90,
        social_momentum=90,
        ad_library_count=0,
        shopify_store_count=0,
        amazon_seller_count=1,
    )
    fields.update(overrides)
    return Product(**fields)


def make_cold_product(name: str = "Phone Mount", **overrides) -> Product:
    """A product in a saturated market with thin margins (overall below 60)."""
    fields = dict(
        category="Automotive",
        cost_price=10.0,
        suggested_retail_price=12.0,
        shipping_weight=100,
        google_trends_growth=20,
        sales_velocity=20,
        social_momentum=20,
        ad_library_count=200,
        shopify_store_count=400,
        amazon_seller_count=300,
    )
    fields.update(overrides)
    return make_product(name, **fields)


@pytest_asyncio.fixture
async def session():
    """Async session on a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def seed(db_path):
    """Insert products synchronously; returns their ids in insertion order."""

    def _seed(*products: Product) -> list[int]:
        engine = create_engine(f"sqlite:///{db_path}")
        with Session(engine) as s:
            s.add_all(products)
            s.commit()
            ids = [p.id for p in products]
        engine.dispose()
        return ids

    return _seed


@pytest.fixture
def client(db_path):
    """TestClient without lifespan (no scheduler), sessions on the temp database."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_session():
        async with factory() as s:
            yield s

    app = create_app()
    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
