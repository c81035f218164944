"""Shared fixtures: a throwaway SQLite database, seeded reference data and an API client."""

from dataclasses import dataclass
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from catalog_api.core.dependencies import get_db
from catalog_api.main import app
from catalog_api.models import Base, Brand, Category, Seller, Tag
from catalog_api.schemas import ProductCreateRequest


@dataclass
class ReferenceData:
    """Ids of the rows every test can point products at."""

    seller_id: int
    other_seller_id: int
    brand_id: int
    other_brand_id: int
    parent_category_id: int
    category_id: int
    tag_ids: list[int]


def _enable_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine(tmp_path):
    """File-backed SQLite so every session gets its own connection."""
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    event.listen(test_engine.sync_engine, "connect", _enable_foreign_keys)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def reference_data(session_maker) -> ReferenceData:
    async with session_maker() as session:
        sellers = [
            Seller(name="Hanbit Store", rating=4.7, contact_email="hello@hanbit.example"),
            Seller(name="Daily Goods", rating=4.2),
        ]
        brands = [
            Brand(name="Nordlys", slug="nordlys", website="https://nordlys.example"),
            Brand(name="Sora Living", slug="sora-living"),
        ]
        parent = Category(name="Clothing", slug="clothing", parent=None, level=1)
        child = Category(name="Outerwear", slug="outerwear", parent=parent, level=2)
        tags = [
            Tag(name="New arrival", slug="new-arrival"),
            Tag(name="Best seller", slug="best-seller"),
            Tag(name="Eco friendly", slug="eco-friendly"),
        ]
        session.add_all([*sellers, *brands, parent, child, *tags])
        await session.commit()

        return ReferenceData(
            seller_id=sellers[0].id,
            other_seller_id=sellers[1].id,
            brand_id=brands[0].id,
            other_brand_id=brands[1].id,
            parent_category_id=parent.id,
            category_id=child.id,
            tag_ids=[tag.id for tag in tags],
        )


@pytest_asyncio.fixture
async def session(session_maker, reference_data):
    """Session the code under test runs in; tests commit or roll back explicitly."""
    async with session_maker() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def client(session_maker, reference_data):
    """API client whose requests use the test database."""

    async def override_get_db():
        async with session_maker() as db_session:
            try:
                yield db_session
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as api_client:
        yield api_client
    app.dependency_overrides.clear()


def product_payload(refs: ReferenceData, **overrides: Any) -> dict[str, Any]:
    """JSON body of a complete create request."""
    payload: dict[str, Any] = {
        "name": "Linen shirt",
        "slug": "linen-shirt",
        "short_description": "Relaxed fit linen shirt",
        "full_description": "Washed linen, mother-of-pearl buttons.",
        "seller_id": refs.seller_id,
        "brand_id": refs.brand_id,
        "detail": {
            "weight": 0.3,
            "dimensions": {"width": 50, "height": 70, "depth": 1},
            "materials": "100% linen",
            "country_of_origin": "KR",
            "care_instructions": "Cold wash",
        },
        "price": {"base_price": 59000, "sale_price": 49000, "cost_price": 21000},
        "category_ids": [refs.category_id],
        "tag_ids": refs.tag_ids[:2],
        "option_groups": [
            {
                "name": "Size",
                "display_order": 0,
                "options": [
                    {"name": "M", "stock": 5, "sku": "LS-M"},
                    {"name": "L", "stock": 3, "sku": "LS-L", "additional_price": 1000, "display_order": 1},
                ],
            },
        ],
        "images": [
            {"url": "https://img.example/linen-shirt.jpg", "alt_text": "Front", "is_primary": True},
            {"url": "https://img.example/linen-shirt-back.jpg", "display_order": 1},
        ],
    }
    payload.update(overrides)
    return payload


def product_request(refs: ReferenceData, **overrides: Any) -> ProductCreateRequest:
    return ProductCreateRequest.model_validate(product_payload(refs, **overrides))


@pytest.fixture
def make_payload(reference_data):
    def factory(**overrides: Any) -> dict[str, Any]:
        return product_payload(reference_data, **overrides)

    return factory


@pytest.fixture
def make_request(reference_data):
    def factory(**overrides: Any) -> ProductCreateRequest:
        return product_request(reference_data, **overrides)

    return factory
