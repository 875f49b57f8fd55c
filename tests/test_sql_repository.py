import uuid
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.catalog import filter_products, sort_products
from storefront.integrations.catalog.sql import SqlCatalogRepository
from storefront.models import Base, Category, Coupon, Product, ProductVariant
from storefront.schemas import FilterCriteria, SortKey

CLOTH_ID = uuid.uuid4()
TOWEL_ID = uuid.uuid4()
WAX_ID = uuid.uuid4()


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    created = datetime(2024, 1, 1, tzinfo=UTC)

    async with factory() as session:
        session.add(Category(id=CLOTH_ID, name="Microfiber Cloth", slug="microfiber-cloth"))
        session.add_all(
            [
                Product(
                    id=TOWEL_ID,
                    name="Plush Towel",
                    product_code="MF-350",
                    main_category_id=CLOTH_ID,
                    popularity_score=10,
                    is_microfiber=True,
                    created_at=created,
                    updated_at=created,
                ),
                Product(
                    id=WAX_ID,
                    name="Carnauba Wax",
                    price=650,
                    stock_quantity=0,
                    created_at=created + timedelta(days=1),
                    updated_at=created,
                ),
                Product(
                    name="Retired Brush",
                    is_active=False,
                    created_at=created,
                    updated_at=created,
                ),
            ]
        )
        session.add_all(
            [
                ProductVariant(
                    product_id=TOWEL_ID,
                    size="40x40",
                    color="Blue",
                    gsm=350,
                    price=299,
                    stock=4,
                    created_at=created,
                    updated_at=created,
                ),
                ProductVariant(
                    product_id=TOWEL_ID,
                    size="40x60",
                    color="Grey",
                    gsm=500,
                    base_price=449,
                    stock=0,
                    created_at=created + timedelta(minutes=1),
                    updated_at=created,
                ),
                ProductVariant(
                    product_id=TOWEL_ID,
                    size="60x90",
                    color="Red",
                    price=999,
                    stock=9,
                    is_active=False,
                    created_at=created + timedelta(minutes=2),
                    updated_at=created,
                ),
            ]
        )
        session.add_all(
            [
                Coupon(code="WELCOME10", discount_percent=10, min_order_amount=999, is_permanent=True),
                Coupon(
                    code="FLASH",
                    discount_percent=30,
                    expiry_date=datetime(2030, 1, 1, tzinfo=UTC),
                ),
            ]
        )
        await session.commit()

    yield factory
    await engine.dispose()


@pytest.mark.asyncio
async def test_fetch_products_builds_snapshots(session_factory: async_sessionmaker) -> None:
    async with session_factory() as session:
        products = await SqlCatalogRepository(session).fetch_products()

    assert [p["name"] for p in products] == ["Carnauba Wax", "Plush Towel"]

    towel = products[1]
    assert towel["id"] == str(TOWEL_ID)
    assert towel["category"] == {
        "id": str(CLOTH_ID),
        "name": "Microfiber Cloth",
        "slug": "microfiber-cloth",
    }
    assert towel["category_keys"] == ["microfiber-cloth", str(CLOTH_ID)]
    # Inactive variant left out
    assert [v["size"] for v in towel["variants"]] == ["40x40", "40x60"]
    assert towel["variants"][1]["base_price"] == 449


@pytest.mark.asyncio
async def test_snapshots_feed_filter_and_sort(session_factory: async_sessionmaker) -> None:
    async with session_factory() as session:
        products = await SqlCatalogRepository(session).fetch_products()

    in_stock = filter_products(products, FilterCriteria(in_stock_only=True))
    assert [p["name"] for p in in_stock] == ["Plush Towel"]

    cloths = filter_products(products, FilterCriteria(categories=("microfiber",)))
    assert [p["name"] for p in cloths] == ["Plush Towel"]

    cheapest_first = sort_products(products, SortKey.PRICE_LOW_HIGH)
    assert [p["name"] for p in cheapest_first] == ["Plush Towel", "Carnauba Wax"]


@pytest.mark.asyncio
async def test_fetch_products_by_category_slug(session_factory: async_sessionmaker) -> None:
    async with session_factory() as session:
        repo = SqlCatalogRepository(session)
        products = await repo.fetch_products({"category": "microfiber-cloth"})
        limited = await repo.fetch_products({"limit": 1})

    assert [p["name"] for p in products] == ["Plush Towel"]
    assert len(limited) == 1


@pytest.mark.asyncio
async def test_fetch_coupon_is_case_insensitive(session_factory: async_sessionmaker) -> None:
    async with session_factory() as session:
        repo = SqlCatalogRepository(session)
        coupon = await repo.fetch_coupon(" welcome10 ")
        missing = await repo.fetch_coupon("nope")

    assert coupon is not None
    assert coupon.code == "WELCOME10"
    assert coupon.min_order_amount == 999
    assert coupon.is_permanent
    assert missing is None


@pytest.mark.asyncio
async def test_fetch_categories(session_factory: async_sessionmaker) -> None:
    async with session_factory() as session:
        categories = await SqlCatalogRepository(session).fetch_categories()

    assert [(c.id, c.slug) for c in categories] == [(str(CLOTH_ID), "microfiber-cloth")]
