from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.checkout.coupons import normalize_coupon_code
from storefront.integrations.catalog.base import CatalogProvider
from storefront.integrations.catalog.snapshot import product_snapshot
from storefront.models.category import Category
from storefront.models.coupon import Coupon
from storefront.models.product import Product
from storefront.schemas.coupon import CouponRecord
from storefront.schemas.product import CategoryRecord

logger = logging.getLogger(__name__)


class SqlCatalogRepository(CatalogProvider):
    """CatalogProvider reading the storefront tables over SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def fetch_products(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Active products with variants and main category loaded.

        Supported filters: ``category`` (slug) and ``limit``.
        """
        filters = filters or {}
        stmt = (
            select(Product)
            .where(Product.is_active.is_(True))
            .options(
                selectinload(Product.variants),
                selectinload(Product.main_category),
            )
            .order_by(Product.created_at.desc())
        )

        if filters.get("category"):
            stmt = stmt.join(Category, Product.main_category_id == Category.id).where(
                Category.slug == filters["category"]
            )
        if filters.get("limit"):
            stmt = stmt.limit(int(filters["limit"]))

        result = await self.db.execute(stmt)
        products = result.scalars().all()
        logger.debug(f"Loaded {len(products)} products (filters={filters})")
        return [product_snapshot(p) for p in products]

    async def fetch_coupon(self, code: str) -> CouponRecord | None:
        stmt = select(Coupon).where(Coupon.code == normalize_coupon_code(code))
        result = await self.db.execute(stmt)
        coupon = result.scalar_one_or_none()
        if coupon is None:
            return None
        return CouponRecord.model_validate(coupon)

    async def fetch_categories(self) -> list[CategoryRecord]:
        result = await self.db.execute(select(Category).order_by(Category.name))
        return [
            CategoryRecord(id=str(c.id), name=c.name, slug=c.slug)
            for c in result.scalars().all()
        ]
