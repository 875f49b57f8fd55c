from __future__ import annotations

from typing import Any, Protocol

from storefront.schemas.coupon import CouponRecord
from storefront.schemas.product import CategoryRecord


class CatalogProvider(Protocol):
    """Read access to the managed backend's catalog.

    Implement this protocol to serve snapshots from another store
    (Postgres, a REST backend, fixtures in tests, ...).
    """

    async def fetch_products(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Get product snapshots. Filters only narrow the fetch; callers still filter."""
        ...

    async def fetch_coupon(self, code: str) -> CouponRecord | None:
        """Get a coupon by code (case-insensitive)."""
        ...

    async def fetch_categories(self) -> list[CategoryRecord]:
        """Get categories for display labels."""
        ...
