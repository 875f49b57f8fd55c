from __future__ import annotations

import json
import logging
from typing import Any

from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas.coupon import CouponRecord
from storefront.schemas.product import CategoryRecord

logger = logging.getLogger(__name__)


class CachedCatalogProvider(CatalogProvider):
    """Wrap a provider and keep unfiltered catalog snapshots in Redis.

    Coupons always go to the backing provider. Redis failures are logged and
    the request falls through to the provider.
    """

    def __init__(
        self,
        provider: CatalogProvider,
        redis_client: Any,
        ttl: int,
        prefix: str = "catalog",
    ) -> None:
        self.provider = provider
        self.redis = redis_client
        self.ttl = ttl
        self.prefix = prefix

    def _key(self, name: str) -> str:
        return f"{self.prefix}:{name}"

    async def _read(self, name: str) -> Any | None:
        try:
            raw = await self.redis.get(self._key(name))
        except Exception as e:
            logger.warning(f"Catalog cache read failed for {name}: {e}")
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        if not isinstance(raw, str):
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Discarding corrupt catalog cache entry {name}")
            return None

    async def _write(self, name: str, value: Any) -> None:
        try:
            await self.redis.set(self._key(name), json.dumps(value), ex=self.ttl)
        except Exception as e:
            logger.warning(f"Catalog cache write failed for {name}: {e}")

    async def fetch_products(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        if filters:
            return await self.provider.fetch_products(filters)

        cached = await self._read("products")
        if isinstance(cached, list):
            return cached

        logger.info("Catalog cache miss for products")
        products = await self.provider.fetch_products()
        await self._write("products", products)
        return products

    async def fetch_coupon(self, code: str) -> CouponRecord | None:
        return await self.provider.fetch_coupon(code)

    async def fetch_categories(self) -> list[CategoryRecord]:
        cached = await self._read("categories")
        if isinstance(cached, list):
            return [CategoryRecord.model_validate(c) for c in cached]

        categories = await self.provider.fetch_categories()
        await self._write("categories", [c.model_dump() for c in categories])
        return categories

    async def refresh(self) -> dict[str, int]:
        """Reload both snapshots from the provider and overwrite the cache."""
        products = await self.provider.fetch_products()
        categories = await self.provider.fetch_categories()
        await self._write("products", products)
        await self._write("categories", [c.model_dump() for c in categories])
        return {"products": len(products), "categories": len(categories)}
