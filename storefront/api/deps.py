from __future__ import annotations

import redis.asyncio as aioredis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.core.redis import get_redis
from storefront.integrations.catalog.base import CatalogProvider
from storefront.integrations.catalog.cache import CachedCatalogProvider
from storefront.integrations.catalog.sql import SqlCatalogRepository


async def get_catalog(
    db: AsyncSession = Depends(get_db),
    redis: aioredis.Redis = Depends(get_redis),
) -> CatalogProvider:
    """Catalog reads for one request: SQL-backed, cached in Redis."""
    return CachedCatalogProvider(
        SqlCatalogRepository(db),
        redis,
        ttl=settings.catalog_cache_ttl,
        prefix=settings.catalog_cache_prefix,
    )


# Re-export for convenient imports
__all__ = ["get_catalog", "get_db", "get_redis"]
