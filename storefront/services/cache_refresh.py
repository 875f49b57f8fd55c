from __future__ import annotations

import logging
from typing import Any

from storefront.core.config import settings
from storefront.core.database import async_session_factory
from storefront.integrations.catalog.cache import CachedCatalogProvider
from storefront.integrations.catalog.sql import SqlCatalogRepository

logger = logging.getLogger(__name__)


async def refresh_catalog_cache(ctx: dict[str, Any]) -> dict[str, int]:
    """ARQ job: reload product and category snapshots into Redis.

    Args:
        ctx: The ARQ context dictionary containing the Redis pool.

    Returns:
        Counts of cached products and categories.
    """
    logger.info("Refreshing catalog cache...")

    async with async_session_factory() as session:
        cache = CachedCatalogProvider(
            SqlCatalogRepository(session),
            ctx["redis"],
            ttl=settings.catalog_cache_ttl,
            prefix=settings.catalog_cache_prefix,
        )
        stats = await cache.refresh()

    logger.info(
        f"Catalog cache refreshed. "
        f"Products: {stats['products']}, Categories: {stats['categories']}"
    )
    return stats
