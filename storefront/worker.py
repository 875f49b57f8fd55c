from __future__ import annotations

from typing import Any

from arq.connections import RedisSettings
from arq.cron import cron

from storefront.core.config import settings
from storefront.services.cache_refresh import refresh_catalog_cache


async def startup(ctx: dict[str, Any]) -> None:
    """Worker startup hook; jobs open their own sessions."""


async def shutdown(ctx: dict[str, Any]) -> None:
    """Worker shutdown hook."""


class WorkerSettings:
    functions: list[Any] = [refresh_catalog_cache]
    cron_jobs = [
        cron(
            refresh_catalog_cache,
            minute=set(range(0, 60, settings.catalog_refresh_minutes)),
            run_at_startup=True,
        ),
    ]
    on_startup = startup
    on_shutdown = shutdown
    redis_settings = RedisSettings.from_dsn(settings.redis_url)
