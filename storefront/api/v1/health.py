from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from redis.asyncio import Redis
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.deps import get_db, get_redis
from storefront.schemas import DependencyHealth, HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    redis: Redis = Depends(get_redis),
    db: AsyncSession = Depends(get_db),
) -> HealthCheckResponse:
    """Check service health and dependency status."""
    dependencies: dict[str, DependencyHealth] = {}

    try:
        start = time.monotonic()
        await redis.ping()
        latency = (time.monotonic() - start) * 1000
        dependencies["redis"] = DependencyHealth(
            name="redis",
            status="ok",
            latency_ms=round(latency, 2),
        )
    except Exception as exc:
        dependencies["redis"] = DependencyHealth(
            name="redis",
            status="error",
            message=str(exc),
        )

    try:
        start = time.monotonic()
        await db.execute(text("SELECT 1"))
        latency = (time.monotonic() - start) * 1000
        dependencies["database"] = DependencyHealth(
            name="database",
            status="ok",
            latency_ms=round(latency, 2),
        )
    except Exception as exc:
        dependencies["database"] = DependencyHealth(
            name="database",
            status="error",
            message=str(exc),
        )

    statuses = [dep.status for dep in dependencies.values()]
    overall = "ok" if all(s == "ok" for s in statuses) else "degraded"

    return HealthCheckResponse(
        status=overall,
        version="0.1.0",
        dependencies=dependencies,
    )
