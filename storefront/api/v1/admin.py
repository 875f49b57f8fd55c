from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from storefront.api.deps import get_catalog
from storefront.core.config import settings
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import StockRow
from storefront.services.catalog import stock_report

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/stock", response_model=list[StockRow])
async def get_stock(
    low_only: bool = False,
    threshold: int | None = Query(None, ge=0),
    catalog: CatalogProvider = Depends(get_catalog),
) -> list[StockRow]:
    """Stock per product, lowest first."""
    try:
        return await stock_report(
            catalog,
            low_stock_threshold=(
                threshold if threshold is not None else settings.low_stock_threshold
            ),
            low_stock_only=low_only,
        )
    except Exception as e:
        logger.error(f"Error building stock report: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e


@router.post("/catalog/refresh", status_code=202)
async def refresh_catalog(request: Request) -> dict[str, str]:
    """Queue a rebuild of the cached catalog snapshot."""
    try:
        pool = request.app.state.arq_pool
        await pool.enqueue_job("refresh_catalog_cache")
    except Exception as e:
        logger.error(f"Error queueing catalog refresh: {e}")
        raise HTTPException(status_code=500, detail="Could not enqueue refresh job") from e
    return {"status": "queued"}
