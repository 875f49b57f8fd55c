from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_catalog
from storefront.core.config import settings
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import PriceSummary, PriceSummaryRequest
from storefront.services.checkout import summarize_cart

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/summary", response_model=PriceSummary)
async def price_summary(
    body: PriceSummaryRequest,
    catalog: CatalogProvider = Depends(get_catalog),
) -> PriceSummary:
    """Cart totals with GST and an optional coupon."""
    try:
        return await summarize_cart(
            catalog, body, gst_rate=settings.gst_rate, currency=settings.currency
        )
    except Exception as e:
        logger.error(f"Error computing price summary: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e
