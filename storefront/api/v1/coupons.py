from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_catalog
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import (
    CouponApplication,
    CouponApplyRequest,
    CouponCheckRequest,
    CouponValidation,
)
from storefront.services.checkout import apply_coupon_code, check_coupon

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/validate", response_model=CouponValidation)
async def validate_coupon(
    body: CouponCheckRequest,
    catalog: CatalogProvider = Depends(get_catalog),
) -> CouponValidation:
    """Check a code; an unusable coupon is a 200 with ``valid: false``."""
    try:
        return await check_coupon(catalog, body.code, body.order_amount)
    except Exception as e:
        logger.error(f"Error validating coupon: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e


@router.post("/apply", response_model=CouponApplication)
async def apply_coupon(
    body: CouponApplyRequest,
    catalog: CatalogProvider = Depends(get_catalog),
) -> CouponApplication:
    """Validate a code against an order amount and compute the discount."""
    try:
        return await apply_coupon_code(catalog, body.code, body.order_amount)
    except Exception as e:
        logger.error(f"Error applying coupon: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e
