from __future__ import annotations

import logging
from datetime import UTC, datetime

from storefront.checkout import apply_coupon, calculate_price_summary, validate_coupon
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import (
    CouponApplication,
    CouponValidation,
    PriceSummary,
    PriceSummaryRequest,
)

logger = logging.getLogger(__name__)


async def check_coupon(
    provider: CatalogProvider,
    code: str,
    order_amount: float | None = None,
    now: datetime | None = None,
) -> CouponValidation:
    coupon = await provider.fetch_coupon(code)
    result = validate_coupon(coupon, now or datetime.now(UTC), order_amount)
    if not result.valid:
        logger.info(f"Coupon {code!r} rejected: {result.reason}")
    return result


async def apply_coupon_code(
    provider: CatalogProvider,
    code: str,
    order_amount: float,
    now: datetime | None = None,
) -> CouponApplication:
    coupon = await provider.fetch_coupon(code)
    return apply_coupon(coupon, order_amount, now or datetime.now(UTC))


async def summarize_cart(
    provider: CatalogProvider,
    body: PriceSummaryRequest,
    gst_rate: float,
    currency: str,
    now: datetime | None = None,
) -> PriceSummary:
    """Cart totals, with the coupon applied only if it is valid for the cart."""
    discount_percent: float | None = None
    message: str | None = None
    code: str | None = None

    if body.coupon_code:
        base = calculate_price_summary(body.items, None, gst_rate)
        coupon = await provider.fetch_coupon(body.coupon_code)
        check = validate_coupon(coupon, now or datetime.now(UTC), float(base.subtotal))
        if check.valid and coupon is not None:
            discount_percent = coupon.discount_percent
            code = coupon.code
        else:
            message = check.message

    summary = calculate_price_summary(body.items, discount_percent, gst_rate)
    return summary.model_copy(
        update={"currency": currency, "coupon_code": code, "coupon_message": message}
    )
