"""Coupon checks at checkout.

Rejections are returned as ``CouponValidation`` data so the cart page can show
the message; nothing here raises for an unusable coupon.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from storefront.schemas.common import CouponRejection
from storefront.schemas.coupon import CouponApplication, CouponRecord, CouponValidation

CENT = Decimal("0.01")


def normalize_coupon_code(code: str) -> str:
    return code.strip().upper()


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


def _as_record(coupon: CouponRecord | Mapping[str, Any]) -> CouponRecord:
    if isinstance(coupon, CouponRecord):
        return coupon
    return CouponRecord.model_validate(coupon)


def _reject(reason: CouponRejection, message: str) -> CouponValidation:
    return CouponValidation(valid=False, reason=reason, message=message)


def validate_coupon(
    coupon: CouponRecord | Mapping[str, Any] | None,
    now: datetime,
    order_amount: float | None = None,
) -> CouponValidation:
    """Check activity, expiry and, when an amount is given, the order minimum."""
    if coupon is None:
        return _reject(CouponRejection.NOT_FOUND, "Coupon not found")
    record = _as_record(coupon)

    if not record.is_active:
        return _reject(CouponRejection.NOT_ACTIVE, "Coupon is not active")

    if not record.is_permanent:
        if record.expiry_date is None or _aware(record.expiry_date) <= _aware(now):
            return _reject(CouponRejection.EXPIRED, "Coupon has expired")

    if order_amount is not None and order_amount < record.min_order_amount:
        return _reject(
            CouponRejection.MIN_ORDER_NOT_MET,
            f"Minimum order amount of {record.min_order_amount:.2f} required",
        )

    return CouponValidation(valid=True)


def apply_discount(coupon: CouponRecord | Mapping[str, Any], order_amount: float) -> Decimal:
    """Percentage discount on the order, rounded half-up to the cent."""
    record = _as_record(coupon)
    raw = Decimal(str(order_amount)) * Decimal(str(record.discount_percent)) / 100
    return raw.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_coupon(
    coupon: CouponRecord | Mapping[str, Any] | None,
    order_amount: float,
    now: datetime,
) -> CouponApplication:
    result = validate_coupon(coupon, now, order_amount)
    if not result.valid or coupon is None:
        return CouponApplication(**result.model_dump())

    record = _as_record(coupon)
    return CouponApplication(
        valid=True,
        code=record.code,
        discount_percent=record.discount_percent,
        discount=apply_discount(record, order_amount),
    )
