from __future__ import annotations

from .coupons import apply_coupon, apply_discount, normalize_coupon_code, validate_coupon
from .summary import calculate_price_summary

__all__ = [
    "apply_coupon",
    "apply_discount",
    "calculate_price_summary",
    "normalize_coupon_code",
    "validate_coupon",
]
