from __future__ import annotations

from .checkout import CartLine, PriceSummary, PriceSummaryRequest
from .common import CouponRejection, PaginatedResponse, SortKey
from .coupon import (
    CouponApplication,
    CouponApplyRequest,
    CouponCheckRequest,
    CouponCreate,
    CouponRecord,
    CouponValidation,
)
from .health import DependencyHealth, HealthCheckResponse
from .product import (
    CategoryRecord,
    FilterCriteria,
    FilterOptions,
    PriceRange,
    ProductCard,
    RatingSummary,
    StockRow,
    VariantCard,
)

__all__ = [
    # common
    "CouponRejection",
    "PaginatedResponse",
    "SortKey",
    # health
    "DependencyHealth",
    "HealthCheckResponse",
    # product
    "CategoryRecord",
    "FilterCriteria",
    "FilterOptions",
    "PriceRange",
    "ProductCard",
    "RatingSummary",
    "StockRow",
    "VariantCard",
    # coupon
    "CouponApplication",
    "CouponApplyRequest",
    "CouponCheckRequest",
    "CouponCreate",
    "CouponRecord",
    "CouponValidation",
    # checkout
    "CartLine",
    "PriceSummary",
    "PriceSummaryRequest",
]
