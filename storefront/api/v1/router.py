from __future__ import annotations

from fastapi import APIRouter

from storefront.api.v1 import (
    admin,
    checkout,
    coupons,
    health,
    products,
)

api_v1_router = APIRouter()

api_v1_router.include_router(health.router, tags=["Health"])
api_v1_router.include_router(products.router, prefix="/products", tags=["Products"])
api_v1_router.include_router(coupons.router, prefix="/coupons", tags=["Coupons"])
api_v1_router.include_router(checkout.router, prefix="/checkout", tags=["Checkout"])
api_v1_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
