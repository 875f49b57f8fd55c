from storefront.models.base import Base
from storefront.models.category import Category
from storefront.models.coupon import Coupon
from storefront.models.product import Product, ProductVariant

__all__ = [
    "Base",
    "Category",
    "Coupon",
    "Product",
    "ProductVariant",
]
