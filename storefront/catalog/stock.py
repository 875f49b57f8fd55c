from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront.catalog.filters import is_in_stock, product_level_stock, variant_stock
from storefront.catalog.pricing import get_variants, resolve_price_range
from storefront.schemas.product import StockRow


def total_stock(product: Mapping[str, Any]) -> int:
    """Units on hand, read from the same fields the in-stock check uses."""
    variants = get_variants(product)
    if variants:
        return int(sum(variant_stock(v) for v in variants))
    return int(product_level_stock(product) or 0)


def summarize_stock(product: Mapping[str, Any], low_stock_threshold: int) -> StockRow:
    """One row of the admin stock view."""
    stock = total_stock(product)
    product_id = product.get("id")
    return StockRow(
        product_id=None if product_id is None else str(product_id),
        name=str(product.get("name") or ""),
        variant_count=len(get_variants(product)),
        total_stock=stock,
        price=resolve_price_range(product),
        in_stock=is_in_stock(product),
        low_stock=stock <= low_stock_threshold,
    )
