from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from storefront.catalog import (
    collect_filter_options,
    filter_products,
    is_in_stock,
    product_rating_summary,
    resolve_price_range,
    sort_products,
    summarize_stock,
    to_number,
)
from storefront.catalog.filters import attribute_key
from storefront.catalog.pricing import get_variants, variant_price
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import (
    FilterCriteria,
    FilterOptions,
    PaginatedResponse,
    ProductCard,
    SortKey,
    StockRow,
    VariantCard,
)

logger = logging.getLogger(__name__)


def _optional_text(value: Any) -> str | None:
    return None if value in (None, "") else attribute_key(value)


def _category_label(product: Mapping[str, Any]) -> str | None:
    for field in ("category", "main_category"):
        value = product.get(field)
        if isinstance(value, Mapping) and value.get("name"):
            return str(value["name"])
        if isinstance(value, str) and value:
            return value
    return None


def present_product(product: Mapping[str, Any]) -> ProductCard:
    """Shape a product snapshot into the card the shop grid renders."""
    price = resolve_price_range(product)
    return ProductCard(
        id=None if product.get("id") is None else str(product["id"]),
        name=str(product.get("name") or ""),
        description=product.get("description"),
        product_code=product.get("product_code"),
        category=_category_label(product),
        price=price,
        price_is_range=price.is_range,
        rating=product_rating_summary(product),
        in_stock=is_in_stock(product),
        is_microfiber=bool(product.get("is_microfiber")),
        variants=[
            VariantCard(
                id=None if v.get("id") is None else str(v["id"]),
                size=_optional_text(v.get("size")),
                color=_optional_text(v.get("color")),
                gsm=_optional_text(v.get("gsm")),
                quantity=_optional_text(v.get("quantity")),
                unit=v.get("unit"),
                price=variant_price(v),
                stock=int(to_number(v.get("stock"))),
            )
            for v in get_variants(product)
        ],
    )


async def browse_products(
    provider: CatalogProvider,
    criteria: FilterCriteria,
    sort: SortKey,
    page: int = 1,
    page_size: int = 24,
) -> PaginatedResponse[ProductCard]:
    """Fetch, filter, sort and paginate the shop grid."""
    products = await provider.fetch_products()
    ordered = sort_products(filter_products(products, criteria), sort)
    total = len(ordered)
    start = (page - 1) * page_size
    logger.debug(f"Browse matched {total} of {len(products)} products (sort={sort})")

    return PaginatedResponse(
        items=[present_product(p) for p in ordered[start : start + page_size]],
        total=total,
        page=page,
        page_size=page_size,
        pages=math.ceil(total / page_size) if total > 0 else 1,
    )


async def get_filter_options(provider: CatalogProvider) -> FilterOptions:
    return collect_filter_options(await provider.fetch_products())


async def stock_report(
    provider: CatalogProvider,
    low_stock_threshold: int,
    low_stock_only: bool = False,
) -> list[StockRow]:
    """Admin stock view, lowest stock first."""
    rows = [summarize_stock(p, low_stock_threshold) for p in await provider.fetch_products()]
    if low_stock_only:
        rows = [row for row in rows if row.low_stock]
    return sorted(rows, key=lambda row: row.total_stock)
