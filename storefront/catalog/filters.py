"""Shop sidebar filtering over product snapshots.

Every function here is pure: inputs are never mutated and malformed input
degrades to an empty result instead of raising.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from storefront.catalog.categories import extract_categories, product_in_categories
from storefront.catalog.pricing import get_variants, listing_price, resolve_price_range, to_number
from storefront.schemas.product import FilterCriteria, FilterOptions, PriceRange

logger = logging.getLogger(__name__)

# criteria field -> (product-level list, variant/product scalar)
ATTRIBUTE_FIELDS: dict[str, tuple[str, str]] = {
    "sizes": ("sizes", "size"),
    "colors": ("colors", "color"),
    "gsm": ("gsm", "gsm"),
    "quantities": ("quantities", "quantity"),
}


def attribute_key(value: Any) -> str:
    """Text form used to compare attribute values (300 == 300.0 == "300")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def product_attribute_values(product: Mapping[str, Any], field: str) -> list[str]:
    """Distinct values of ``field`` ("sizes", "colors", ...) offered by a product."""
    list_field, scalar_field = ATTRIBUTE_FIELDS[field]

    listed = product.get(list_field)
    if isinstance(listed, list):
        values: Iterable[Any] = listed
    else:
        variants = get_variants(product)
        if variants:
            values = [v.get(scalar_field) for v in variants]
        elif product.get(scalar_field) not in (None, ""):
            values = [product.get(scalar_field)]
        else:
            values = []

    keys = [attribute_key(v) for v in values if v not in (None, "")]
    return list(dict.fromkeys(keys))


def variant_stock(variant: Mapping[str, Any]) -> float:
    return to_number(variant.get("stock") or variant.get("stock_quantity") or 0)


def product_level_stock(product: Mapping[str, Any]) -> float | None:
    """Stock recorded on the product itself, or None when it carries none."""
    for field in ("stock_quantity", "stock"):
        if product.get(field) is not None:
            return to_number(product[field])
    return None


def is_in_stock(product: Mapping[str, Any]) -> bool:
    variants = get_variants(product)
    if variants:
        return any(variant_stock(v) > 0 for v in variants)
    stock = product_level_stock(product)
    # No stock signal at all: treat as available
    return stock is None or stock > 0


def _matches(product: Mapping[str, Any], criteria: FilterCriteria) -> bool:
    if criteria.min_price is not None or criteria.max_price is not None:
        low = criteria.min_price if criteria.min_price is not None else 0.0
        high = criteria.max_price if criteria.max_price is not None else float("inf")
        price = listing_price(product)
        if price < low or price > high:
            return False

    if criteria.min_rating:
        if to_number(product.get("rating")) < criteria.min_rating:
            return False

    if criteria.categories and not product_in_categories(product, criteria.categories):
        return False

    for field in ATTRIBUTE_FIELDS:
        requested: tuple[str, ...] = getattr(criteria, field)
        if not requested:
            continue
        offered = product_attribute_values(product, field)
        if not any(attribute_key(r) in offered for r in requested):
            return False

    if criteria.in_stock_only and not is_in_stock(product):
        return False

    if criteria.is_microfiber is not None:
        if product.get("is_microfiber") is not criteria.is_microfiber:
            return False

    return True


def filter_products(
    products: Sequence[Mapping[str, Any]] | None,
    criteria: FilterCriteria | None,
) -> list[Mapping[str, Any]]:
    """Keep the products that satisfy every constraint, in their original order."""
    if not isinstance(products, (list, tuple)):
        if products is not None:
            logger.debug(f"filter_products got {type(products).__name__}, expected a list")
        return []
    records = [p for p in products if isinstance(p, Mapping)]
    if criteria is None:
        return records
    return [p for p in records if _matches(p, criteria)]


def _selection(values: Iterable[Any] | None) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(attribute_key(v) for v in values if v not in (None, ""))


def build_criteria(
    *,
    min_price: float | None = None,
    max_price: float | None = None,
    min_rating: float | None = None,
    categories: Iterable[str] | None = None,
    sizes: Iterable[Any] | None = None,
    colors: Iterable[Any] | None = None,
    gsm: Iterable[Any] | None = None,
    quantities: Iterable[Any] | None = None,
    in_stock_only: bool = False,
    is_microfiber: bool | None = None,
) -> FilterCriteria:
    """Turn sidebar selections into criteria, dropping empty ones."""
    return FilterCriteria(
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating or None,
        categories=_selection(categories),
        sizes=_selection(sizes),
        colors=_selection(colors),
        gsm=_selection(gsm),
        quantities=_selection(quantities),
        in_stock_only=in_stock_only,
        is_microfiber=is_microfiber,
    )


def _sort_values(values: Iterable[str]) -> list[str]:
    # Numeric values (GSM, quantities) in numeric order, then the rest
    def key(value: str) -> tuple[int, float, str]:
        try:
            return (0, float(value), value)
        except ValueError:
            return (1, 0.0, value.lower())

    return sorted(values, key=key)


def collect_filter_options(products: Sequence[Mapping[str, Any]] | None) -> FilterOptions:
    """Distinct values and the overall price span offered by a product set."""
    records = filter_products(products, None)

    gathered: dict[str, dict[str, None]] = {field: {} for field in ATTRIBUTE_FIELDS}
    categories: dict[str, None] = {}
    low: float | None = None
    high: float | None = None

    for product in records:
        for field, seen in gathered.items():
            seen.update(dict.fromkeys(product_attribute_values(product, field)))
        categories.update(dict.fromkeys(extract_categories(product)))
        span = resolve_price_range(product)
        low = span.min if low is None else min(low, span.min)
        high = span.max if high is None else max(high, span.max)

    return FilterOptions(
        categories=list(categories),
        sizes=_sort_values(gathered["sizes"]),
        colors=_sort_values(gathered["colors"]),
        gsm=_sort_values(gathered["gsm"]),
        quantities=_sort_values(gathered["quantities"]),
        price=PriceRange(min=low or 0.0, max=high or 0.0),
    )
