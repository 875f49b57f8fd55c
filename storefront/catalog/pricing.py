"""Representative prices for products with heterogeneous variant lists."""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from storefront.schemas.product import PriceRange

# Variant rows carry either field depending on which admin form created them
PRICE_FIELDS = ("base_price", "price")


def to_number(value: Any) -> float:
    """Coerce a stored numeric field to float; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _first_price(record: Mapping[str, Any]) -> float:
    for field in PRICE_FIELDS:
        value = record.get(field)
        if value is None or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if not (math.isnan(number) or math.isinf(number)):
            return number
    return 0.0


def get_variants(product: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """Variant records of a product, whichever key the snapshot used."""
    for key in ("variants", "product_variants"):
        variants = product.get(key)
        if isinstance(variants, Sequence) and not isinstance(variants, (str, bytes)):
            return [v for v in variants if isinstance(v, Mapping)]
    return []


def variant_price(variant: Mapping[str, Any]) -> float:
    return _first_price(variant)


def resolve_price_range(product: Mapping[str, Any]) -> PriceRange:
    """Return the min/max price across a product's variants.

    Products without variants fall back to their own ``base_price``/``price``.
    """
    variants = get_variants(product)
    if variants:
        prices = [variant_price(v) for v in variants]
        return PriceRange(min=min(prices), max=max(prices))

    price = _first_price(product)
    return PriceRange(min=price, max=price)


def listing_price(product: Mapping[str, Any]) -> float:
    """Price used by the price filter: product ``price`` if set, else cheapest variant."""
    if product.get("price") is not None:
        return to_number(product["price"])
    return resolve_price_range(product).min
