from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from storefront.catalog.pricing import resolve_price_range, to_number
from storefront.schemas.common import SortKey

Product = Mapping[str, Any]


def _timestamp(value: Any) -> float:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and value:
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return float("-inf")
    else:
        return float("-inf")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.timestamp()


def _name(product: Product) -> str:
    return str(product.get("name") or "").casefold()


# key -> (sort key, descending)
_ORDERINGS: dict[SortKey, tuple[Callable[[Product], Any], bool]] = {
    SortKey.POPULARITY: (lambda p: to_number(p.get("popularity_score")), True),
    SortKey.PRICE_LOW_HIGH: (lambda p: resolve_price_range(p).min, False),
    SortKey.PRICE_HIGH_LOW: (lambda p: resolve_price_range(p).max, True),
    SortKey.NEWEST: (lambda p: _timestamp(p.get("created_at")), True),
    SortKey.RATING: (lambda p: to_number(p.get("rating")), True),
    SortKey.NAME: (_name, False),
}


def sort_products(
    products: Sequence[Product] | None,
    key: SortKey | str | None = SortKey.POPULARITY,
) -> list[Product]:
    """Return a new, stably ordered list; ties keep their input order."""
    if not isinstance(products, (list, tuple)):
        return []
    sort_key = key if isinstance(key, SortKey) else SortKey.parse(key)
    func, descending = _ORDERINGS[sort_key]
    return sorted(products, key=func, reverse=descending)
