from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel


class SortKey(StrEnum):
    POPULARITY = "popularity"
    PRICE_LOW_HIGH = "price-low-high"
    PRICE_HIGH_LOW = "price-high-low"
    NEWEST = "newest"
    RATING = "rating"
    NAME = "name"

    @classmethod
    def parse(cls, value: str | None) -> SortKey:
        """Map a raw sort parameter to a key; unknown values mean popularity."""
        if not value:
            return cls.POPULARITY
        value = value.strip().lower()
        if value in _SORT_ALIASES:
            return _SORT_ALIASES[value]
        try:
            return cls(value)
        except ValueError:
            return cls.POPULARITY


_SORT_ALIASES: dict[str, SortKey] = {
    "asc": SortKey.PRICE_LOW_HIGH,
    "price_low": SortKey.PRICE_LOW_HIGH,
    "desc": SortKey.PRICE_HIGH_LOW,
    "price_high": SortKey.PRICE_HIGH_LOW,
}


class CouponRejection(StrEnum):
    NOT_FOUND = "not_found"
    NOT_ACTIVE = "not_active"
    EXPIRED = "expired"
    MIN_ORDER_NOT_MET = "min_order_not_met"


T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    page_size: int
    pages: int

