"""Stable display ratings for products that have no reviews yet.

The same seed always yields the same 13 ratings, so a product shows the same
stars on every render and on every server.
"""
from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from storefront.schemas.product import RatingSummary

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
MASK_32 = 0xFFFFFFFF

RATING_COUNT = 13
RATING_MIN = 4
RATING_MAX = 6
TARGET_LOW = 4.0
TARGET_SPAN = 0.6
TOLERANCE = 0.05
MAX_ADJUSTMENTS = 100


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a over UTF-16 code units."""
    h = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & MASK_32
    return h


def mulberry32(seed: int) -> Callable[[], float]:
    """Return a PRNG producing floats in [0, 1) from a 32-bit seed."""
    state = seed & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & MASK_32
        t = ((state ^ (state >> 15)) * (1 | state)) & MASK_32
        t = ((t + (((t ^ (t >> 7)) * (61 | t)) & MASK_32)) & MASK_32) ^ t
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return next_float


def rating_seed(product: Mapping[str, Any]) -> str:
    for key in ("product_code", "id", "name"):
        value = product.get(key)
        if value not in (None, ""):
            return str(value)
    return "default"


def generate_ratings(seed: str) -> list[int]:
    rand = mulberry32(fnv1a_32(seed))
    target = TARGET_LOW + rand() * TARGET_SPAN

    ratings = [RATING_MIN + int(rand() * 3) for _ in range(RATING_COUNT)]

    for _ in range(MAX_ADJUSTMENTS):
        mean = sum(ratings) / RATING_COUNT
        if abs(mean - target) <= TOLERANCE:
            break
        idx = int(rand() * RATING_COUNT)
        if mean < target and ratings[idx] < RATING_MAX:
            ratings[idx] += 1
        elif mean > target and ratings[idx] > RATING_MIN:
            ratings[idx] -= 1

    return ratings


def product_ratings(product: Mapping[str, Any]) -> list[int]:
    return generate_ratings(rating_seed(product))


def _round_half_up(value: float, per_unit: int) -> float:
    # Scale up before rounding: 4.35 * 10 is 43.5, while 4.35 / 0.1 is 43.4999...
    return math.floor(value * per_unit + 0.5) / per_unit


def _summary(value: float, count: int) -> RatingSummary:
    return RatingSummary(
        count=count,
        average=_round_half_up(value, 10),
        stars=_round_half_up(value, 2),
    )


def summarize_ratings(ratings: list[int]) -> RatingSummary:
    """Count, one-decimal average and half-star rounding for the star widget."""
    if not ratings:
        return RatingSummary(count=0, average=0.0, stars=0.0)
    return _summary(sum(ratings) / len(ratings), len(ratings))


def product_rating_summary(product: Mapping[str, Any]) -> RatingSummary:
    """Stored rating when the product has one, otherwise the generated spread."""
    stored = product.get("rating")
    if isinstance(stored, (int, float)) and not isinstance(stored, bool) and stored > 0:
        return _summary(float(stored), int(product.get("rating_count") or 0))
    return summarize_ratings(product_ratings(product))
