"""Conversion of database rows into the plain records the catalog core reads."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from storefront.catalog.categories import collect_category_keys
from storefront.models.category import Category
from storefront.models.product import Product, ProductVariant


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def normalize_product(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a raw product record and attach its canonical category set.

    Legacy ``categories`` joins are renamed to ``category`` so consumers only
    deal with one shape.
    """
    record = dict(raw)
    if "category" not in record and isinstance(record.get("categories"), Mapping):
        record["category"] = record.pop("categories")
    record["category_keys"] = collect_category_keys(raw)
    return record


def category_snapshot(category: Category) -> dict[str, Any]:
    return {"id": str(category.id), "name": category.name, "slug": category.slug}


def variant_snapshot(variant: ProductVariant) -> dict[str, Any]:
    return {
        "id": str(variant.id),
        "size": variant.size,
        "color": variant.color,
        "color_hex": variant.color_hex,
        "gsm": variant.gsm,
        "quantity": variant.quantity,
        "unit": variant.unit,
        "price": variant.price,
        "base_price": variant.base_price,
        "stock": variant.stock,
        "is_active": variant.is_active,
    }


def product_snapshot(product: Product) -> dict[str, Any]:
    """JSON-safe record of a product with its active variants and category."""
    raw = {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "product_code": product.product_code,
        "price": product.price,
        "stock_quantity": product.stock_quantity,
        "popularity_score": product.popularity_score,
        "rating": product.rating,
        "is_microfiber": product.is_microfiber,
        "main_category_id": (
            str(product.main_category_id) if product.main_category_id else None
        ),
        "category": (
            category_snapshot(product.main_category) if product.main_category else None
        ),
        "variants": [variant_snapshot(v) for v in product.variants if v.is_active],
        "created_at": _iso(product.created_at),
        "updated_at": _iso(product.updated_at),
    }
    return normalize_product(raw)
