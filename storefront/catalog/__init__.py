from __future__ import annotations

from .categories import (
    CATEGORY_ALIASES,
    collect_category_keys,
    extract_categories,
    matches_category,
)
from .filters import (
    build_criteria,
    collect_filter_options,
    filter_products,
    is_in_stock,
)
from .pricing import listing_price, resolve_price_range, to_number
from .rating import (
    generate_ratings,
    product_rating_summary,
    rating_seed,
    summarize_ratings,
)
from .sorting import sort_products
from .stock import summarize_stock, total_stock

__all__ = [
    # categories
    "CATEGORY_ALIASES",
    "collect_category_keys",
    "extract_categories",
    "matches_category",
    # filters
    "build_criteria",
    "collect_filter_options",
    "filter_products",
    "is_in_stock",
    # pricing
    "listing_price",
    "resolve_price_range",
    "to_number",
    # rating
    "generate_ratings",
    "product_rating_summary",
    "rating_seed",
    "summarize_ratings",
    # sorting
    "sort_products",
    # stock
    "summarize_stock",
    "total_stock",
]
