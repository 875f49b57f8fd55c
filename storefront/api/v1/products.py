from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import get_catalog
from storefront.catalog import build_criteria
from storefront.core.config import settings
from storefront.integrations.catalog.base import CatalogProvider
from storefront.schemas import (
    CategoryRecord,
    FilterCriteria,
    FilterOptions,
    PaginatedResponse,
    ProductCard,
    SortKey,
)
from storefront.services.catalog import browse_products, get_filter_options

router = APIRouter()
logger = logging.getLogger(__name__)


def get_filter_criteria(
    min_price: float | None = Query(None, ge=0),
    max_price: float | None = Query(None, ge=0),
    min_rating: float | None = Query(None, ge=0),
    category: list[str] | None = Query(None),
    size: list[str] | None = Query(None),
    color: list[str] | None = Query(None),
    gsm: list[str] | None = Query(None),
    quantity: list[str] | None = Query(None),
    in_stock: bool = False,
    is_microfiber: bool | None = None,
) -> FilterCriteria:
    return build_criteria(
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        categories=category,
        sizes=size,
        colors=color,
        gsm=gsm,
        quantities=quantity,
        in_stock_only=in_stock,
        is_microfiber=is_microfiber,
    )


@router.get("/", response_model=PaginatedResponse[ProductCard])
async def list_products(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    sort: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    catalog: CatalogProvider = Depends(get_catalog),
) -> PaginatedResponse[ProductCard]:
    """Shop grid: filtered, sorted and paginated product cards."""
    try:
        return await browse_products(
            catalog,
            criteria,
            SortKey.parse(sort),
            page=page,
            page_size=page_size or settings.default_page_size,
        )
    except Exception as e:
        logger.error(f"Error loading products: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e


@router.get("/filters", response_model=FilterOptions)
async def list_filter_options(
    catalog: CatalogProvider = Depends(get_catalog),
) -> FilterOptions:
    """Values offered in the filter sidebar."""
    try:
        return await get_filter_options(catalog)
    except Exception as e:
        logger.error(f"Error loading filter options: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e


@router.get("/categories", response_model=list[CategoryRecord])
async def list_categories(
    catalog: CatalogProvider = Depends(get_catalog),
) -> list[CategoryRecord]:
    try:
        return await catalog.fetch_categories()
    except Exception as e:
        logger.error(f"Error loading categories: {e}")
        raise HTTPException(status_code=503, detail="Catalog unavailable") from e
