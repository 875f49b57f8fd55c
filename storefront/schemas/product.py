from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CategoryRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str


class PriceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @property
    def is_range(self) -> bool:
        """False when a single price should be shown instead of a range."""
        return self.min != self.max


class RatingSummary(BaseModel):
    count: int
    average: float
    stars: float


class FilterCriteria(BaseModel):
    """Constraints picked in the shop sidebar. Empty tuples mean "any"."""

    model_config = ConfigDict(frozen=True)

    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    min_rating: float | None = None
    categories: tuple[str, ...] = ()
    sizes: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    gsm: tuple[str, ...] = ()
    quantities: tuple[str, ...] = ()
    in_stock_only: bool = False
    is_microfiber: bool | None = None


class FilterOptions(BaseModel):
    categories: list[str]
    sizes: list[str]
    colors: list[str]
    gsm: list[str]
    quantities: list[str]
    price: PriceRange


class VariantCard(BaseModel):
    id: str | None = None
    size: str | None = None
    color: str | None = None
    gsm: str | None = None
    quantity: str | None = None
    unit: str | None = None
    price: float
    stock: int


class ProductCard(BaseModel):
    id: str | None = None
    name: str
    description: str | None = None
    product_code: str | None = None
    category: str | None = None
    price: PriceRange
    price_is_range: bool
    rating: RatingSummary
    in_stock: bool
    is_microfiber: bool = False
    variants: list[VariantCard] = []


class StockRow(BaseModel):
    product_id: str | None = None
    name: str
    variant_count: int
    total_stock: int
    price: PriceRange
    in_stock: bool
    low_stock: bool
