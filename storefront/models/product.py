from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Float, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.models.base import Base, TimestampMixin, UUIDMixin
from storefront.models.category import Category


class Product(UUIDMixin, TimestampMixin, Base):
    """A product as stored by the managed backend."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    product_code: Mapped[str | None] = mapped_column(String, unique=True, default=None)
    # Legacy single-price products; variant prices take over when present
    price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), default=None)
    main_category_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("categories.id"), index=True, default=None
    )
    stock_quantity: Mapped[int | None] = mapped_column(Integer, default=None)
    popularity_score: Mapped[int] = mapped_column(Integer, default=0)
    rating: Mapped[float | None] = mapped_column(Float, default=None)
    is_microfiber: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    main_category: Mapped[Category | None] = relationship(lazy="raise")
    variants: Mapped[list[ProductVariant]] = relationship(
        back_populates="product",
        lazy="raise",
        order_by="ProductVariant.created_at",
    )


class ProductVariant(UUIDMixin, TimestampMixin, Base):
    """A purchasable size/color/GSM/quantity combination of a product."""

    __tablename__ = "product_variants"

    product_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("products.id"), index=True)
    size: Mapped[str | None] = mapped_column(String, default=None)
    color: Mapped[str | None] = mapped_column(String, default=None)
    color_hex: Mapped[str | None] = mapped_column(String, default=None)
    gsm: Mapped[int | None] = mapped_column(Integer, default=None)
    quantity: Mapped[int | None] = mapped_column(Integer, default=None)
    unit: Mapped[str | None] = mapped_column(String, default=None)
    price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), default=None)
    base_price: Mapped[float | None] = mapped_column(
        Numeric(12, 2, asdecimal=False), default=None
    )
    stock: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    product: Mapped[Product] = relationship(back_populates="variants", lazy="raise")
