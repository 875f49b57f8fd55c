from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, UUIDMixin


class Category(UUIDMixin, Base):
    """A storefront category (Microfiber, Car Interior, ...)."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String)
    slug: Mapped[str] = mapped_column(String, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, default=None)
