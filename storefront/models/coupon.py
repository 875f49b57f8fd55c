from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront.models.base import Base, UUIDMixin


class Coupon(UUIDMixin, Base):
    """A percentage discount code. Codes are stored uppercase."""

    __tablename__ = "coupons"

    code: Mapped[str] = mapped_column(String, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    discount_percent: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False))
    min_order_amount: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False), default=0
    )
    is_permanent: Mapped[bool] = mapped_column(Boolean, default=False)
    # NULL iff is_permanent
    expiry_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    usage_count: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())
