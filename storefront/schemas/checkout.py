from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class CartLine(BaseModel):
    name: str | None = None
    price: float = Field(ge=0)  # GST inclusive
    price_excluding_gst: float | None = Field(default=None, ge=0)
    quantity: int = Field(default=1, ge=1)


class PriceSummaryRequest(BaseModel):
    items: list[CartLine]
    coupon_code: str | None = None


class PriceSummary(BaseModel):
    subtotal: Decimal
    subtotal_ex_gst: Decimal
    discount: Decimal
    discount_ex_gst: Decimal
    discounted_ex_gst: Decimal
    total_gst: Decimal
    final_total: Decimal
    you_saved: Decimal
    currency: str = "INR"
    coupon_code: str | None = None
    coupon_message: str | None = None
