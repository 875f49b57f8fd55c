from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from storefront.schemas.checkout import CartLine, PriceSummary

CENT = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_price_summary(
    items: Sequence[CartLine],
    discount_percent: float | None = None,
    gst_rate: float = 18.0,
) -> PriceSummary:
    """Cart totals with GST.

    Line prices include GST. The coupon percentage is taken off the ex-GST
    subtotal and GST is charged again on what remains.
    """
    rate = Decimal(str(gst_rate)) / 100
    subtotal = Decimal(0)
    subtotal_ex_gst = Decimal(0)

    for item in items:
        qty = Decimal(item.quantity)
        price = Decimal(str(item.price))
        if item.price_excluding_gst is not None:
            price_ex_gst = Decimal(str(item.price_excluding_gst))
        else:
            price_ex_gst = price / (1 + rate)
        subtotal += price * qty
        subtotal_ex_gst += price_ex_gst * qty

    discount_ex_gst = Decimal(0)
    if discount_percent:
        discount_ex_gst = subtotal_ex_gst * Decimal(str(discount_percent)) / 100
    discount = discount_ex_gst * (1 + rate)

    discounted_ex_gst = subtotal_ex_gst - discount_ex_gst
    total_gst = discounted_ex_gst * rate
    final_total = discounted_ex_gst + total_gst

    return PriceSummary(
        subtotal=_money(subtotal),
        subtotal_ex_gst=_money(subtotal_ex_gst),
        discount=_money(discount),
        discount_ex_gst=_money(discount_ex_gst),
        discounted_ex_gst=_money(discounted_ex_gst),
        total_gst=_money(total_gst),
        final_total=_money(final_total),
        you_saved=_money(subtotal - final_total),
    )
