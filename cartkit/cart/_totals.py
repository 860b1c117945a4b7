"""
Totals — subtotal, discount, total and item count from a cart snapshot.

Every monetary value is rounded to cents at the point it is finalized
(line subtotal, cart subtotal, discount, total), so repeated calls never
drift.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import assert_never

from cartkit.money import ZERO, round_money
from cartkit.cart._types import (
    CartItem,
    CartState,
    CartTotals,
    Discount,
    Fixed,
    Percentage,
)


def calculate_item_subtotal(item: CartItem) -> Decimal:
    """Unit price x quantity, rounded to cents."""
    return round_money(item.product.price * item.quantity)


def calculate_discount_amount(subtotal: Decimal, discount: Discount | None) -> Decimal:
    """
    Discount owed on subtotal.

    Capped at the subtotal, so a discount never pushes the total below zero.

    Example:
        calculate_discount_amount(Decimal("100"), Percentage(15))  # 15.00
        calculate_discount_amount(Decimal("30"), Fixed(50))        # 30.00
    """
    if discount is None:
        return ZERO

    match discount:
        case Percentage(value=value):
            amount = subtotal * value / 100
        case Fixed(value=value):
            amount = value
        case _:
            assert_never(discount)

    return round_money(min(amount, subtotal))


def calculate_item_count(items: Iterable[CartItem]) -> int:
    return sum(item.quantity for item in items)


def calculate_cart_totals(state: CartState) -> CartTotals:
    subtotal = round_money(
        sum((calculate_item_subtotal(item) for item in state.items), ZERO)
    )
    promo = state.applied_promo_code
    discount_amount = calculate_discount_amount(
        subtotal,
        promo.discount if promo is not None else None,
    )
    total = round_money(max(ZERO, subtotal - discount_amount))

    return CartTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        total=total,
        item_count=calculate_item_count(state.items),
    )


__all__ = (
    "calculate_item_subtotal",
    "calculate_discount_amount",
    "calculate_item_count",
    "calculate_cart_totals",
)
