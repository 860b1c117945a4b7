"""
Cart — immutable cart snapshots, transitions, totals and promo lookup.

    from cartkit import cart as C

    state = C.add_item(C.EMPTY_CART, shampoo, 2)
    match C.validate_promo_code("save15", PROMO_CODES):
        case Some(promo):
            state = C.apply_promo_code(state, promo)
    totals = C.calculate_cart_totals(state)
"""

from __future__ import annotations

from cartkit.cart._types import (
    ProductId,
    Product,
    Percentage,
    Fixed,
    Discount,
    PromoCode,
    CartItem,
    CartState,
    EMPTY_CART,
    CartTotals,
)
from cartkit.cart._actions import (
    AddItem,
    RemoveItem,
    UpdateQuantity,
    ApplyPromo,
    RemovePromo,
    ClearCart,
    CartAction,
)
from cartkit.cart._reducer import (
    reduce,
    add_item,
    remove_item,
    update_quantity,
    apply_promo_code,
    remove_promo_code,
    clear_cart,
)
from cartkit.cart._totals import (
    calculate_item_subtotal,
    calculate_discount_amount,
    calculate_item_count,
    calculate_cart_totals,
)
from cartkit.cart._promo import normalize_code, validate_promo_code

__all__ = (
    # Types
    "ProductId",
    "Product",
    "Percentage",
    "Fixed",
    "Discount",
    "PromoCode",
    "CartItem",
    "CartState",
    "EMPTY_CART",
    "CartTotals",
    # Actions
    "AddItem",
    "RemoveItem",
    "UpdateQuantity",
    "ApplyPromo",
    "RemovePromo",
    "ClearCart",
    "CartAction",
    # Transitions
    "reduce",
    "add_item",
    "remove_item",
    "update_quantity",
    "apply_promo_code",
    "remove_promo_code",
    "clear_cart",
    # Totals
    "calculate_item_subtotal",
    "calculate_discount_amount",
    "calculate_item_count",
    "calculate_cart_totals",
    # Promo
    "normalize_code",
    "validate_promo_code",
)
