"""
Cart reducer — pure (state, action) -> state transitions.
"""

from __future__ import annotations

from dataclasses import replace
from typing import assert_never

from cartkit.cart._types import (
    CartItem,
    CartState,
    EMPTY_CART,
    Product,
    ProductId,
    PromoCode,
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

# ═══════════════════════════════════════════════════════════════════════════════
# reduce() — Single Transition Function
# ═══════════════════════════════════════════════════════════════════════════════


def reduce(state: CartState, action: CartAction) -> CartState:
    """
    Apply one action to a cart snapshot.

    Total over CartAction: every action yields a CartState. Transitions
    that change nothing return `state` itself.

    Example:
        state = C.reduce(C.EMPTY_CART, C.AddItem(shampoo, 2))
        state = C.reduce(state, C.UpdateQuantity(shampoo.id, 0))  # removed
    """
    match action:
        case AddItem(product=product, quantity=quantity):
            return _add(state, product, quantity)
        case RemoveItem(product_id=product_id):
            return _remove(state, product_id)
        case UpdateQuantity(product_id=product_id, quantity=quantity):
            if quantity <= 0:
                return _remove(state, product_id)
            return _set_quantity(state, product_id, quantity)
        case ApplyPromo(promo_code=promo_code):
            return replace(state, applied_promo_code=promo_code)
        case RemovePromo():
            if state.applied_promo_code is None:
                return state
            return replace(state, applied_promo_code=None)
        case ClearCart():
            return EMPTY_CART
        case _:
            assert_never(action)


def _add(state: CartState, product: Product, quantity: int) -> CartState:
    # Non-positive adds would break the quantity >= 1 invariant
    if quantity <= 0:
        return state

    for index, item in enumerate(state.items):
        if item.product.id == product.id:
            bumped = CartItem(item.product, item.quantity + quantity)
            items = state.items[:index] + (bumped,) + state.items[index + 1:]
            return replace(state, items=items)

    return replace(state, items=state.items + (CartItem(product, quantity),))


def _remove(state: CartState, product_id: ProductId) -> CartState:
    items = tuple(item for item in state.items if item.product.id != product_id)
    if len(items) == len(state.items):
        return state
    return replace(state, items=items)


def _set_quantity(state: CartState, product_id: ProductId, quantity: int) -> CartState:
    changed = False
    items: list[CartItem] = []
    for item in state.items:
        if item.product.id == product_id and item.quantity != quantity:
            items.append(CartItem(item.product, quantity))
            changed = True
        else:
            items.append(item)
    if not changed:
        return state
    return replace(state, items=tuple(items))


# ═══════════════════════════════════════════════════════════════════════════════
# Operation Wrappers
# ═══════════════════════════════════════════════════════════════════════════════


def add_item(state: CartState, product: Product, quantity: int = 1) -> CartState:
    """Add `quantity` of product, merging into an existing line."""
    return reduce(state, AddItem(product, quantity))


def remove_item(state: CartState, product_id: ProductId) -> CartState:
    return reduce(state, RemoveItem(product_id))


def update_quantity(state: CartState, product_id: ProductId, quantity: int) -> CartState:
    """Set an absolute quantity. quantity <= 0 behaves like remove_item."""
    return reduce(state, UpdateQuantity(product_id, quantity))


def apply_promo_code(state: CartState, promo_code: PromoCode) -> CartState:
    """Apply promo_code, replacing any promo already applied."""
    return reduce(state, ApplyPromo(promo_code))


def remove_promo_code(state: CartState) -> CartState:
    return reduce(state, RemovePromo())


def clear_cart(state: CartState = EMPTY_CART) -> CartState:
    return reduce(state, ClearCart())


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "reduce",
    "add_item",
    "remove_item",
    "update_quantity",
    "apply_promo_code",
    "remove_promo_code",
    "clear_cart",
)
