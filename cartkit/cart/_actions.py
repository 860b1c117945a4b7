"""
Cart actions — the closed set of transitions a cart accepts.

Actions describe what happened; `reduce` decides how the snapshot changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from cartkit.cart._types import Product, ProductId, PromoCode


@dataclass(frozen=True, slots=True)
class AddItem:
    product: Product
    quantity: int = 1


@dataclass(frozen=True, slots=True)
class RemoveItem:
    product_id: ProductId


@dataclass(frozen=True, slots=True)
class UpdateQuantity:
    """Absolute quantity; zero or below removes the line."""
    product_id: ProductId
    quantity: int


@dataclass(frozen=True, slots=True)
class ApplyPromo:
    promo_code: PromoCode


@dataclass(frozen=True, slots=True)
class RemovePromo:
    pass


@dataclass(frozen=True, slots=True)
class ClearCart:
    pass


type CartAction = (
    AddItem | RemoveItem | UpdateQuantity | ApplyPromo | RemovePromo | ClearCart
)

__all__ = (
    "AddItem",
    "RemoveItem",
    "UpdateQuantity",
    "ApplyPromo",
    "RemovePromo",
    "ClearCart",
    "CartAction",
)
