"""
Cart types — products, discounts, promo codes and the cart snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from kungfu import Option, Some, Nothing

from cartkit.money import to_money

# ═══════════════════════════════════════════════════════════════════════════════
# Product
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProductId:
    """
    Nominal product identity.

    Wrapping keeps product ids from being mixed up with quantities or
    other plain ints.
    """
    value: int


@dataclass(frozen=True, slots=True)
class Product:
    id: ProductId
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        price = to_money(self.price)
        if price < 0:
            raise ValueError(f"price must be >= 0, got {price}")
        object.__setattr__(self, "price", price)


# ═══════════════════════════════════════════════════════════════════════════════
# Discount — Tagged Union
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Percentage:
    """Percent off the subtotal, 0..100."""
    value: Decimal

    def __post_init__(self) -> None:
        value = to_money(self.value)
        if not 0 <= value <= 100:
            raise ValueError(f"percentage must be within 0..100, got {value}")
        object.__setattr__(self, "value", value)


@dataclass(frozen=True, slots=True)
class Fixed:
    """Flat amount off the subtotal."""
    value: Decimal

    def __post_init__(self) -> None:
        value = to_money(self.value)
        if value < 0:
            raise ValueError(f"fixed discount must be >= 0, got {value}")
        object.__setattr__(self, "value", value)


type Discount = Percentage | Fixed
"""Every discount kind. Adding one means extending every match over it."""


@dataclass(frozen=True, slots=True)
class PromoCode:
    """
    A redeemable code from the promo catalog.

    code is stored uppercase; lookups normalize user input to match.
    display_text is the human-readable form ("15% off", "$10 off").
    """
    code: str
    discount: Discount
    display_text: str


# ═══════════════════════════════════════════════════════════════════════════════
# Cart Snapshot
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CartItem:
    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValueError(f"quantity must be an int, got {self.quantity!r}")
        if self.quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {self.quantity}")


@dataclass(frozen=True, slots=True)
class CartState:
    """
    Immutable cart snapshot.

    items keep insertion order and hold at most one line per product id.
    Transitions build a new CartState; nothing mutates an existing one.
    """
    items: tuple[CartItem, ...] = ()
    applied_promo_code: PromoCode | None = None

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, product_id: ProductId) -> Option[CartItem]:
        """Line item for product_id, if present."""
        for item in self.items:
            if item.product.id == product_id:
                return Some(item)
        return Nothing()


EMPTY_CART = CartState()
"""Canonical empty cart: no items, no promo."""


@dataclass(frozen=True, slots=True)
class CartTotals:
    """Derived totals. Never stored on the cart."""
    subtotal: Decimal
    discount_amount: Decimal
    total: Decimal
    item_count: int


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
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
)
