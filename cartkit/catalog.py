"""
Catalog — the static product list and promo codes.

Stands in for a product/promo service; the cart only consumes these
records and never owns them.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from kungfu import Option, Some, Nothing

from cartkit.cart import Fixed, Percentage, Product, ProductId, PromoCode

# ═══════════════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════════════

PRODUCTS: tuple[Product, ...] = (
    Product(ProductId(1), "Shampoo", Decimal("24.99")),
    Product(ProductId(2), "Conditioner", Decimal("24.99")),
    Product(ProductId(3), "Hair Color", Decimal("34.99")),
    Product(ProductId(4), "Styling Serum", Decimal("19.99")),
)

# ═══════════════════════════════════════════════════════════════════════════════
# Promo Codes
# ═══════════════════════════════════════════════════════════════════════════════

PROMO_CODES: tuple[PromoCode, ...] = (
    PromoCode("SAVE15", Percentage(Decimal("15")), "15% off"),
    PromoCode("SAVE10", Fixed(Decimal("10")), "$10 off"),
)

# ═══════════════════════════════════════════════════════════════════════════════
# Lookup
# ═══════════════════════════════════════════════════════════════════════════════


def find_product_by_id(
    product_id: ProductId,
    products: Iterable[Product] = PRODUCTS,
) -> Option[Product]:
    """Product with the given id, or Nothing() when the catalog lacks it."""
    for product in products:
        if product.id == product_id:
            return Some(product)
    return Nothing()


__all__ = ("PRODUCTS", "PROMO_CODES", "find_product_by_id")
