"""
Session — owner of the current cart snapshot.

The reducer is pure; something still has to hold "the cart right now".
CartSession is that holder: it dispatches actions through `cart.reduce`,
keeps the resulting snapshot, and recomputes totals only when the snapshot
changes.

    session = CartSession()
    session.add_item(shampoo, 2)
    if not session.apply_promo_code(raw_code, PROMO_CODES):
        show_error("Invalid promo code")
    print(session.totals.total)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kungfu import Some

from cartkit import cart as C

logger = logging.getLogger(__name__)


class CartSession:
    def __init__(self, state: C.CartState = C.EMPTY_CART) -> None:
        self._state = state
        self._history: list[C.CartAction] = []
        self._totals_for: C.CartState | None = None
        self._totals: C.CartTotals | None = None

    # ───────────────────────────────────────────────────────────────────────────
    # Snapshot views
    # ───────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> C.CartState:
        return self._state

    @property
    def items(self) -> tuple[C.CartItem, ...]:
        return self._state.items

    @property
    def applied_promo_code(self) -> C.PromoCode | None:
        return self._state.applied_promo_code

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    @property
    def history(self) -> tuple[C.CartAction, ...]:
        """
        Every dispatched action, oldest first.

        Unbounded: the trail grows for the lifetime of the session.
        """
        return tuple(self._history)

    @property
    def totals(self) -> C.CartTotals:
        """Totals for the current snapshot, cached until the snapshot changes."""
        if self._totals is None or self._totals_for is not self._state:
            self._totals = C.calculate_cart_totals(self._state)
            self._totals_for = self._state
        return self._totals

    # ───────────────────────────────────────────────────────────────────────────
    # Transitions
    # ───────────────────────────────────────────────────────────────────────────

    def dispatch(self, action: C.CartAction) -> C.CartState:
        self._history.append(action)
        self._state = C.reduce(self._state, action)
        logger.debug("dispatched %r -> %d line(s)", action, len(self._state.items))
        return self._state

    def add_item(self, product: C.Product, quantity: int = 1) -> None:
        if quantity <= 0:
            logger.warning(
                "ignoring add of %s with non-positive quantity %d",
                product.name,
                quantity,
            )
        self.dispatch(C.AddItem(product, quantity))

    def remove_item(self, product_id: C.ProductId) -> None:
        self.dispatch(C.RemoveItem(product_id))

    def update_quantity(self, product_id: C.ProductId, quantity: int) -> None:
        self.dispatch(C.UpdateQuantity(product_id, quantity))

    def apply_promo_code(self, code: str, available_codes: Iterable[C.PromoCode]) -> bool:
        """
        Validate `code` and apply it on a match.

        Returns True when the promo was applied. An unknown code leaves the
        cart (and any promo already applied) untouched and returns False.
        """
        match C.validate_promo_code(code, available_codes):
            case Some(promo):
                self.dispatch(C.ApplyPromo(promo))
                logger.info("applied promo %s (%s)", promo.code, promo.display_text)
                return True
            case _:
                logger.info("rejected promo code %r", code)
                return False

    def remove_promo_code(self) -> None:
        self.dispatch(C.RemovePromo())

    def clear_cart(self) -> None:
        self.dispatch(C.ClearCart())


__all__ = ("CartSession",)
