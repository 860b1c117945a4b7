"""
Promo validation — resolve user-entered codes against a catalog.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Option, Some, Nothing

from cartkit.cart._types import PromoCode


def normalize_code(raw: str) -> str:
    """Trim and uppercase user input (" save15 " -> "SAVE15")."""
    return raw.strip().upper()


def validate_promo_code(code: str, available_codes: Iterable[PromoCode]) -> Option[PromoCode]:
    """
    Look up a code, ignoring case and surrounding whitespace.

    Returns Some(promo) on a match, Nothing() otherwise. Malformed input
    (empty, whitespace only) simply does not match.

    Example:
        match C.validate_promo_code(" save15 ", PROMO_CODES):
            case Some(promo):
                state = C.apply_promo_code(state, promo)
            case _:
                ...  # show "invalid code"
    """
    normalized = normalize_code(code)
    if not normalized:
        return Nothing()
    for promo in available_codes:
        if promo.code == normalized:
            return Some(promo)
    return Nothing()


__all__ = ("normalize_code", "validate_promo_code")
