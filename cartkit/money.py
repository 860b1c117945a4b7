"""
Money — decimal coercion, cent rounding and display formatting.

Calculations stay on raw Decimal values; formatting is for display only.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from cartkit.config import settings

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# ═══════════════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════════════


def to_money(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a number to Decimal without rounding.

    Floats go through str() so 10.99 stays 10.99 instead of its binary
    expansion. Malformed input, NaN and infinities raise ValueError.
    """
    if isinstance(value, Decimal):
        money = value
    else:
        try:
            money = Decimal(str(value) if isinstance(value, float) else value)
        except InvalidOperation:
            raise ValueError(f"not a monetary amount: {value!r}") from None
    if not money.is_finite():
        raise ValueError(f"amount must be finite, got {money}")
    return money


def round_money(value: Decimal | int | float | str) -> Decimal:
    """Round to cents, half up (10.995 -> 11.00)."""
    return to_money(value).quantize(CENT, rounding=ROUND_HALF_UP)


# ═══════════════════════════════════════════════════════════════════════════════
# Formatting
# ═══════════════════════════════════════════════════════════════════════════════


def format_currency(
    amount: Decimal | int | float | str,
    currency: str | None = None,
) -> str:
    """
    Render an amount for display.

    Example:
        format_currency(Decimal("1000"))  # "$1,000.00"
        format_currency(-5)               # "-$5.00"
        format_currency(3, "CHF")         # "3.00 CHF"
    """
    code = (currency or settings.currency).upper()
    value = round_money(amount)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = _SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{digits} {code}"
    return f"{sign}{symbol}{digits}"


def format_percentage(value: Decimal | int | float | str) -> str:
    return f"{to_money(value).normalize():f}%"


__all__ = (
    "CENT",
    "ZERO",
    "to_money",
    "round_money",
    "format_currency",
    "format_percentage",
)
