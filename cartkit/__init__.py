"""
cartkit — shopping cart core: immutable snapshots, pure transitions, totals.

    from cartkit import cart as C      # Snapshots, reducer, totals, promos
    from cartkit import CartSession    # Holder of the current snapshot
    from cartkit import catalog        # Static products and promo codes

Run the terminal storefront with `python -m cartkit`.
"""

from cartkit import config
from cartkit import money
from cartkit import cart
from cartkit import catalog
from cartkit.session import CartSession
from cartkit.config import Settings, settings
from cartkit.money import format_currency, format_percentage, round_money

__version__ = "0.1.0"

__all__ = (
    "config",
    "money",
    "cart",
    "catalog",
    "CartSession",
    "Settings",
    "settings",
    "format_currency",
    "format_percentage",
    "round_money",
)
