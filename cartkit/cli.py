"""
Interactive CLI — terminal storefront over a single CartSession.

┌─────────────────────────────────────────────────────────────────────────┐
│  COMMAND          SESSION CALL                                          │
├─────────────────────────────────────────────────────────────────────────┤
│  add <id> [qty]   find_product_by_id → add_item                         │
│  remove <id>      remove_item                                           │
│  qty <id> <n>     update_quantity (invalid input keeps the old value)   │
│  promo <code>     apply_promo_code                                      │
│  unpromo          remove_promo_code                                     │
│  clear            clear_cart                                            │
└─────────────────────────────────────────────────────────────────────────┘

Lookups and input parsing happen here; the cart only ever sees resolved
products and quantities.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from kungfu import Option, Some, Nothing

from cartkit import cart as C
from cartkit.catalog import PRODUCTS, PROMO_CODES, find_product_by_id
from cartkit.config import Settings, settings as default_settings
from cartkit.money import format_currency
from cartkit.session import CartSession

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Help
# ═══════════════════════════════════════════════════════════════════════════════

HELP_TEXT = """
┌─────────────────────────────────────────────────────────────────────────────┐
│                              COMMANDS                                        │
├─────────────────────────────────────────────────────────────────────────────┤
│  products                   List products                                   │
│  cart                       Show cart and totals                            │
│  add <id> [qty]             Add a product (qty defaults to 1)               │
│  remove <id>                Remove a product from the cart                  │
│  qty <id> <n>               Set the quantity of a cart line                 │
│  promo <code>               Apply a promo code                              │
│  unpromo                    Remove the applied promo code                   │
│  clear                      Empty the cart                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│  help                       Show this help                                  │
│  quit                       Exit                                            │
└─────────────────────────────────────────────────────────────────────────────┘
"""

BANNER = """
╔════════════════════════════════════════════════════════════════════════════╗
║                             HAIR CARE SHOP                                  ║
║                Premium products for your hair care routine                  ║
╚════════════════════════════════════════════════════════════════════════════╝
"""


# ═══════════════════════════════════════════════════════════════════════════════
# Input Parsing
# ═══════════════════════════════════════════════════════════════════════════════


def parse_product_id(raw: str) -> Option[C.ProductId]:
    try:
        return Some(C.ProductId(int(raw)))
    except ValueError:
        return Nothing()


def parse_quantity(raw: str, maximum: int) -> Option[int]:
    """Whole number within 1..maximum, else Nothing()."""
    try:
        quantity = int(raw)
    except ValueError:
        return Nothing()
    if not 1 <= quantity <= maximum:
        return Nothing()
    return Some(quantity)


# ═══════════════════════════════════════════════════════════════════════════════
# Promo Form
# ═══════════════════════════════════════════════════════════════════════════════


class PromoStatus(Enum):
    """
    Promo form state.

    IDLE → SUCCESS (valid code)
         → ERROR (empty or unknown code)
    SUCCESS → IDLE (promo removed)
    """
    IDLE = auto()
    SUCCESS = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class PromoFeedback:
    status: PromoStatus
    message: str


def submit_promo(session: CartSession, raw: str) -> PromoFeedback:
    if not raw.strip():
        return PromoFeedback(PromoStatus.ERROR, "Please enter a promo code")
    invalid = PromoFeedback(PromoStatus.ERROR, "Invalid promo code. Please try again.")
    if not session.apply_promo_code(raw, PROMO_CODES):
        return invalid
    match session.applied_promo_code:
        case C.PromoCode(code=code, display_text=display_text):
            return PromoFeedback(PromoStatus.SUCCESS, f"Promo code {code} applied: {display_text}")
        case _:
            return invalid


def withdraw_promo(session: CartSession) -> PromoFeedback:
    promo = session.applied_promo_code
    if promo is None:
        return PromoFeedback(PromoStatus.ERROR, "No promo code applied")
    session.remove_promo_code()
    return PromoFeedback(PromoStatus.IDLE, f"Removed promo code {promo.code}")


def promo_hint() -> str:
    return "Try: " + ", ".join(promo.code for promo in PROMO_CODES)


# ═══════════════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════════════

BOX_WIDTH = 48


def _rule(left: str, right: str) -> str:
    return left + "─" * BOX_WIDTH + right


def _row(text: str = "") -> str:
    return f"│  {text:<{BOX_WIDTH - 3}} │"


def _pair(label: str, value: str) -> str:
    return _row(f"{label:<{BOX_WIDTH - 17}}{value:>14}")


def render_products() -> str:
    lines = [_rule("┌", "┐"), _row("PRODUCTS"), _rule("├", "┤")]
    for p in PRODUCTS:
        lines.append(_pair(f"[{p.id.value:>3}] {p.name}", format_currency(p.price)))
    lines.append(_rule("└", "┘"))
    return "\n".join(lines)


def render_cart(session: CartSession) -> str:
    if session.is_empty:
        return "  Your cart is empty. Add some products to get started!"

    totals = session.totals
    noun = "item" if totals.item_count == 1 else "items"
    lines = [_rule("┌", "┐"), _row(f"CART ({totals.item_count} {noun})"), _rule("├", "┤")]
    for item in session.items:
        lines.append(_pair(
            f"[{item.product.id.value:>3}] {item.quantity:>2}x {item.product.name}",
            format_currency(C.calculate_item_subtotal(item)),
        ))
        lines.append(_row(f"       {format_currency(item.product.price)} each"))

    promo = session.applied_promo_code
    lines.append(_rule("├", "┤"))
    lines.append(_pair(f"Subtotal ({totals.item_count} {noun})", format_currency(totals.subtotal)))
    # Only a discount that actually lowers the total gets a row
    if promo is not None and totals.discount_amount > 0:
        lines.append(_pair(
            f"Discount ({promo.code}: {promo.display_text})",
            "-" + format_currency(totals.discount_amount),
        ))
    lines.append(_rule("├", "┤"))
    lines.append(_pair("TOTAL", format_currency(totals.total)))
    lines.append(_rule("└", "┘"))

    if totals.discount_amount > 0:
        lines.append(f"  You're saving {format_currency(totals.discount_amount)} on this order!")
    if promo is None:
        lines.append(f"  Have a promo code? {promo_hint()}")
    return "\n".join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# Commands
# ═══════════════════════════════════════════════════════════════════════════════


def cmd_add(session: CartSession, args: list[str], config: Settings) -> None:
    if not 1 <= len(args) <= 2:
        print("  Usage: add <product_id> [qty]")
        print("  Example: add 1 2")
        return

    match parse_product_id(args[0]):
        case Some(product_id):
            pass
        case _:
            print("  ✗ product_id must be a number")
            return

    quantity = 1
    if len(args) == 2:
        match parse_quantity(args[1], config.max_quantity):
            case Some(parsed):
                quantity = parsed
            case _:
                print(f"  ✗ qty must be a whole number from 1 to {config.max_quantity}")
                return

    match find_product_by_id(product_id):
        case Some(product):
            session.add_item(product, quantity)
            print(f"  ✓ Added {quantity}x {product.name}")
        case _:
            logger.warning("product with id %d not found", product_id.value)
            print(f"  ✗ Unknown product: {product_id.value}")


def cmd_remove(session: CartSession, args: list[str]) -> None:
    if len(args) != 1:
        print("  Usage: remove <product_id>")
        return

    match parse_product_id(args[0]):
        case Some(product_id):
            match session.state.find(product_id):
                case Some(item):
                    session.remove_item(product_id)
                    print(f"  ✓ Removed {item.product.name}")
                case _:
                    print(f"  ✗ Product {product_id.value} is not in the cart")
        case _:
            print("  ✗ product_id must be a number")


def cmd_qty(session: CartSession, args: list[str], config: Settings) -> None:
    if len(args) != 2:
        print("  Usage: qty <product_id> <n>")
        print("  Example: qty 1 3")
        return

    match parse_product_id(args[0]):
        case Some(product_id):
            pass
        case _:
            print("  ✗ product_id must be a number")
            return

    match session.state.find(product_id):
        case Some(item):
            pass
        case _:
            print(f"  ✗ Product {product_id.value} is not in the cart")
            return

    match parse_quantity(args[1], config.max_quantity):
        case Some(quantity):
            session.update_quantity(product_id, quantity)
            print(f"  ✓ {item.product.name}: {quantity}")
        case _:
            print(
                f"  ✗ qty must be a whole number from 1 to {config.max_quantity}; "
                f"keeping {item.quantity}"
            )


def print_feedback(feedback: PromoFeedback) -> None:
    mark = "✗" if feedback.status is PromoStatus.ERROR else "✓"
    print(f"  {mark} {feedback.message}")


def execute(
    session: CartSession,
    line: str,
    config: Settings = default_settings,
) -> bool:
    """
    Run one command line against the session.

    Returns False when the user asked to quit.
    """
    parts = line.strip().split()
    if not parts:
        return True

    cmd, args = parts[0].lower(), parts[1:]

    match cmd:
        case "quit" | "exit" | "q":
            print("Bye!")
            return False

        case "help" | "h" | "?":
            print(HELP_TEXT)

        case "products":
            print(render_products())

        case "cart":
            print(render_cart(session))

        case "add":
            cmd_add(session, args, config)

        case "remove":
            cmd_remove(session, args)

        case "qty":
            cmd_qty(session, args, config)

        case "promo":
            print_feedback(submit_promo(session, " ".join(args)))

        case "unpromo":
            print_feedback(withdraw_promo(session))

        case "clear":
            session.clear_cart()
            print("  ✓ Cart cleared")

        case _:
            print(f"  ✗ Unknown command: {cmd}")
            print("  Type 'help' for available commands.")

    return True


# ═══════════════════════════════════════════════════════════════════════════════
# Main Loop
# ═══════════════════════════════════════════════════════════════════════════════


def run_cli(config: Settings = default_settings) -> None:
    session = CartSession()

    print(BANNER)
    print(HELP_TEXT)
    print(render_products())

    while True:
        try:
            line = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not execute(session, line, config):
            break


def main() -> None:
    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_cli(default_settings)


__all__ = (
    "parse_product_id",
    "parse_quantity",
    "PromoStatus",
    "PromoFeedback",
    "submit_promo",
    "withdraw_promo",
    "promo_hint",
    "render_products",
    "render_cart",
    "execute",
    "run_cli",
    "main",
)
