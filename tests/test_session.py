import logging
from decimal import Decimal

from cartkit import cart as C
from cartkit.session import CartSession


def test_new_session_is_empty():
    session = CartSession()

    assert session.is_empty
    assert session.state is C.EMPTY_CART
    assert session.totals.item_count == 0


def test_add_and_totals(product, product2):
    session = CartSession()
    session.add_item(product, 2)
    session.add_item(product2)

    assert not session.is_empty
    assert session.totals.subtotal == Decimal("27.97")
    assert session.totals.item_count == 3


def test_apply_valid_promo_returns_true(product, promo_codes):
    session = CartSession()
    session.add_item(product, 2)

    assert session.apply_promo_code(" save15 ", promo_codes) is True
    assert session.applied_promo_code.code == "SAVE15"
    assert session.totals.total == Decimal("18.68")


def test_apply_invalid_promo_returns_false_and_keeps_state(product, promo_codes):
    session = CartSession()
    session.add_item(product)
    session.apply_promo_code("SAVE10", promo_codes)
    before = session.state

    assert session.apply_promo_code("BOGUS", promo_codes) is False
    assert session.state is before
    assert session.applied_promo_code.code == "SAVE10"


def test_remove_promo(product, promo_codes):
    session = CartSession()
    session.add_item(product)
    session.apply_promo_code("SAVE10", promo_codes)
    session.remove_promo_code()

    assert session.applied_promo_code is None


def test_update_and_remove(product, product2):
    session = CartSession()
    session.add_item(product)
    session.add_item(product2)
    session.update_quantity(product.id, 4)
    session.remove_item(product2.id)

    assert [(i.product.id, i.quantity) for i in session.items] == [(product.id, 4)]

    session.update_quantity(product.id, 0)
    assert session.is_empty


def test_clear_cart(product, promo_codes):
    session = CartSession()
    session.add_item(product, 3)
    session.apply_promo_code("SAVE15", promo_codes)
    session.clear_cart()

    assert session.state is C.EMPTY_CART


def test_totals_cached_per_snapshot(product):
    session = CartSession()
    session.add_item(product)
    first = session.totals

    assert session.totals is first

    session.remove_item(C.ProductId(404))  # no-op keeps the snapshot
    assert session.totals is first

    session.add_item(product)
    assert session.totals is not first
    assert session.totals.item_count == 2


def test_history_records_dispatched_actions(product):
    session = CartSession()
    session.add_item(product, 2)
    session.update_quantity(product.id, 1)
    session.clear_cart()

    assert session.history == (
        C.AddItem(product, 2),
        C.UpdateQuantity(product.id, 1),
        C.ClearCart(),
    )


def test_non_positive_add_is_logged_and_ignored(product, caplog):
    session = CartSession()

    with caplog.at_level(logging.WARNING, logger="cartkit.session"):
        session.add_item(product, 0)

    assert session.is_empty
    assert "non-positive quantity" in caplog.text


def test_dispatch_returns_new_state(product):
    session = CartSession()
    state = session.dispatch(C.AddItem(product, 1))

    assert state is session.state
    assert state.items[0].product == product
