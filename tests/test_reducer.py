import random
from decimal import Decimal

import pytest
from kungfu import Some

from cartkit import cart as C


def test_add_appends_new_product(product, product2):
    state = C.add_item(C.EMPTY_CART, product, 2)
    state = C.add_item(state, product2)

    assert [(i.product.id, i.quantity) for i in state.items] == [
        (C.ProductId(1), 2),
        (C.ProductId(2), 1),
    ]


def test_add_same_product_merges_quantities(product):
    state = C.add_item(C.EMPTY_CART, product, 2)
    state = C.add_item(state, product, 3)

    assert len(state.items) == 1
    assert state.items[0].quantity == 5


def test_add_existing_keeps_insertion_order(product, product2):
    state = C.add_item(C.EMPTY_CART, product)
    state = C.add_item(state, product2)
    state = C.add_item(state, product)

    assert [i.product.name for i in state.items] == ["Test Product", "Product 2"]
    assert state.items[0].quantity == 2


@pytest.mark.parametrize("quantity", [0, -1, -10])
def test_add_non_positive_quantity_is_ignored(product, quantity):
    state = C.add_item(C.EMPTY_CART, product, 1)

    assert C.add_item(state, product, quantity) is state


def test_remove_item(product, product2):
    state = C.add_item(C.add_item(C.EMPTY_CART, product), product2)
    state = C.remove_item(state, product.id)

    assert [i.product.id for i in state.items] == [product2.id]


def test_remove_absent_item_is_noop(product):
    state = C.add_item(C.EMPTY_CART, product)

    assert C.remove_item(state, C.ProductId(99)) is state


def test_update_quantity_sets_absolute_value(product):
    state = C.add_item(C.EMPTY_CART, product, 5)
    state = C.update_quantity(state, product.id, 2)

    assert state.items[0].quantity == 2


def test_update_quantity_zero_equals_remove(product, product2):
    state = C.add_item(C.add_item(C.EMPTY_CART, product, 3), product2)

    assert C.update_quantity(state, product.id, 0) == C.remove_item(state, product.id)


def test_update_quantity_negative_removes(product):
    state = C.add_item(C.EMPTY_CART, product)

    assert C.update_quantity(state, product.id, -4).is_empty


def test_update_quantity_absent_product_is_noop(product):
    state = C.add_item(C.EMPTY_CART, product)

    assert C.update_quantity(state, C.ProductId(42), 7) is state


def test_apply_promo_replaces_previous(save15, save10):
    state = C.apply_promo_code(C.EMPTY_CART, save15)
    state = C.apply_promo_code(state, save10)

    assert state.applied_promo_code == save10


def test_remove_promo(product, save15):
    state = C.apply_promo_code(C.add_item(C.EMPTY_CART, product), save15)
    state = C.remove_promo_code(state)

    assert state.applied_promo_code is None
    assert len(state.items) == 1


def test_clear_cart_returns_canonical_empty_state(product, product2, save10):
    state = C.add_item(C.add_item(C.EMPTY_CART, product, 4), product2)
    state = C.apply_promo_code(state, save10)

    cleared = C.clear_cart(state)

    assert cleared is C.EMPTY_CART
    assert cleared.items == ()
    assert cleared.applied_promo_code is None
    assert C.clear_cart(C.EMPTY_CART) is C.EMPTY_CART


def test_transitions_do_not_mutate_previous_state(product):
    before = C.add_item(C.EMPTY_CART, product, 1)
    after = C.add_item(before, product, 1)

    assert before.items[0].quantity == 1
    assert after.items[0].quantity == 2
    assert C.EMPTY_CART.items == ()


def test_reduce_rejects_unknown_action():
    with pytest.raises(AssertionError):
        C.reduce(C.EMPTY_CART, object())  # type: ignore[arg-type]


def test_find(product):
    state = C.add_item(C.EMPTY_CART, product, 3)

    match state.find(product.id):
        case Some(item):
            assert item.quantity == 3
        case _:
            pytest.fail("expected the line item")
    assert not isinstance(state.find(C.ProductId(2)), Some)


def test_random_sequences_never_leave_non_positive_quantities():
    rng = random.Random(1234)
    products = [
        C.Product(C.ProductId(n), f"P{n}", Decimal(n) + Decimal("0.49"))
        for n in range(1, 6)
    ]
    state = C.EMPTY_CART

    for _ in range(2000):
        p = rng.choice(products)
        match rng.randrange(3):
            case 0:
                state = C.add_item(state, p, rng.randint(1, 5))
            case 1:
                state = C.remove_item(state, p.id)
            case _:
                state = C.update_quantity(state, p.id, rng.randint(-3, 10))

        ids = [item.product.id for item in state.items]
        assert len(ids) == len(set(ids))
        assert all(item.quantity >= 1 for item in state.items)
