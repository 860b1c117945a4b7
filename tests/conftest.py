import pytest
from decimal import Decimal

from cartkit import cart as C
from cartkit.config import Settings


@pytest.fixture
def product():
    return C.Product(C.ProductId(1), "Test Product", Decimal("10.99"))


@pytest.fixture
def product2():
    return C.Product(C.ProductId(2), "Product 2", Decimal("5.99"))


@pytest.fixture
def save15():
    return C.PromoCode("SAVE15", C.Percentage(Decimal("15")), "15% off")


@pytest.fixture
def save10():
    return C.PromoCode("SAVE10", C.Fixed(Decimal("10")), "$10 off")


@pytest.fixture
def promo_codes(save15, save10):
    return (save15, save10)


@pytest.fixture
def config():
    """Settings independent of the environment running the tests."""
    return Settings(currency="USD", max_quantity=99, log_level="WARNING")
