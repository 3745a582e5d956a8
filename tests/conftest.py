"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("STOREFRONT_CURRENCY", "RUB")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from storefront.cart import CartEngine
from storefront.catalog import PROMO_CODES
from storefront.models import DiscountType, Product, PromoCode


@pytest.fixture
def headphones():
    """Product A from the storefront catalog"""
    return Product(
        id=1,
        name="Беспроводные наушники",
        price=8990,
        image="img/headphones.jpg",
        category="Аудио",
    )


@pytest.fixture
def phone():
    return Product(id=2, name="Смартфон Pro Max", price=89990, image="img/phone.jpg", category="Телефоны")


@pytest.fixture
def laptop():
    return Product(id=3, name="Ноутбук MacBook", price=129990, image="img/laptop.jpg", category="Компьютеры")


@pytest.fixture
def promo_codes():
    """Promo table: SAVE10 (10%), WELCOME (1000 fixed), SALE20 (20%)"""
    return PROMO_CODES


@pytest.fixture
def big_fixed_promo():
    return PromoCode(code="BIGFIX", discount=50000, type=DiscountType.FIXED)


@pytest.fixture
def engine(promo_codes):
    """Empty cart engine wired to the default promo table"""
    return CartEngine(promo_codes)
