"""Static product catalog and promo table.

Both are fixed for the lifetime of the process and are only ever read.
"""
from typing import Iterable, List, Optional, Tuple

from storefront.errors import CatalogError, ERROR_DUPLICATE_PRODUCT, ERROR_DUPLICATE_PROMO
from storefront.logging import get_logger
from storefront.models import DiscountType, Product, PromoCode

logger = get_logger(__name__)


PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Беспроводные наушники",
        price=8990,
        image="img/23e0c5dc-fb3a-4f35-ae52-cf9a9dc02414.jpg",
        category="Аудио",
    ),
    Product(
        id=2,
        name="Смартфон Pro Max",
        price=89990,
        image="img/8bf5b5ea-162d-4677-a253-489171ebe9af.jpg",
        category="Телефоны",
    ),
    Product(
        id=3,
        name="Ноутбук MacBook",
        price=129990,
        image="img/cdac6799-ec7c-4e98-8318-ed5ba53e0a60.jpg",
        category="Компьютеры",
    ),
)

PROMO_CODES: Tuple[PromoCode, ...] = (
    PromoCode(code="SAVE10", discount=10, type=DiscountType.PERCENTAGE),
    PromoCode(code="WELCOME", discount=1000, type=DiscountType.FIXED),
    PromoCode(code="SALE20", discount=20, type=DiscountType.PERCENTAGE),
)


class Catalog:
    """Read-only view over the products and promo table."""

    def __init__(self, products: Iterable[Product], promo_codes: Iterable[PromoCode]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._promo_codes: Tuple[PromoCode, ...] = tuple(promo_codes)

        product_ids = [p.id for p in self._products]
        if len(set(product_ids)) != len(product_ids):
            raise CatalogError(ERROR_DUPLICATE_PRODUCT)

        codes = [p.code.lower() for p in self._promo_codes]
        if len(set(codes)) != len(codes):
            raise CatalogError(ERROR_DUPLICATE_PROMO)

        self._by_id = {p.id: p for p in self._products}

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def promo_codes(self) -> Tuple[PromoCode, ...]:
        return self._promo_codes

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def categories(self) -> List[str]:
        """Distinct category labels in catalog order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def products_in_category(self, category: str) -> List[Product]:
        return [p for p in self._products if p.category == category]


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get the default Catalog singleton."""
    global _catalog
    if _catalog is None:
        _catalog = Catalog(PRODUCTS, PROMO_CODES)
        logger.info(f"Catalog loaded: {len(_catalog.products)} products, {len(_catalog.promo_codes)} promo codes")
    return _catalog
