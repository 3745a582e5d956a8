"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from storefront.models import Product, PromoCode
from storefront.services.money import to_decimal, multiply, to_float


@dataclass
class CartLine:
    """Single product line in the cart.

    Display fields are copied from the product when the line is created,
    so later catalog changes do not leak into an existing cart.
    """
    product_id: int
    name: str
    price: Decimal
    quantity: int
    image: str = ""
    category: str = ""

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartLine":
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            image=product.image,
            category=product.category,
        )

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "product_id": self.product_id,
            "name": self.name,
            "price": to_float(self.price),
            "quantity": self.quantity,
            "image": self.image,
            "category": self.category,
            "line_total": to_float(self.line_total),
        }


@dataclass(frozen=True)
class OrderSummary:
    """Totals derived from the cart. Built fresh on every read."""
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    item_count: int
    promo: Optional[PromoCode] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "subtotal": to_float(self.subtotal),
            "discount": to_float(self.discount),
            "total": to_float(self.total),
            "item_count": self.item_count,
            "promo_code": self.promo.code if self.promo else None,
        }
