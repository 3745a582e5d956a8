"""
Pydantic Models - Catalog entities

Contains the immutable records fed into the cart engine:
- Product: catalog entry
- PromoCode: discount definition from the promo table
- PaymentMethod: payment options offered at checkout
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================
# Enums
# ============================================================

class DiscountType(str, Enum):
    """How a promo code's discount value is interpreted."""
    PERCENTAGE = "percentage"  # share of subtotal, 0-100
    FIXED = "fixed"  # flat amount in currency units


class PaymentMethod(str, Enum):
    """Payment options shown at checkout (display only)."""
    CARD = "card"
    APPLE_PAY = "apple_pay"
    PAYPAL = "paypal"

    @property
    def label(self) -> str:
        return PAYMENT_METHOD_LABELS[self]


PAYMENT_METHOD_LABELS = {
    PaymentMethod.CARD: "Credit Card",
    PaymentMethod.APPLE_PAY: "Apple Pay",
    PaymentMethod.PAYPAL: "PayPal",
}

DEFAULT_PAYMENT_METHOD = PaymentMethod.CARD


# ============================================================
# Catalog entities
# ============================================================

class Product(BaseModel):
    """Catalog entry. Never mutated."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal = Field(ge=0, description="Unit price in currency units")
    image: str = ""
    category: str = ""


class PromoCode(BaseModel):
    """Promo table entry. Never mutated."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    discount: Decimal = Field(ge=0)
    type: DiscountType

    @model_validator(mode="after")
    def _check_percentage_range(self) -> "PromoCode":
        if self.type is DiscountType.PERCENTAGE and self.discount > 100:
            raise ValueError("percentage discount must be between 0 and 100")
        return self

    def matches(self, code_text: str) -> bool:
        """Case-insensitive exact match; surrounding whitespace is significant."""
        return self.code.lower() == code_text.lower()
