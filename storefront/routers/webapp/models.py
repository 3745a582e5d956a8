"""
WebApp API Pydantic Models

Request bodies for the storefront endpoints.
"""
from pydantic import BaseModel

from storefront.models import PaymentMethod


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: int


class UpdateCartItemRequest(BaseModel):
    product_id: int
    quantity: int  # <= 0 removes the line


class ApplyPromoRequest(BaseModel):
    code: str


# ==================== CHECKOUT MODELS ====================

class SelectPaymentMethodRequest(BaseModel):
    method: PaymentMethod
