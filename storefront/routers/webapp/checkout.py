"""
WebApp Checkout Router

Payment method selection and the checkout preview. No payment is made.
"""
from fastapi import APIRouter, Depends

from storefront.routers.deps import get_session
from storefront.session import StorefrontSession
from .formatting import format_checkout_response
from .models import SelectPaymentMethodRequest

router = APIRouter(tags=["webapp-checkout"])


@router.get("/checkout")
async def get_checkout(session: StorefrontSession = Depends(get_session)):
    """Summary, selected payment method and whether checkout is possible."""
    return format_checkout_response(session)


@router.post("/checkout/payment-method")
async def select_payment_method(request: SelectPaymentMethodRequest, session: StorefrontSession = Depends(get_session)):
    """Select a payment method (invalid values are rejected by validation)."""
    session.select_payment_method(request.method)
    return format_checkout_response(session)
