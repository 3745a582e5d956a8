"""
WebApp Cart Router

Shopping cart endpoints. Each mutation returns the full cart state
read right after it, so the client never renders a stale total.
"""
from fastapi import APIRouter, HTTPException, Depends

from storefront.catalog import get_catalog
from storefront.errors import ERROR_INTERNAL, ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger
from storefront.routers.deps import get_session
from storefront.session import StorefrontSession
from .formatting import format_cart_response
from .models import AddToCartRequest, UpdateCartItemRequest, ApplyPromoRequest

logger = get_logger(__name__)

router = APIRouter(tags=["webapp-cart"])


@router.get("/cart")
async def get_webapp_cart(session: StorefrontSession = Depends(get_session)):
    """Get the session's shopping cart."""
    try:
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to get cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, session: StorefrontSession = Depends(get_session)):
    """Add one unit of a catalog product."""
    product = get_catalog().get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    try:
        session.cart.add_item(product)
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to add to cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, session: StorefrontSession = Depends(get_session)):
    """Update cart item quantity (<= 0 = remove)."""
    try:
        session.cart.set_quantity(request.product_id, request.quantity)
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to update cart item: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.delete("/cart/item")
async def remove_cart_item(product_id: int, session: StorefrontSession = Depends(get_session)):
    """Remove item from cart."""
    try:
        session.cart.remove_item(product_id)
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to remove cart item: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.post("/cart/promo/apply")
async def apply_cart_promo(request: ApplyPromoRequest, session: StorefrontSession = Depends(get_session)):
    """Apply promo code. An unknown code clears the current promo."""
    try:
        session.cart.apply_promo(request.code)
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to apply promo code: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)


@router.post("/cart/clear")
async def clear_cart(session: StorefrontSession = Depends(get_session)):
    """Empty the cart. The applied promo is kept."""
    try:
        session.cart.clear()
        return format_cart_response(session)
    except Exception as e:
        logger.error(f"Failed to clear cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_INTERNAL)
