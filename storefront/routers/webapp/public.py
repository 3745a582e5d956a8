"""
WebApp Public Router

Catalog and payment options. No session needed.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException

from storefront.catalog import get_catalog
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.models import PaymentMethod
from storefront.services.currency import get_display_currency
from .formatting import format_payment_method, format_product

router = APIRouter(tags=["webapp-public"])


@router.get("/products")
async def get_products(category: Optional[str] = None):
    """List catalog products, optionally filtered by category label."""
    catalog = get_catalog()
    currency = get_display_currency()
    products = catalog.products_in_category(category) if category else catalog.products

    return {
        "products": [format_product(p, currency) for p in products],
        "categories": catalog.categories(),
        "count": len(products),
        "currency": currency,
    }


@router.get("/products/{product_id}")
async def get_product(product_id: int):
    """Get a single catalog product."""
    product = get_catalog().get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return format_product(product, get_display_currency())


@router.get("/payment-methods")
async def get_payment_methods():
    """Payment options offered at checkout."""
    return {"payment_methods": [format_payment_method(m) for m in PaymentMethod]}
