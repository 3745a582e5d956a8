"""
Response builders shared by the webapp routers.

Every amount is returned twice:
- raw numeric value (for calculations on the client)
- *_display string with currency symbol (for UI)
"""
from storefront.cart import CartLine, OrderSummary
from storefront.models import PaymentMethod, Product
from storefront.services.currency import get_display_currency
from storefront.services.money import format_money, to_float
from storefront.session import StorefrontSession


def format_product(product: Product, currency: str) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": to_float(product.price),
        "price_display": format_money(product.price, currency),
        "image": product.image,
        "category": product.category,
    }


def format_line(line: CartLine, currency: str) -> dict:
    data = line.to_dict()
    data["price_display"] = format_money(line.price, currency)
    data["line_total_display"] = format_money(line.line_total, currency)
    return data


def format_summary(summary: OrderSummary, currency: str) -> dict:
    data = summary.to_dict()
    data["subtotal_display"] = format_money(summary.subtotal, currency)
    data["discount_display"] = format_money(summary.discount, currency)
    data["total_display"] = format_money(summary.total, currency)
    return data


def format_payment_method(method: PaymentMethod) -> dict:
    return {"id": method.value, "label": method.label}


def format_cart_response(session: StorefrontSession) -> dict:
    """Cart lines, applied promo and summary as read right after the last mutation."""
    currency = get_display_currency()
    cart = session.cart
    promo = cart.applied_promo

    return {
        "items": [format_line(line, currency) for line in cart.lines],
        "promo": {
            "code": promo.code,
            "discount": to_float(promo.discount),
            "type": promo.type.value,
        } if promo else None,
        "summary": format_summary(cart.get_summary(), currency),
        "is_empty": cart.is_empty,
        "currency": currency,
    }


def format_checkout_response(session: StorefrontSession) -> dict:
    currency = get_display_currency()
    preview = session.checkout_preview()

    return {
        "summary": format_summary(preview["summary"], currency),
        "payment_method": format_payment_method(preview["payment_method"]),
        "can_checkout": preview["can_checkout"],
        "currency": currency,
    }
