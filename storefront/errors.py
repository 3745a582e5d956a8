"""
Common Error Constants

Centralized error messages and the small exception hierarchy used
outside the cart engine (the engine itself never raises).
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Session errors
ERROR_SESSION_REQUIRED = "X-Session-Id header is required"
ERROR_SESSION_ID_TOO_LONG = "X-Session-Id header is too long"

# Payment method errors
ERROR_UNKNOWN_PAYMENT_METHOD = "Unknown payment method"

# Catalog errors
ERROR_DUPLICATE_PRODUCT = "Duplicate product id in catalog"
ERROR_DUPLICATE_PROMO = "Duplicate promo code in promo table"

# Generic errors
ERROR_INTERNAL = "Internal server error"


class StorefrontError(Exception):
    """Base class for storefront errors."""


class CatalogError(StorefrontError):
    """Static catalog or promo table data is inconsistent."""


class UnknownPaymentMethodError(StorefrontError, ValueError):
    """Payment method is not one of the offered options."""
