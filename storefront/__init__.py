"""
Storefront Package

This package contains the storefront components:
- cart: cart engine (lines, promo codes, order summary)
- catalog: static product catalog and promo table
- session: per-session cart + payment method selection
- services: money arithmetic and currency display
- routers: FastAPI endpoints for the web storefront

Note: Imports are lazy so that `import storefront` stays cheap
and does not pull FastAPI in for engine-only users.
"""

__all__ = [
    "CartEngine",
    "get_catalog",
    "StorefrontSession",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartEngine":
        from storefront.cart import CartEngine
        return CartEngine
    elif name == "get_catalog":
        from storefront.catalog import get_catalog
        return get_catalog
    elif name == "StorefrontSession":
        from storefront.session import StorefrontSession
        return StorefrontSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
