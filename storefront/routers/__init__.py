"""HTTP routers for the storefront."""
from .webapp import router as webapp_router

__all__ = ["webapp_router"]
