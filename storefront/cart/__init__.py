"""Cart package: models and engine."""
from .models import CartLine, OrderSummary
from .service import CartEngine

__all__ = [
    "CartLine",
    "OrderSummary",
    "CartEngine",
]
