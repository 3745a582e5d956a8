# Services Module
from .currency import get_display_currency
from .money import format_money, to_decimal

__all__ = ["get_display_currency", "format_money", "to_decimal"]
