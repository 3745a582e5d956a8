"""
Currency display settings.

The storefront has a single display currency for the whole process;
amounts in the cart are plain magnitudes and are only decorated here.
"""
import os
from typing import Dict

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CURRENCY = "RUB"

# Currency symbols mapping
CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "RUB": "₽",
    "EUR": "€",
    "UAH": "₴",
    "TRY": "₺",
    "INR": "₹",
    "GBP": "£",
    "CNY": "¥",
    "JPY": "¥",
    "KRW": "₩",
    "BRL": "R$",
}

# Currencies that should be displayed as integers (no decimals)
INTEGER_CURRENCIES = {"RUB", "UAH", "TRY", "INR", "JPY", "KRW"}


def get_display_currency() -> str:
    """
    Display currency from STOREFRONT_CURRENCY (default RUB).

    Unknown codes fall back to the default with a warning.
    """
    currency = os.environ.get("STOREFRONT_CURRENCY", DEFAULT_CURRENCY).strip().upper()
    if currency not in CURRENCY_SYMBOLS:
        logger.warning(f"Unsupported STOREFRONT_CURRENCY {currency!r}, using {DEFAULT_CURRENCY}")
        return DEFAULT_CURRENCY
    return currency
