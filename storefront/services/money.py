"""
Money Utilities - Safe Decimal operations for monetary values.

Prices come in as plain numbers (8990, 129990.5, "1000"); everything
below converts them to Decimal first so that cart arithmetic never
touches binary floats.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for integer currencies (RUB, UAH, etc.)
INTEGER_PRECISION = Decimal("1")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number, to_int: bool = False) -> Decimal:
    """
    Round monetary value to display precision.

    Args:
        value: Value to round
        to_int: If True, round to integer (for RUB, UAH, etc.)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Number, currency: str = "RUB") -> str:
    """
    Format monetary value for display: symbol first, thousands separators.

    Examples: ``₽17,980``, ``-₽500``, ``$1,234.50``.

    Args:
        value: Value to format
        currency: Currency code (RUB, USD, EUR, etc.)

    Returns:
        Formatted string with currency symbol
    """
    from storefront.services.currency import CURRENCY_SYMBOLS, INTEGER_CURRENCIES

    decimal_value = to_decimal(value)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    sign = "-" if decimal_value < 0 else ""
    magnitude = abs(decimal_value)

    if currency in INTEGER_CURRENCIES:
        formatted = f"{int(round_money(magnitude, to_int=True)):,}"
    else:
        formatted = f"{round_money(magnitude):,.2f}"

    return f"{sign}{symbol}{formatted}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON responses.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def divide(value: Number, divisor: Number) -> Decimal:
    """Safe division of monetary value (division by zero yields 0)."""
    d = to_decimal(divisor)
    if d == 0:
        return Decimal("0")
    return to_decimal(value) / d


def percent(value: Number, percent_value: Number) -> Decimal:
    """Calculate percentage of a monetary value."""
    return multiply(value, divide(percent_value, 100))
