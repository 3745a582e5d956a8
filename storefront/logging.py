"""
Logging setup for the storefront.

Usage:
    from storefront.logging import get_logger, sanitize_for_logging
    logger = get_logger(__name__)

    logger.info(f"Promo code '{sanitize_for_logging(code)}' not found")

Environment:
    LOG_LEVEL   root level (default INFO)
    VERCEL=1    short format without timestamps (the platform adds them)
"""

import logging
import os
import sys
from functools import cache

_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_PLATFORM_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Control characters a visitor could use to forge log lines (CWE-117)
_UNSAFE_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _install_handler() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    fmt = _PLATFORM_FORMAT if os.environ.get("VERCEL") == "1" else _DETAILED_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root.setLevel(level)
    root.addHandler(handler)

    # TestClient requests go through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)


_install_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make visitor-supplied text (promo codes, session ids) safe to log.

    Control characters are escaped and the result is cut to max_length.

    Returns:
        Sanitized string, or "N/A" if empty
    """
    if not value:
        return "N/A"
    safe_value = str(value).translate(_UNSAFE_CHARS)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = ["get_logger", "sanitize_for_logging"]
