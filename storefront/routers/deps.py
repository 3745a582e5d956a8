"""
Shared Dependencies for Routers

Lazy-loaded singletons plus the session dependency.
"""

import os
from typing import Optional

from fastapi import Header, HTTPException

from storefront.catalog import get_catalog
from storefront.errors import ERROR_SESSION_ID_TOO_LONG, ERROR_SESSION_REQUIRED
from storefront.session import MAX_SESSIONS, SESSION_TTL, SessionRegistry, StorefrontSession

MAX_SESSION_ID_LENGTH = 128


# ==================== LAZY SINGLETONS ====================

_session_registry: Optional[SessionRegistry] = None


def get_session_registry() -> SessionRegistry:
    """Get or create the SessionRegistry singleton (lazy loaded)"""
    global _session_registry
    if _session_registry is None:
        _session_registry = SessionRegistry(
            get_catalog().promo_codes,
            ttl_seconds=float(os.environ.get("SESSION_TTL_SECONDS", SESSION_TTL)),
            max_sessions=int(os.environ.get("MAX_SESSIONS", MAX_SESSIONS)),
        )
    return _session_registry


def reset_session_registry() -> None:
    """Drop every live session (used on shutdown and in tests)."""
    global _session_registry
    _session_registry = None


# ==================== SESSION ====================

def get_session(x_session_id: Optional[str] = Header(default=None)) -> StorefrontSession:
    """Resolve the caller's session from the X-Session-Id header."""
    if not x_session_id or not x_session_id.strip():
        raise HTTPException(status_code=400, detail=ERROR_SESSION_REQUIRED)
    if len(x_session_id) > MAX_SESSION_ID_LENGTH:
        raise HTTPException(status_code=400, detail=ERROR_SESSION_ID_TOO_LONG)
    return get_session_registry().get_or_create(x_session_id)
