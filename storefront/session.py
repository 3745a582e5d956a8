"""Browsing sessions: one cart and one payment method choice each.

Sessions live in process memory only and are gone on restart.
"""
import time
from collections import OrderedDict
from typing import Callable, Iterable, Optional, Tuple

from storefront.cart import CartEngine
from storefront.errors import ERROR_UNKNOWN_PAYMENT_METHOD, UnknownPaymentMethodError
from storefront.logging import get_logger, sanitize_for_logging
from storefront.models import DEFAULT_PAYMENT_METHOD, PaymentMethod, PromoCode

logger = get_logger(__name__)

# Abandoned sessions expire after a day of inactivity
SESSION_TTL = 86400
MAX_SESSIONS = 10000


class StorefrontSession:
    """Cart engine plus checkout selections for a single visitor."""

    def __init__(self, promo_codes: Iterable[PromoCode] = ()):
        self.cart = CartEngine(promo_codes)
        self.payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD

    def select_payment_method(self, method: PaymentMethod | str) -> PaymentMethod:
        """Select a payment option by enum member or value ("card", "paypal", ...)."""
        try:
            self.payment_method = PaymentMethod(method)
        except ValueError:
            raise UnknownPaymentMethodError(f"{ERROR_UNKNOWN_PAYMENT_METHOD}: {method!r}") from None
        return self.payment_method

    def checkout_preview(self) -> dict:
        """What the checkout button would charge. Nothing is paid."""
        return {
            "summary": self.cart.get_summary(),
            "payment_method": self.payment_method,
            "can_checkout": not self.cart.is_empty,
        }


class SessionRegistry:
    """
    In-memory map of session id to StorefrontSession.

    Sessions idle for longer than ttl_seconds are dropped, and once
    max_sessions is reached the least recently used session goes first.
    """

    def __init__(
        self,
        promo_codes: Iterable[PromoCode] = (),
        ttl_seconds: float = SESSION_TTL,
        max_sessions: int = MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._promo_codes = tuple(promo_codes)
        self._ttl = ttl_seconds
        self._max_sessions = max_sessions
        self._clock = clock
        # session id -> (session, last seen); oldest access first
        self._sessions: "OrderedDict[str, Tuple[StorefrontSession, float]]" = OrderedDict()

    def get(self, session_id: str) -> Optional[StorefrontSession]:
        self.evict_expired()
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        self._touch(session_id, entry[0])
        return entry[0]

    def get_or_create(self, session_id: str) -> StorefrontSession:
        session = self.get(session_id)
        if session is not None:
            return session

        while self._sessions and len(self._sessions) >= self._max_sessions:
            oldest_id = next(iter(self._sessions))
            logger.info(f"Session limit reached, dropping {sanitize_for_logging(oldest_id, 8)}")
            self.discard(oldest_id)

        session = StorefrontSession(self._promo_codes)
        self._touch(session_id, session)
        logger.info(f"Started session {sanitize_for_logging(session_id, 8)}")
        return session

    def evict_expired(self) -> int:
        """Drop sessions idle for longer than the TTL. Returns how many were dropped."""
        cutoff = self._clock() - self._ttl
        dropped = 0
        # Entries are ordered by last access, so stop at the first live one
        while self._sessions:
            session_id, (_, last_seen) = next(iter(self._sessions.items()))
            if last_seen > cutoff:
                break
            self.discard(session_id)
            dropped += 1
        if dropped:
            logger.info(f"Expired {dropped} idle sessions")
        return dropped

    def discard(self, session_id: str) -> bool:
        """End a session. Returns False if it did not exist."""
        return self._sessions.pop(session_id, None) is not None

    def _touch(self, session_id: str, session: StorefrontSession) -> None:
        self._sessions[session_id] = (session, self._clock())
        self._sessions.move_to_end(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
