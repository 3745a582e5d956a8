"""Cart engine: cart lines, promo application and derived totals."""
from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from storefront.logging import get_logger, sanitize_for_logging
from storefront.models import DiscountType, Product, PromoCode
from storefront.services.money import percent, subtract
from .models import CartLine, OrderSummary

logger = get_logger(__name__)


class CartEngine:
    """
    Single source of truth for one shopping cart.

    Features:
    - One line per product; re-adding merges quantities in place
    - Case-insensitive promo lookup against a static promo table
    - Order summary recomputed from current state on every read

    No operation raises: unknown ids are no-ops, non-positive quantities
    remove the line, and an unknown promo code clears the applied promo.
    Catalog existence is the caller's concern.
    """

    def __init__(self, promo_codes: Iterable[PromoCode] = ()):
        self._promo_codes: Tuple[PromoCode, ...] = tuple(promo_codes)
        self._lines: list[CartLine] = []
        self._applied_promo: Optional[PromoCode] = None

    # ==================== Read accessors ====================

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        """Cart lines in order of first addition (copies)."""
        return tuple(replace(line) for line in self._lines)

    @property
    def applied_promo(self) -> Optional[PromoCode]:
        return self._applied_promo

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def get_line(self, product_id: int) -> Optional[CartLine]:
        """Copy of the line for product_id, or None."""
        line = self._find(product_id)
        return replace(line) if line else None

    def _find(self, product_id: int) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product_id == product_id), None)

    # ==================== Mutations ====================

    def add_item(self, product: Product) -> None:
        """Add one unit of product; existing lines keep their position."""
        existing = self._find(product.id)
        if existing:
            existing.quantity += 1
        else:
            self._lines.append(CartLine.from_product(product))
        logger.debug(f"Added product {product.id} to cart")

    def remove_item(self, product_id: int) -> None:
        """Drop the line for product_id if present."""
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.product_id != product_id]
        if len(self._lines) != before:
            logger.debug(f"Removed product {product_id} from cart")

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Set a line's quantity; quantity <= 0 removes it. Never creates a line."""
        if quantity <= 0:
            self.remove_item(product_id)
            return

        line = self._find(product_id)
        if line:
            line.quantity = quantity
            logger.debug(f"Set product {product_id} quantity to {quantity}")

    def apply_promo(self, code_text: str) -> Optional[PromoCode]:
        """
        Apply a promo code entered by the user.

        A match replaces any applied promo. No match clears the applied
        promo, even if a valid one was applied before.

        Returns:
            The promo now applied, or None
        """
        promo = next((p for p in self._promo_codes if p.matches(code_text)), None)
        self._applied_promo = promo

        if promo:
            logger.info(f"Promo code {promo.code} applied")
        else:
            logger.info(f"Promo code '{sanitize_for_logging(code_text)}' not found, promo cleared")
        return promo

    def clear(self) -> None:
        """Remove every line. The applied promo stays as it is."""
        self._lines = []

    # ==================== Derived summary ====================

    def get_summary(self) -> OrderSummary:
        """
        Compute totals from current state.

        Calculation:
        1. subtotal = sum(price * quantity)
        2. discount = subtotal * value / 100 (percentage) or value (fixed)
        3. total = subtotal - discount

        Fixed discounts are not capped, so total can go negative.
        """
        subtotal = sum((line.line_total for line in self._lines), Decimal("0"))
        discount = self._discount_for(subtotal)

        return OrderSummary(
            subtotal=subtotal,
            discount=discount,
            total=subtract(subtotal, discount),
            item_count=sum(line.quantity for line in self._lines),
            promo=self._applied_promo,
        )

    def _discount_for(self, subtotal: Decimal) -> Decimal:
        promo = self._applied_promo
        if promo is None:
            return Decimal("0")
        if promo.type is DiscountType.PERCENTAGE:
            return percent(subtotal, promo.discount)
        return promo.discount

