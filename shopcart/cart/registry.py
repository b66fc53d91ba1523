"""In-memory registry of active carts keyed by customer identifier."""
from decimal import Decimal
from functools import reduce
from typing import Dict, List, Optional

from shopcart.logging import get_logger, sanitize_id_for_logging
from shopcart.models import RegistrySummary
from shopcart.money import TICKET_ROUNDING, add, divide_money
from .models import Cart

logger = get_logger(__name__)


class CartRegistry:
    """
    Creates, fetches and invalidates carts, one per customer.

    The registry is a plain object owned by the caller; create one per
    application scope. Expiring carts (checkout, session timeout) is up to
    the caller, via invalidate().

    Usage:
        registry = CartRegistry()
        cart = registry.create("customer-1")
        cart.add_item(product, Decimal("9.90"), 2)
        registry.average_ticket()
        registry.invalidate("customer-1")
    """

    def __init__(self):
        self._carts: Dict[str, Cart] = {}

    def __len__(self) -> int:
        return len(self._carts)

    def __contains__(self, customer_id: object) -> bool:
        return customer_id in self._carts

    def customer_ids(self) -> List[str]:
        """Identifiers of all active carts, in creation order."""
        return list(self._carts)

    def create(self, customer_id: str) -> Cart:
        """Return the customer's cart, creating an empty one if needed."""
        cart = self._carts.get(customer_id)
        if cart is not None:
            return cart

        cart = Cart(customer_id=customer_id)
        self._carts[customer_id] = cart
        logger.debug("Created cart for customer %s", sanitize_id_for_logging(customer_id))
        return cart

    def get(self, customer_id: str) -> Optional[Cart]:
        """Return the customer's cart without creating one."""
        return self._carts.get(customer_id)

    def invalidate(self, customer_id: str) -> bool:
        """Drop the customer's cart. Returns False if there was none."""
        if customer_id not in self._carts:
            return False

        del self._carts[customer_id]
        logger.debug("Invalidated cart for customer %s", sanitize_id_for_logging(customer_id))
        return True

    def grand_total(self) -> Decimal:
        """Sum of all cart totals."""
        return reduce(add, (cart.total for cart in self._carts.values()), Decimal("0"))

    def average_ticket(self) -> Decimal:
        """
        Average cart total, rounded to cents with ties going down.

        Returns Decimal("0") when the carts sum to zero (including when
        there are no carts).
        """
        total = self.grand_total()
        if total == 0:
            return Decimal("0")

        return divide_money(total, len(self._carts), rounding=TICKET_ROUNDING)

    def summary(self) -> RegistrySummary:
        """Snapshot of every active cart."""
        return RegistrySummary(
            cart_count=len(self._carts),
            grand_total=self.grand_total(),
            average_ticket=self.average_ticket(),
            carts=[cart.summary() for cart in self._carts.values()],
        )
