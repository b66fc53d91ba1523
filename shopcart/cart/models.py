"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from functools import reduce
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterator, List, Optional

from shopcart.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from shopcart.models import CartSummary, LineItemSummary
from shopcart.money import add, multiply, parse_decimal, to_decimal
from .exceptions import (
    InvalidProductError,
    InvalidQuantityError,
    InvalidUnitPriceError,
    NegativeQuantityError,
    NegativeUnitPriceError,
)

logger = get_logger(__name__)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Product:
    """
    Catalog entry that can be added to a cart.

    Two products are equal when they have the same code; the description
    is informational and ignored by == and hash().
    """
    code: int
    description: str = field(default="", compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"code": self.code, "description": self.description}


@dataclass
class LineItem:
    """Single product line in the cart."""
    product: Product
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        self.unit_price = to_decimal(self.unit_price)

    @property
    def subtotal(self) -> Decimal:
        """unit_price * quantity, not rounded."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "product": self.product.to_dict(),
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
            "subtotal": str(self.subtotal),
        }

    def summary(self) -> LineItemSummary:
        return LineItemSummary(
            code=self.product.code,
            description=self.product.description,
            unit_price=self.unit_price,
            quantity=self.quantity,
            subtotal=self.subtotal,
        )


@dataclass
class Cart:
    """
    Shopping cart of one customer.

    Items keep insertion order (positions are used by remove_item_at) and
    hold at most one line per product.
    """
    customer_id: Optional[str] = None
    items: List[LineItem] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        now = _utcnow()
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    @property
    def total(self) -> Decimal:
        """Sum of all subtotals; Decimal("0") for an empty cart."""
        return reduce(add, (item.subtotal for item in self.items), Decimal("0"))

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_item(self, product: Optional[Product]) -> Optional[LineItem]:
        """Return the line holding `product`, or None."""
        if product is None:
            return None
        return next((item for item in self.items if item.product == product), None)

    def add_item(self, product: Product, unit_price: Decimal, quantity: int) -> LineItem:
        """
        Add a product to the cart.

        If the product is already in the cart the quantities are summed and,
        when the new unit price differs, it replaces the stored one. The line
        keeps its position.

        Raises:
            InvalidProductError: product is None
            InvalidUnitPriceError: unit_price is None, unparsable, NaN or infinite
            InvalidQuantityError: quantity is not an int
            NegativeUnitPriceError: unit_price < 0
            NegativeQuantityError: quantity < 0
        """
        if product is None:
            logger.warning("Rejected item for cart %s: missing product", sanitize_id_for_logging(self.customer_id))
            raise InvalidProductError()
        try:
            price = parse_decimal(unit_price)
        except ValueError:
            logger.warning("Rejected product %s: invalid unit price %r", product.code, unit_price)
            raise InvalidUnitPriceError(unit_price) from None
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            logger.warning("Rejected product %s: non-integer quantity %r", product.code, quantity)
            raise InvalidQuantityError(quantity)
        if price < 0:
            logger.warning("Rejected product %s: negative unit price %s", product.code, price)
            raise NegativeUnitPriceError(price)
        if quantity < 0:
            logger.warning("Rejected product %s: negative quantity %s", product.code, quantity)
            raise NegativeQuantityError(quantity)

        existing_item = self.find_item(product)

        if existing_item is not None:
            existing_item.quantity += quantity
            if existing_item.unit_price != price:
                existing_item.unit_price = price
            item = existing_item
        else:
            item = LineItem(product=product, unit_price=price, quantity=quantity)
            self.items.append(item)

        self.updated_at = _utcnow()
        logger.debug(
            "Cart %s: product %s (%s) now x%s @ %s",
            sanitize_id_for_logging(self.customer_id), product.code,
            sanitize_string_for_logging(product.description), item.quantity, item.unit_price,
        )
        return item

    def remove_item(self, product: Optional[Product]) -> bool:
        """Remove the line holding `product`. Returns False if there is none."""
        item = self.find_item(product)
        if item is None:
            return False

        self.items.remove(item)
        self.updated_at = _utcnow()
        return True

    def remove_item_at(self, position: int) -> bool:
        """Remove the line at zero-based `position`. Returns False if out of range."""
        if position < 0 or position >= len(self.items):
            return False

        del self.items[position]
        self.updated_at = _utcnow()
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "customer_id": self.customer_id,
            "items": [item.to_dict() for item in self.items],
            "total": str(self.total),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def summary(self) -> CartSummary:
        """Snapshot of the cart for API/prompt use."""
        return CartSummary(
            customer_id=self.customer_id,
            is_empty=self.is_empty,
            total_items=self.total_items,
            items=[item.summary() for item in self.items],
            total=self.total,
        )
