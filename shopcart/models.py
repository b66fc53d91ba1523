"""
Pydantic Models - Read-only snapshots of cart state

Used when cart data leaves the process boundary (API responses, prompts):
- LineItemSummary: one product line
- CartSummary: one customer's cart
- RegistrySummary: every active cart plus the average ticket
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class LineItemSummary(BaseModel):
    """Line item snapshot."""
    code: int = Field(description="Product code")
    description: str = Field(default="", description="Product description")
    unit_price: Decimal = Field(description="Price per unit", ge=0)
    quantity: int = Field(description="Units in cart", ge=0)
    subtotal: Decimal = Field(description="unit_price * quantity, unrounded", ge=0)


class CartSummary(BaseModel):
    """Cart snapshot."""
    customer_id: Optional[str] = Field(default=None, description="Owner of the cart")
    is_empty: bool = True
    total_items: int = Field(default=0, description="Sum of quantities", ge=0)
    items: List[LineItemSummary] = Field(default_factory=list)
    total: Decimal = Field(default=Decimal("0"), description="Sum of subtotals", ge=0)


class RegistrySummary(BaseModel):
    """
    Snapshot of all active carts.

    average_ticket is already rounded to cents (half-down).
    """
    cart_count: int = Field(default=0, ge=0)
    grand_total: Decimal = Field(default=Decimal("0"), ge=0)
    average_ticket: Decimal = Field(default=Decimal("0"), ge=0)
    carts: List[CartSummary] = Field(default_factory=list)
