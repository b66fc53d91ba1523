"""
shopcart

In-memory shopping carts:
- cart: Product, LineItem, Cart and the CartRegistry
- money: Decimal helpers
- models: Pydantic snapshots of cart state
- logging: logger factory
"""
from shopcart.cart import (
    Cart,
    CartError,
    CartRegistry,
    InvalidProductError,
    InvalidQuantityError,
    InvalidUnitPriceError,
    LineItem,
    NegativeQuantityError,
    NegativeUnitPriceError,
    Product,
)

__all__ = [
    "Product",
    "LineItem",
    "Cart",
    "CartRegistry",
    "CartError",
    "InvalidProductError",
    "InvalidUnitPriceError",
    "InvalidQuantityError",
    "NegativeUnitPriceError",
    "NegativeQuantityError",
]
