"""Cart package: models, errors, and the per-customer registry."""
from .exceptions import (
    CartError,
    InvalidProductError,
    InvalidQuantityError,
    InvalidUnitPriceError,
    NegativeQuantityError,
    NegativeUnitPriceError,
)
from .models import Product, LineItem, Cart
from .registry import CartRegistry

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
