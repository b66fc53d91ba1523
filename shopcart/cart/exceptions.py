"""Errors raised when an item cannot be added to a cart."""
from typing import Any

from shopcart.errors import (
    ERROR_INVALID_PRODUCT,
    ERROR_INVALID_QUANTITY,
    ERROR_INVALID_UNIT_PRICE,
    ERROR_NEGATIVE_QUANTITY,
    ERROR_NEGATIVE_UNIT_PRICE,
)


class CartError(Exception):
    """Base error for rejected cart input."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidProductError(CartError):
    """Product reference is missing."""

    def __init__(self, message: str = ERROR_INVALID_PRODUCT) -> None:
        super().__init__(message, code="INVALID_PRODUCT")


class InvalidUnitPriceError(CartError):
    """Unit price is missing or not a finite number."""

    def __init__(self, unit_price: Any = None, message: str = ERROR_INVALID_UNIT_PRICE) -> None:
        super().__init__(message, code="INVALID_UNIT_PRICE")
        self.unit_price = unit_price


class InvalidQuantityError(CartError):
    """Quantity is not an integer."""

    def __init__(self, quantity: Any = None, message: str = ERROR_INVALID_QUANTITY) -> None:
        super().__init__(message, code="INVALID_QUANTITY")
        self.quantity = quantity


class NegativeUnitPriceError(CartError):
    """Unit price below zero."""

    def __init__(self, unit_price: Any = None, message: str = ERROR_NEGATIVE_UNIT_PRICE) -> None:
        super().__init__(message, code="NEGATIVE_UNIT_PRICE")
        self.unit_price = unit_price


class NegativeQuantityError(CartError):
    """Quantity below zero."""

    def __init__(self, quantity: Any = None, message: str = ERROR_NEGATIVE_QUANTITY) -> None:
        super().__init__(message, code="NEGATIVE_QUANTITY")
        self.quantity = quantity
