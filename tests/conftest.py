"""Pytest configuration and fixtures"""
from decimal import Decimal

import pytest

from shopcart.cart import Cart, CartRegistry, Product


@pytest.fixture
def notebook():
    """Sample product"""
    return Product(code=1, description="Notebook")


@pytest.fixture
def mouse():
    """Sample product"""
    return Product(code=2, description="Mouse")


@pytest.fixture
def keyboard():
    """Sample product"""
    return Product(code=3, description="Keyboard")


@pytest.fixture
def empty_cart():
    """Empty cart owned by a test customer"""
    return Cart(customer_id="customer-1")


@pytest.fixture
def filled_cart(empty_cart, notebook, mouse, keyboard):
    """Cart with three lines: 2 x 10.00, 1 x 5.50, 3 x 1.25"""
    empty_cart.add_item(notebook, Decimal("10.00"), 2)
    empty_cart.add_item(mouse, Decimal("5.50"), 1)
    empty_cart.add_item(keyboard, Decimal("1.25"), 3)
    return empty_cart


@pytest.fixture
def registry():
    """Empty cart registry"""
    return CartRegistry()
