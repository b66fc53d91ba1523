"""
Common Error Constants

Centralized error messages shared by the cart exceptions and their tests.
"""

# Product errors
ERROR_INVALID_PRODUCT = "Product must not be None"

# Price errors
ERROR_INVALID_UNIT_PRICE = "Unit price must be a finite number"
ERROR_NEGATIVE_UNIT_PRICE = "Unit price must be greater than or equal to zero"

# Quantity errors
ERROR_INVALID_QUANTITY = "Quantity must be an integer"
ERROR_NEGATIVE_QUANTITY = "Quantity must be greater than or equal to zero"
