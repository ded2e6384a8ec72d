"""
PATH: orders/models/__init__.py
"""

from .order import ImmutableOrderError, Order

__all__ = [
    "ImmutableOrderError",
    "Order",
]
