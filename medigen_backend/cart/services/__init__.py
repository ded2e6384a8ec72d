"""
PATH: cart/services/__init__.py

Cart services export surface.
"""

from .bookmarks import BookmarkService
from .cart import CartService
from .exceptions import CartError, InvalidQuantityError

__all__ = [
    "BookmarkService",
    "CartError",
    "CartService",
    "InvalidQuantityError",
]
