# cart/services/exceptions.py


class CartError(Exception):
    """Base class for cart/bookmark domain errors."""


class InvalidQuantityError(CartError):
    pass
