# orders/services/exceptions.py

"""
ORDER DOMAIN ERRORS

Views map these to HTTP:
- EmptyCartError / InvalidOrderDataError / InvalidOrderStatusError -> 400
- OrderPermissionError -> 403
- OrderNotFoundError -> 404
- InvalidOrderTransitionError -> 409
- OrderIdGenerationError -> 503
"""


class OrderError(Exception):
    pass


class EmptyCartError(OrderError):
    pass


class InvalidOrderDataError(OrderError):
    def __init__(self, message: str, errors: dict | None = None):
        super().__init__(message)
        self.errors = errors or {}


class OrderIdGenerationError(OrderError):
    pass


class OrderNotFoundError(OrderError):
    pass


class OrderPermissionError(OrderError):
    pass


class InvalidOrderStatusError(OrderError):
    pass


class InvalidOrderTransitionError(OrderError):
    pass
