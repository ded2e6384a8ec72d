# orders/views/errors.py

from rest_framework import status

from backend.errors import error_response
from orders.services import (
    EmptyCartError,
    InvalidOrderDataError,
    InvalidOrderStatusError,
    InvalidOrderTransitionError,
    OrderIdGenerationError,
    OrderNotFoundError,
    OrderPermissionError,
)
from storage.gateway import PersistenceError
from users.identity import IdentityError

# (exception, code, http status); first match wins
ERROR_MAP = [
    (EmptyCartError, "empty_cart", status.HTTP_400_BAD_REQUEST),
    (InvalidOrderDataError, "invalid_order", status.HTTP_400_BAD_REQUEST),
    (InvalidOrderStatusError, "invalid_status", status.HTTP_400_BAD_REQUEST),
    (IdentityError, "invalid_identity", status.HTTP_400_BAD_REQUEST),
    (OrderPermissionError, "forbidden", status.HTTP_403_FORBIDDEN),
    (OrderNotFoundError, "order_not_found", status.HTTP_404_NOT_FOUND),
    (InvalidOrderTransitionError, "invalid_transition", status.HTTP_409_CONFLICT),
    (OrderIdGenerationError, "order_id_unavailable", status.HTTP_503_SERVICE_UNAVAILABLE),
    (PersistenceError, "storage_unavailable", status.HTTP_503_SERVICE_UNAVAILABLE),
]


class OrderErrorMixin:
    def handle_exception(self, exc):
        for exc_class, code, http_status in ERROR_MAP:
            if isinstance(exc, exc_class):
                response = error_response(code=code, message=str(exc), http_status=http_status)
                errors = getattr(exc, "errors", None)
                if errors:
                    response.data["error"]["fields"] = errors
                return response
        return super().handle_exception(exc)
