"""
PATH: orders/services/__init__.py

Orders services export surface.
"""

from .checkout import checkout_cart
from .exceptions import (
    EmptyCartError,
    InvalidOrderDataError,
    InvalidOrderStatusError,
    InvalidOrderTransitionError,
    OrderError,
    OrderIdGenerationError,
    OrderNotFoundError,
    OrderPermissionError,
)
from .notifications import dispatch_order_confirmation, notify_order_confirmed
from .order_service import (
    dashboard_stats,
    get_order,
    list_orders,
    orders_for_email,
    place_order,
    update_status,
)
from .tracking import display_progress_hint

__all__ = [
    "EmptyCartError",
    "InvalidOrderDataError",
    "InvalidOrderStatusError",
    "InvalidOrderTransitionError",
    "OrderError",
    "OrderIdGenerationError",
    "OrderNotFoundError",
    "OrderPermissionError",
    "checkout_cart",
    "dashboard_stats",
    "dispatch_order_confirmation",
    "display_progress_hint",
    "get_order",
    "list_orders",
    "notify_order_confirmed",
    "orders_for_email",
    "place_order",
    "update_status",
]
