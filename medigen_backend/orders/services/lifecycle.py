"""
ORDER LIFECYCLE DOMAIN RULES

This module defines the ONLY allowed status transitions for Order.

    placed -> packed -> out_for_delivery -> delivered

DESIGN PRINCIPLES:
- No database writes
- No side effects
- Single source of truth
- Strictly forward, one step at a time; delivered is terminal
"""

from orders.models import Order
from orders.services.exceptions import (
    InvalidOrderStatusError,
    InvalidOrderTransitionError,
)

# ============================================================
# STATE DEFINITIONS
# ============================================================

VALID_STATUSES = set(Order.STATUS_SEQUENCE)

TERMINAL_STATES = {
    Order.STATUS_DELIVERED,
}

ALLOWED_TRANSITIONS = {
    Order.STATUS_PLACED: {Order.STATUS_PACKED},
    Order.STATUS_PACKED: {Order.STATUS_OUT_FOR_DELIVERY},
    Order.STATUS_OUT_FOR_DELIVERY: {Order.STATUS_DELIVERED},
}


# ============================================================
# DOMAIN RULES
# ============================================================


def status_index(status: str) -> int:
    return Order.STATUS_SEQUENCE.index(status)


def can_transition(*, from_status: str, to_status: str) -> bool:
    if from_status in TERMINAL_STATES:
        return False

    return to_status in ALLOWED_TRANSITIONS.get(from_status, set())


def validate_status_value(status: str) -> str:
    if status not in VALID_STATUSES:
        raise InvalidOrderStatusError(f"Unknown order status '{status}'")
    return status


def validate_transition(*, order: Order, target_status: str):
    validate_status_value(target_status)

    if not can_transition(from_status=order.status, to_status=target_status):
        raise InvalidOrderTransitionError(
            f"Order {order.order_no} cannot transition from "
            f"'{order.status}' to '{target_status}'"
        )
