# orders/services/checkout.py

"""
CHECKOUT ORCHESTRATOR

cart (per identity) -> checkout bill (no GST) -> place_order -> clear cart

The order is the source of truth once placed. If clearing the cart fails
afterwards the order still stands; the failure is logged.
"""

from __future__ import annotations

import logging

from cart.services import CartService
from orders.services.exceptions import EmptyCartError, InvalidOrderDataError
from orders.services.order_service import bill_to_dict, order_lines_from_cart, place_order
from pricing.engine import checkout_bill
from storage.gateway import PersistenceError

logger = logging.getLogger(__name__)


def checkout_cart(
    *,
    identity,
    address: dict,
    customer_email: str = "",
    distance_km=None,
    store=None,
):
    service = CartService(identity, store)
    cart = service.cart

    if cart.is_empty:
        raise EmptyCartError("Your cart is empty")

    email = (customer_email or "").strip() or getattr(identity, "email", "")
    if not email:
        raise InvalidOrderDataError(
            "Customer email is required", {"customer_email": "This field is required."}
        )

    summary = checkout_bill(cart.cart_total, cart.total_discount, distance_km)

    order = place_order(
        items=order_lines_from_cart(cart),
        total_amount=summary.total,
        address=address,
        customer_email=email,
        bill=bill_to_dict(summary),
    )

    try:
        service.clear_cart()
    except PersistenceError:
        logger.exception(
            "Cart not cleared after checkout",
            extra={"order_no": order.order_no, "identity": identity.key},
        )

    return order
