# orders/services/order_service.py

"""
ORDER SERVICE

- place_order(): validate -> allocate order number -> persist -> notify
- update_status(): admin-only, one forward step, leaves an activity entry
- reads: get_order / orders_for_email / list_orders / dashboard_stats

The Order table is only written from here.
"""

from __future__ import annotations

import logging
import secrets
from decimal import Decimal

from django.conf import settings
from django.db import transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from activity.models import ActivityLog
from activity.services import log_activity
from orders.models import Order
from orders.services.address import clean_address, clean_email
from orders.services.exceptions import (
    EmptyCartError,
    OrderIdGenerationError,
    OrderNotFoundError,
    OrderPermissionError,
)
from orders.services.lifecycle import validate_status_value, validate_transition
from orders.services.notifications import dispatch_order_confirmation
from pricing.engine import money

logger = logging.getLogger(__name__)


def _orders_setting(name: str, default):
    return getattr(settings, "ORDERS", {}).get(name, default)


# ============================================================
# ORDER NUMBERS
# ============================================================


def new_order_no() -> str:
    prefix = _orders_setting("ORDER_ID_PREFIX", "ORD")
    return f"{prefix}-{10000 + secrets.randbelow(90000)}"


def allocate_order_no() -> str:
    attempts = int(_orders_setting("ORDER_ID_MAX_ATTEMPTS", 5))
    for _ in range(max(attempts, 1)):
        candidate = new_order_no()
        if not Order.objects.filter(order_no=candidate).exists():
            return candidate
        logger.warning("Order number collision", extra={"order_no": candidate})

    raise OrderIdGenerationError(
        f"Could not allocate a unique order number after {attempts} attempts"
    )


# ============================================================
# SNAPSHOT
# ============================================================


def order_lines_from_cart(cart) -> list[dict]:
    """
    Freeze cart lines into JSON-safe order lines (money as 2dp strings).
    """
    lines = []
    for line in cart.items:
        quote = line.quote()
        medicine = line.medicine
        lines.append(
            {
                "id": medicine["id"],
                "name": medicine.get("name", ""),
                "brand_example": medicine.get("brand_example", ""),
                "generic_price": str(medicine.get("generic_price")),
                "branded_price": str(medicine.get("branded_price")),
                "strip_size": int(medicine.get("strip_size") or 1),
                "image_url": medicine.get("image_url", ""),
                "quantity": int(line.quantity),
                "base_total": str(money(quote.base_total)),
                "discount_percent": quote.discount_percent,
                "discount_amount": str(money(quote.discount_amount)),
                "final_total": str(money(quote.final_total)),
            }
        )
    return lines


def bill_to_dict(summary) -> dict:
    return {
        "subtotal": str(summary.subtotal),
        "discount": str(summary.discount),
        "gst": str(summary.gst),
        "delivery_fee": str(summary.delivery_fee),
        "platform_fee": str(summary.platform_fee),
        "total": str(summary.total),
    }


# ============================================================
# CREATE
# ============================================================


def place_order(
    *,
    items: list[dict],
    total_amount,
    address: dict,
    customer_email: str,
    bill: dict | None = None,
) -> Order:
    if not items:
        raise EmptyCartError("Cannot place an order with an empty cart")

    clean_addr = clean_address(address)
    email = clean_email(customer_email)

    with transaction.atomic():
        order = Order.objects.create(
            order_no=allocate_order_no(),
            items=list(items),
            address=clean_addr,
            bill=dict(bill or {}),
            total_amount=money(total_amount),
            customer_email=email,
            status=Order.STATUS_PLACED,
            delivery_time=_orders_setting("DELIVERY_TIME_ESTIMATE", "45 mins"),
            created_at=timezone.now(),
        )

        logger.info(
            "Order placed",
            extra={
                "order_no": order.order_no,
                "total_amount": str(order.total_amount),
                "lines": len(order.items),
            },
        )

        dispatch_order_confirmation(order)

    return order


# ============================================================
# STATUS
# ============================================================


def _is_admin(actor) -> bool:
    return bool(actor is not None and getattr(actor, "is_admin", False))


def update_status(order_no: str, new_status: str, *, actor, ip_address=None) -> Order:
    """
    Move an order one step forward. Nothing is written on failure.
    """
    if not _is_admin(actor):
        raise OrderPermissionError("Only admins can change order status")

    validate_status_value(new_status)

    with transaction.atomic():
        order = Order.objects.select_for_update().filter(order_no=order_no).first()
        if order is None:
            raise OrderNotFoundError(f"Order '{order_no}' not found")

        validate_transition(order=order, target_status=new_status)

        previous = order.status
        order.status = new_status
        order.save(update_fields=["status", "updated_at"])

        log_activity(
            category=ActivityLog.CATEGORY_ORDER_STATUS,
            message=f"Order {order.order_no} status changed to {order.get_status_display()}",
            actor_email=getattr(actor, "email", ""),
            ip_address=ip_address,
        )

    logger.info(
        "Order status updated",
        extra={"order_no": order.order_no, "from": previous, "to": new_status},
    )
    return order


# ============================================================
# READS
# ============================================================


def get_order(order_no: str) -> Order:
    order = Order.objects.filter(order_no=(order_no or "").strip()).first()
    if order is None:
        raise OrderNotFoundError(f"Order '{order_no}' not found")
    return order


def orders_for_email(email: str):
    return Order.objects.filter(customer_email=(email or "").strip().lower()).order_by(
        "-created_at", "-id"
    )


def list_orders(status: str | None = None):
    qs = Order.objects.all().order_by("-created_at", "-id")
    if status:
        qs = qs.filter(status=validate_status_value(status))
    return qs


def dashboard_stats() -> dict:
    agg = Order.objects.aggregate(
        total_orders=Count("id"),
        pending_orders=Count("id", filter=~Q(status=Order.STATUS_DELIVERED)),
        revenue=Sum("total_amount"),
    )
    return {
        "total_orders": agg["total_orders"] or 0,
        "pending_orders": agg["pending_orders"] or 0,
        "revenue": money(agg["revenue"] or Decimal("0")),
    }
