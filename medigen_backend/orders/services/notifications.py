# orders/services/notifications.py

"""
ORDER CONFIRMATION EMAIL

notify_order_confirmed(order) renders + sends the confirmation and reports
success as a bool. It never raises: a mail failure must not undo or fail
an order that is already placed.

dispatch_order_confirmation(order) is the fire-and-forget entry point:
- sync mode (tests): send inline
- otherwise: after the surrounding transaction commits, on a small
  background pool
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="order-mail")


def notify_order_confirmed(order) -> bool:
    context = {"order": order}
    try:
        send_mail(
            subject=f"Order Confirmed: {order.order_no}",
            message=render_to_string("orders/email/order_confirmed.txt", context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[order.customer_email],
            html_message=render_to_string("orders/email/order_confirmed.html", context),
        )
    except Exception:
        logger.exception(
            "Order confirmation email failed",
            extra={"order_no": order.order_no, "to": order.customer_email},
        )
        return False

    logger.info("Order confirmation sent", extra={"order_no": order.order_no})
    return True


def _notifications_sync() -> bool:
    return bool(getattr(settings, "ORDERS", {}).get("NOTIFICATIONS_SYNC", False))


def dispatch_order_confirmation(order) -> None:
    if _notifications_sync():
        notify_order_confirmed(order)
        return

    transaction.on_commit(lambda: _executor.submit(notify_order_confirmed, order))
