# orders/tests/test_orders.py

from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.core import mail
from django.test import TestCase

from activity.models import ActivityLog
from orders.models import ImmutableOrderError, Order
from orders.services import (
    EmptyCartError,
    InvalidOrderDataError,
    InvalidOrderTransitionError,
    OrderIdGenerationError,
    OrderNotFoundError,
    OrderPermissionError,
    dashboard_stats,
    display_progress_hint,
    get_order,
    orders_for_email,
    update_status,
)
from orders.tests.helpers import ADDRESS, make_order
from users.identity import Identity
from users.models import ROLE_ADMIN

ADMIN = Identity(id="admin-1", email="admin@medigen.com", role=ROLE_ADMIN)
SHOPPER = Identity(id="user-1", email="asha@example.com")


class PlaceOrderTests(TestCase):
    def test_new_order_is_placed(self):
        order = make_order()

        self.assertEqual(order.status, Order.STATUS_PLACED)
        self.assertRegex(order.order_no, r"^ORD-\d{5}$")
        self.assertEqual(order.delivery_time, "45 mins")
        self.assertEqual(order.total_amount, Decimal("192.50"))
        self.assertEqual(order.address["pincode"], "560001")

    def test_order_numbers_are_unique(self):
        numbers = {make_order().order_no for _ in range(20)}
        self.assertEqual(len(numbers), 20)

    def test_collision_is_retried(self):
        existing = make_order()
        with mock.patch(
            "orders.services.order_service.new_order_no",
            side_effect=[existing.order_no, "ORD-55555"],
        ):
            order = make_order()

        self.assertEqual(order.order_no, "ORD-55555")

    def test_collisions_exhausted(self):
        existing = make_order()
        with mock.patch(
            "orders.services.order_service.new_order_no",
            return_value=existing.order_no,
        ):
            with self.assertRaises(OrderIdGenerationError):
                make_order()

        self.assertEqual(Order.objects.count(), 1)

    def test_empty_cart_rejected(self):
        with self.assertRaises(EmptyCartError):
            make_order(items=[])
        self.assertFalse(Order.objects.exists())

    def test_invalid_address_rejected_before_persisting(self):
        with self.assertRaises(InvalidOrderDataError) as ctx:
            make_order(address=dict(ADDRESS, pincode="12", phone="123"))

        self.assertIn("pincode", ctx.exception.errors)
        self.assertIn("phone", ctx.exception.errors)
        self.assertFalse(Order.objects.exists())

    def test_invalid_email_rejected(self):
        with self.assertRaises(InvalidOrderDataError):
            make_order(customer_email="not-an-email")

    def test_confirmation_email_sent(self):
        order = make_order()

        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ["asha@example.com"])
        self.assertIn(order.order_no, message.subject)
        self.assertIn("Paracetamol 500mg", message.alternatives[0][0])

    def test_notification_failure_does_not_fail_order(self):
        with mock.patch(
            "orders.services.notifications.send_mail",
            side_effect=ConnectionError("smtp down"),
        ):
            order = make_order()

        self.assertTrue(Order.objects.filter(pk=order.pk).exists())
        self.assertEqual(len(mail.outbox), 0)

    def test_snapshot_fields_are_immutable(self):
        order = make_order()

        order.total_amount = Decimal("1.00")
        with self.assertRaises(ImmutableOrderError):
            order.save()

        order.refresh_from_db()
        order.address = dict(order.address, city="Pune")
        with self.assertRaises(ImmutableOrderError):
            order.save()


class UpdateStatusTests(TestCase):
    def setUp(self):
        self.order = make_order()

    def test_forward_walk_to_delivered(self):
        for target in (
            Order.STATUS_PACKED,
            Order.STATUS_OUT_FOR_DELIVERY,
            Order.STATUS_DELIVERED,
        ):
            update_status(self.order.order_no, target, actor=ADMIN)

        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.STATUS_DELIVERED)
        self.assertEqual(
            ActivityLog.objects.filter(category=ActivityLog.CATEGORY_ORDER_STATUS).count(), 3
        )

    def test_unknown_order_leaves_table_unchanged(self):
        before = list(Order.objects.values_list("order_no", "status"))

        with self.assertRaises(OrderNotFoundError):
            update_status("ORD-00000", Order.STATUS_PACKED, actor=ADMIN)

        self.assertEqual(list(Order.objects.values_list("order_no", "status")), before)
        self.assertFalse(ActivityLog.objects.exists())

    def test_skip_rejected(self):
        with self.assertRaises(InvalidOrderTransitionError):
            update_status(self.order.order_no, Order.STATUS_DELIVERED, actor=ADMIN)

        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.STATUS_PLACED)

    def test_terminal_rejected(self):
        for target in (
            Order.STATUS_PACKED,
            Order.STATUS_OUT_FOR_DELIVERY,
            Order.STATUS_DELIVERED,
        ):
            update_status(self.order.order_no, target, actor=ADMIN)

        with self.assertRaises(InvalidOrderTransitionError):
            update_status(self.order.order_no, Order.STATUS_PACKED, actor=ADMIN)

    def test_shopper_cannot_update(self):
        with self.assertRaises(OrderPermissionError):
            update_status(self.order.order_no, Order.STATUS_PACKED, actor=SHOPPER)


class OrderReadTests(TestCase):
    def test_get_order(self):
        order = make_order()
        self.assertEqual(get_order(order.order_no).pk, order.pk)

        with self.assertRaises(OrderNotFoundError):
            get_order("ORD-00000")

    def test_orders_for_email_newest_first(self):
        first = make_order()
        second = make_order()
        make_order(customer_email="someone@example.com")

        numbers = [o.order_no for o in orders_for_email("ASHA@example.com")]
        self.assertEqual(numbers, [second.order_no, first.order_no])

    def test_dashboard_stats(self):
        make_order()
        delivered = make_order(total_amount=Decimal("100.00"))
        for target in (
            Order.STATUS_PACKED,
            Order.STATUS_OUT_FOR_DELIVERY,
            Order.STATUS_DELIVERED,
        ):
            update_status(delivered.order_no, target, actor=ADMIN)

        stats = dashboard_stats()
        self.assertEqual(stats["total_orders"], 2)
        self.assertEqual(stats["pending_orders"], 1)
        self.assertEqual(stats["revenue"], Decimal("292.50"))


class ProgressHintTests(TestCase):
    def test_hint_advances_and_caps(self):
        order = make_order()
        start = order.created_at

        self.assertEqual(display_progress_hint(order, start), 1)
        self.assertEqual(display_progress_hint(order, start + timedelta(seconds=2)), 1)
        self.assertEqual(display_progress_hint(order, start + timedelta(seconds=3)), 2)
        self.assertEqual(display_progress_hint(order, start + timedelta(hours=1)), 2)

    def test_hint_never_behind_status(self):
        order = make_order()
        update_status(order.order_no, Order.STATUS_PACKED, actor=ADMIN)
        order.refresh_from_db()

        self.assertEqual(display_progress_hint(order, order.created_at), 1)

        update_status(order.order_no, Order.STATUS_OUT_FOR_DELIVERY, actor=ADMIN)
        order.refresh_from_db()
        self.assertEqual(display_progress_hint(order, order.created_at), 2)

    def test_hint_not_persisted(self):
        order = make_order()
        display_progress_hint(order, order.created_at + timedelta(seconds=10))

        order.refresh_from_db()
        self.assertEqual(order.status, Order.STATUS_PLACED)
