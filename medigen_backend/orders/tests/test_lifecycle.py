# orders/tests/test_lifecycle.py

from django.test import SimpleTestCase

from orders.models import Order
from orders.services.exceptions import (
    InvalidOrderStatusError,
    InvalidOrderTransitionError,
)
from orders.services.lifecycle import (
    can_transition,
    validate_transition,
)


class OrderLifecycleRuleTests(SimpleTestCase):
    """
    GUARANTEES:
    - Forward only, one step at a time
    - delivered is terminal
    """

    def test_each_forward_step_allowed(self):
        seq = Order.STATUS_SEQUENCE
        for current, target in zip(seq, seq[1:]):
            self.assertTrue(can_transition(from_status=current, to_status=target))

    def test_skips_and_backwards_rejected(self):
        self.assertFalse(
            can_transition(from_status=Order.STATUS_PLACED, to_status=Order.STATUS_DELIVERED)
        )
        self.assertFalse(
            can_transition(from_status=Order.STATUS_PACKED, to_status=Order.STATUS_PLACED)
        )
        self.assertFalse(
            can_transition(from_status=Order.STATUS_PLACED, to_status=Order.STATUS_PLACED)
        )

    def test_delivered_is_terminal(self):
        for target in Order.STATUS_SEQUENCE:
            self.assertFalse(
                can_transition(from_status=Order.STATUS_DELIVERED, to_status=target)
            )

    def test_validate_transition_errors(self):
        order = Order(order_no="ORD-10001", status=Order.STATUS_PLACED)

        with self.assertRaises(InvalidOrderTransitionError):
            validate_transition(order=order, target_status=Order.STATUS_OUT_FOR_DELIVERY)

        with self.assertRaises(InvalidOrderStatusError):
            validate_transition(order=order, target_status="shipped")
