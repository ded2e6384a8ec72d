# orders/models/order.py

from decimal import Decimal

from django.db import models
from django.utils import timezone


class ImmutableOrderError(ValueError):
    pass


class Order(models.Model):
    """
    Storefront order (the global order table).

    Key rules:
    - Created once at checkout with status "placed"
    - items / address / totals / customer_email / created_at never change
      after creation (enforced in save())
    - Only `status` moves, strictly forward, via orders.services.lifecycle
    """

    STATUS_PLACED = "placed"
    STATUS_PACKED = "packed"
    STATUS_OUT_FOR_DELIVERY = "out_for_delivery"
    STATUS_DELIVERED = "delivered"

    STATUS_CHOICES = [
        (STATUS_PLACED, "Placed"),
        (STATUS_PACKED, "Packed"),
        (STATUS_OUT_FOR_DELIVERY, "Out for delivery"),
        (STATUS_DELIVERED, "Delivered"),
    ]

    STATUS_SEQUENCE = [
        STATUS_PLACED,
        STATUS_PACKED,
        STATUS_OUT_FOR_DELIVERY,
        STATUS_DELIVERED,
    ]

    IMMUTABLE_FIELDS = (
        "order_no",
        "items",
        "address",
        "bill",
        "total_amount",
        "customer_email",
        "created_at",
    )

    order_no = models.CharField(
        max_length=32,
        unique=True,
        help_text="Public order number, e.g. ORD-48213",
    )

    # [{"id", "name", ..., "quantity", "final_total"}] frozen at checkout
    items = models.JSONField(default=list)

    # {"full_name", "phone", "line", "city", "pincode", "type"}
    address = models.JSONField(default=dict)

    # bill breakdown: subtotal / discount / gst / delivery_fee / platform_fee / total
    bill = models.JSONField(default=dict, blank=True)

    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    customer_email = models.EmailField(db_index=True)

    status = models.CharField(
        max_length=32, choices=STATUS_CHOICES, default=STATUS_PLACED
    )

    delivery_time = models.CharField(max_length=32, blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["customer_email", "created_at"], name="orders_email_created_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            self._assert_immutable_fields_unchanged()
        super().save(*args, **kwargs)

    def _assert_immutable_fields_unchanged(self):
        original = (
            type(self).objects.filter(pk=self.pk).values(*self.IMMUTABLE_FIELDS).first()
        )
        if original is None:
            return

        for name in self.IMMUTABLE_FIELDS:
            current = getattr(self, name)
            if name == "total_amount":
                current = Decimal(str(current))
            if original[name] != current:
                raise ImmutableOrderError(f"Order.{name} cannot change after creation")

    @property
    def item_count(self) -> int:
        return sum(int(line.get("quantity") or 0) for line in self.items or [])

    def __str__(self):
        return f"{self.order_no} | {self.total_amount} | {self.status}"
