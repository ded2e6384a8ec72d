# activity/models.py

from django.db import models


class ActivityLog(models.Model):
    """
    Append-only record of administratively relevant events.

    Rules:
    - Rows are written once and never edited,
      except for the is_read flag toggled from the admin panel.
    - Read by admins only.
    """

    CATEGORY_REGISTRATION = "registration"
    CATEGORY_LOGIN = "login"
    CATEGORY_ORDER_STATUS = "order_status"
    CATEGORY_MEDICINE_UPDATE = "medicine_update"
    CATEGORY_MEDICINE_DELETE = "medicine_delete"

    CATEGORY_CHOICES = [
        (CATEGORY_REGISTRATION, "Registration"),
        (CATEGORY_LOGIN, "Login"),
        (CATEGORY_ORDER_STATUS, "Order Status"),
        (CATEGORY_MEDICINE_UPDATE, "Medicine Update"),
        (CATEGORY_MEDICINE_DELETE, "Medicine Delete"),
    ]

    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, db_index=True)
    message = models.TextField()

    actor_email = models.EmailField(blank=True, default="")
    ip_address = models.GenericIPAddressField(null=True, blank=True)

    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        if self.pk and set(kwargs.get("update_fields") or ()) != {"is_read"}:
            raise ValueError("Activity log entries are append-only")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"[{self.category}] {self.message}"
