"""
PATH: orders/migrations/0001_initial.py

MIGRATION: CREATE Order
"""

from decimal import Decimal

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "order_no",
                    models.CharField(
                        help_text="Public order number, e.g. ORD-48213",
                        max_length=32,
                        unique=True,
                    ),
                ),
                ("items", models.JSONField(default=list)),
                ("address", models.JSONField(default=dict)),
                ("bill", models.JSONField(blank=True, default=dict)),
                (
                    "total_amount",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=12
                    ),
                ),
                ("customer_email", models.EmailField(db_index=True, max_length=254)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("placed", "Placed"),
                            ("packed", "Packed"),
                            ("out_for_delivery", "Out for delivery"),
                            ("delivered", "Delivered"),
                        ],
                        default="placed",
                        max_length=32,
                    ),
                ),
                ("delivery_time", models.CharField(blank=True, default="", max_length=32)),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, editable=False),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["status"], name="orders_status_idx"),
                    models.Index(
                        fields=["customer_email", "created_at"],
                        name="orders_email_created_idx",
                    ),
                ],
            },
        ),
    ]
