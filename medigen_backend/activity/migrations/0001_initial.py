"""
PATH: activity/migrations/0001_initial.py

MIGRATION: CREATE ActivityLog (append-only admin notifications)
"""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ActivityLog",
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
                    "category",
                    models.CharField(
                        choices=[
                            ("registration", "Registration"),
                            ("login", "Login"),
                            ("order_status", "Order Status"),
                            ("medicine_update", "Medicine Update"),
                            ("medicine_delete", "Medicine Delete"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                ("message", models.TextField()),
                ("actor_email", models.EmailField(blank=True, default="", max_length=254)),
                ("ip_address", models.GenericIPAddressField(blank=True, null=True)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
