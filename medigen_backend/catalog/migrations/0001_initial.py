"""
PATH: catalog/migrations/0001_initial.py

MIGRATION: CREATE Medicine
"""

from decimal import Decimal

import django.core.validators
from django.db import migrations, models

import catalog.models.medicine


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Medicine",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=catalog.models.medicine.new_medicine_id,
                        help_text="Stable catalog id (used as cart / bookmark key)",
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("brand_example", models.CharField(blank=True, default="", max_length=255)),
                ("salt_composition", models.CharField(blank=True, default="", max_length=255)),
                ("batch_number", models.CharField(blank=True, default="", max_length=64)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Fever", "Fever"),
                            ("Cold & Flu", "Cold & Flu"),
                            ("Pain Relief", "Pain Relief"),
                            ("Acidity & Gas", "Acidity & Gas"),
                            ("Allergy", "Allergy"),
                            ("Antibiotic", "Antibiotic"),
                            ("Diabetes", "Diabetes"),
                            ("Heart Health", "Heart Health"),
                            ("Vitamins & Supplements", "Vitamins & Supplements"),
                            ("Skin Care", "Skin Care"),
                            ("Neurology & Mental Health", "Neurology & Mental Health"),
                            ("Thyroid", "Thyroid"),
                            ("Women's Health", "Women's Health"),
                        ],
                        db_index=True,
                        max_length=64,
                    ),
                ),
                ("common_use", models.JSONField(blank=True, default=list)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "generic_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Generic price per strip",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "branded_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Branded price per strip",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "strip_size",
                    models.PositiveIntegerField(
                        default=10,
                        help_text="Units (tablets/capsules) per strip",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("stock", models.PositiveIntegerField(default=0)),
                ("expiry_date", models.DateField()),
                ("image_url", models.URLField(blank=True, default="", max_length=500)),
                ("dosage", models.JSONField(blank=True, default=dict)),
                ("details", models.JSONField(blank=True, default=dict)),
                ("market_rates", models.JSONField(blank=True, default=list)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["category", "name"], name="catalog_med_category_name_idx"),
                ],
            },
        ),
    ]
