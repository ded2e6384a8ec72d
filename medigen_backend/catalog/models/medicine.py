# catalog/models/medicine.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


def new_medicine_id() -> str:
    return f"med_{uuid.uuid4().hex[:10]}"


class MedicineCategory(models.TextChoices):
    FEVER = "Fever", "Fever"
    COLD_FLU = "Cold & Flu", "Cold & Flu"
    PAIN = "Pain Relief", "Pain Relief"
    ACIDITY = "Acidity & Gas", "Acidity & Gas"
    ALLERGY = "Allergy", "Allergy"
    ANTIBIOTIC = "Antibiotic", "Antibiotic"
    DIABETES = "Diabetes", "Diabetes"
    HEART = "Heart Health", "Heart Health"
    SUPPLEMENTS = "Vitamins & Supplements", "Vitamins & Supplements"
    SKIN = "Skin Care", "Skin Care"
    NEURO = "Neurology & Mental Health", "Neurology & Mental Health"
    THYROID = "Thyroid", "Thyroid"
    WOMEN = "Women's Health", "Women's Health"


class Medicine(models.Model):
    """
    Catalog record: one generic medicine and its branded counterpart.

    PRICING MODEL (IMPORTANT):
    - generic_price / branded_price are per STRIP
    - strip_size = tablets (units) per strip
    - Carts and quotes work in UNITS; price per unit = generic_price / strip_size

    branded_price >= generic_price is expected but NOT enforced here.
    """

    id = models.CharField(
        primary_key=True,
        max_length=64,
        default=new_medicine_id,
        help_text="Stable catalog id (used as cart / bookmark key)",
    )

    name = models.CharField(max_length=255, db_index=True)
    brand_example = models.CharField(max_length=255, blank=True, default="")
    salt_composition = models.CharField(max_length=255, blank=True, default="")
    batch_number = models.CharField(max_length=64, blank=True, default="")

    category = models.CharField(
        max_length=64,
        choices=MedicineCategory.choices,
        db_index=True,
    )

    common_use = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True, default="")

    generic_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Generic price per strip",
    )
    branded_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Branded price per strip",
    )

    strip_size = models.PositiveIntegerField(
        default=10,
        validators=[MinValueValidator(1)],
        help_text="Units (tablets/capsules) per strip",
    )

    stock = models.PositiveIntegerField(default=0)
    expiry_date = models.DateField()

    image_url = models.URLField(max_length=500, blank=True, default="")

    # {"normal": "...", "max_safe": "...", "overdose_warning": "..."}
    dosage = models.JSONField(default=dict, blank=True)

    # {"mechanism": "...", "side_effects": [...], "contraindications": [...], "storage": "..."}
    details = models.JSONField(default=dict, blank=True)

    # [{"shop_name": "...", "price": 42.0, "type": "Generic" | "Branded"}]
    market_rates = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category", "name"], name="catalog_med_category_name_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.id})"

    def clean(self):
        if self.strip_size is None or int(self.strip_size) < 1:
            raise ValidationError("strip_size must be >= 1")

        if self.generic_price is None or Decimal(self.generic_price) < 0:
            raise ValidationError("generic_price must be non-negative")

        if self.branded_price is None or Decimal(self.branded_price) < 0:
            raise ValidationError("branded_price must be non-negative")

    def snapshot(self) -> dict:
        """
        Frozen copy used by cart lines. Prices are captured at add-time and
        are NOT refreshed when the catalog changes later.
        """
        return {
            "id": self.id,
            "name": self.name,
            "brand_example": self.brand_example,
            "generic_price": str(self.generic_price),
            "branded_price": str(self.branded_price),
            "strip_size": int(self.strip_size),
            "image_url": self.image_url,
        }
