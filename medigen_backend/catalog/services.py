# catalog/services.py

"""
CATALOG SERVICES

- Admin create/update/delete (each write leaves an activity entry)
- Derived display values: savings vs branded price, expiry status

Savings are clamped at zero: a generic priced above its branded
counterpart shows "no savings" rather than a negative amount.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from activity.models import ActivityLog
from activity.services import log_activity
from catalog.models import Medicine

logger = logging.getLogger(__name__)

EXPIRY_EXPIRED = "expired"
EXPIRY_SOON = "expiring_soon"
EXPIRY_VALID = "valid"

EXPIRING_SOON_DAYS = 30


class MedicineNotFoundError(Exception):
    pass


def get_medicine(medicine_id: str, *, active_only: bool = True) -> Medicine:
    qs = Medicine.objects.all()
    if active_only:
        qs = qs.filter(is_active=True)
    try:
        return qs.get(id=medicine_id)
    except Medicine.DoesNotExist as exc:
        raise MedicineNotFoundError(f"Medicine '{medicine_id}' not found") from exc


def list_medicines(
    *, category: str | None = None, search: str | None = None, include_inactive: bool = False
):
    """
    Storefront listing. Only active medicines unless include_inactive is set
    (admin back-office).
    """
    qs = Medicine.objects.all()
    if not include_inactive:
        qs = qs.filter(is_active=True)
    if category:
        qs = qs.filter(category=category)
    term = (search or "").strip()
    if term:
        qs = qs.filter(
            Q(name__icontains=term)
            | Q(salt_composition__icontains=term)
            | Q(brand_example__icontains=term)
        )
    return qs.order_by("name")


def savings(medicine) -> Decimal:
    diff = Decimal(str(medicine.branded_price)) - Decimal(str(medicine.generic_price))
    return max(diff, Decimal("0.00"))


def savings_percent(medicine) -> int:
    branded = Decimal(str(medicine.branded_price))
    if branded <= 0:
        return 0
    pct = savings(medicine) * Decimal("100") / branded
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def expiry_status(medicine, today: date | None = None) -> str:
    today = today or timezone.localdate()
    days_left = (medicine.expiry_date - today).days
    if days_left < 0:
        return EXPIRY_EXPIRED
    if days_left < EXPIRING_SOON_DAYS:
        return EXPIRY_SOON
    return EXPIRY_VALID


@transaction.atomic
def record_saved(medicine: Medicine, *, created: bool, actor_email: str = "") -> None:
    verb = "Added" if created else "Updated"
    log_activity(
        category=ActivityLog.CATEGORY_MEDICINE_UPDATE,
        message=f"{verb} medicine: {medicine.name}",
        actor_email=actor_email,
    )
    logger.info(
        "Medicine saved",
        extra={"medicine_id": medicine.id, "was_created": created},
    )


@transaction.atomic
def delete_medicine(medicine_id: str, *, actor_email: str = "") -> None:
    medicine = get_medicine(medicine_id, active_only=False)
    name = medicine.name
    medicine.delete()

    log_activity(
        category=ActivityLog.CATEGORY_MEDICINE_DELETE,
        message=f"Deleted medicine: {name}",
        actor_email=actor_email,
    )
    logger.info("Medicine deleted", extra={"medicine_id": medicine_id})
