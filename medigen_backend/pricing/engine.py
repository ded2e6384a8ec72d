# pricing/engine.py
"""
PRICING ENGINE (PURE DOMAIN LOGIC)

This module is the ONLY place that knows the bulk-discount tiers.
The live product quote, cart line display, cart bill summary and checkout
all call price_quote() / bill_summary() / checkout_bill(); none of them
re-implement thresholds.

DESIGN PRINCIPLES:
- No database access
- No side effects
- Deterministic for the same inputs (Decimal arithmetic)

Units:
- generic_price is per STRIP
- quantity is in UNITS (tablets / capsules), not strips
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Sequence

from django.conf import settings

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWOPLACES = Decimal("0.01")

DEFAULT_BULK_DISCOUNT_TIERS: tuple[tuple[int, int], ...] = ((100, 10), (50, 5))

DEFAULT_BILL_CONSTANTS = {
    "GST_RATE": "0.12",
    "PLATFORM_FEE": "10.00",
    "FREE_DELIVERY_THRESHOLD": "200.00",
    "DELIVERY_FEE": "40.00",
    "DELIVERY_DISTANCE_BANDS": [(1, "15.00"), (2, "20.00"), (5, "40.00")],
    "DELIVERY_FAR_FEE": "60.00",
}


# ============================================================
# VALUE OBJECTS
# ============================================================


@dataclass(frozen=True)
class PriceQuote:
    base_total: Decimal
    discount_percent: int
    discount_amount: Decimal
    final_total: Decimal

    @classmethod
    def zero(cls) -> "PriceQuote":
        return cls(
            base_total=ZERO,
            discount_percent=0,
            discount_amount=ZERO,
            final_total=ZERO,
        )


@dataclass(frozen=True)
class BillSummary:
    subtotal: Decimal
    discount: Decimal
    gst: Decimal
    delivery_fee: Decimal
    platform_fee: Decimal
    total: Decimal


# ============================================================
# HELPERS
# ============================================================


def _decimal(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Invalid money value: {value!r}") from exc


def money(value) -> Decimal:
    """Quantize to 2dp for presentation / persistence."""
    return _decimal(value).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _pricing_settings() -> dict:
    if not settings.configured:
        return {}
    return getattr(settings, "PRICING", {}) or {}


def _bill_constant(name: str):
    return _pricing_settings().get(name, DEFAULT_BILL_CONSTANTS[name])


def configured_tiers() -> tuple[tuple[int, int], ...]:
    tiers = _pricing_settings().get("BULK_DISCOUNT_TIERS") or DEFAULT_BULK_DISCOUNT_TIERS
    return tuple((int(t), int(p)) for t, p in tiers)


def _field(snapshot, name: str):
    if isinstance(snapshot, dict):
        return snapshot.get(name)
    return getattr(snapshot, name, None)


# ============================================================
# QUOTES
# ============================================================


def bulk_discount_percent(
    quantity: int, tiers: Iterable[tuple[int, int]] | None = None
) -> int:
    """
    Highest threshold wins; tiers are never cumulative.
    """
    qty = int(quantity or 0)
    if qty <= 0:
        return 0

    ordered = sorted(tiers or configured_tiers(), key=lambda t: t[0], reverse=True)
    for threshold, percent in ordered:
        if qty >= threshold:
            return percent
    return 0


def price_per_unit(snapshot) -> Decimal:
    strip_size = int(_field(snapshot, "strip_size") or 0)
    if strip_size < 1:
        raise ValueError("strip_size must be >= 1")
    return _decimal(_field(snapshot, "generic_price")) / Decimal(strip_size)


def price_quote(
    snapshot,
    quantity: int,
    tiers: Sequence[tuple[int, int]] | None = None,
) -> PriceQuote:
    """
    Quote `quantity` units of a medicine.

    `snapshot` is anything exposing generic_price + strip_size
    (Medicine model, cart line snapshot dict, ...).
    quantity <= 0 yields an all-zero quote.
    """
    qty = int(quantity or 0)
    if qty <= 0:
        return PriceQuote.zero()

    strip_size = int(_field(snapshot, "strip_size") or 0)
    if strip_size < 1:
        raise ValueError("strip_size must be >= 1")

    # multiply before dividing so whole-strip prices stay exact
    base_total = _decimal(_field(snapshot, "generic_price")) * qty / Decimal(strip_size)

    percent = bulk_discount_percent(qty, tiers)
    discount_amount = base_total * Decimal(percent) / HUNDRED

    return PriceQuote(
        base_total=base_total,
        discount_percent=percent,
        discount_amount=discount_amount,
        final_total=base_total - discount_amount,
    )


# ============================================================
# BILL (cart summary + checkout total)
# ============================================================


def delivery_fee(subtotal, distance_km=None) -> Decimal:
    """
    Free above the threshold. Otherwise distance bands apply when the
    distance is known, else the flat delivery fee.
    """
    if _decimal(subtotal) > _decimal(_bill_constant("FREE_DELIVERY_THRESHOLD")):
        return ZERO

    if distance_km is None or distance_km == "":
        return money(_bill_constant("DELIVERY_FEE"))

    distance = _decimal(distance_km)
    for max_km, fee in _bill_constant("DELIVERY_DISTANCE_BANDS"):
        if distance <= _decimal(max_km):
            return money(fee)
    return money(_bill_constant("DELIVERY_FAR_FEE"))


def bill_summary(
    cart_total, total_discount=ZERO, distance_km=None, *, include_gst: bool = True
) -> BillSummary:
    """
    cart_total is already post-bulk-discount (sum of final_total).
    Delivery + platform fee are added on top. GST is only part of the cart
    page preview; the amount charged at checkout is checkout_bill().
    """
    subtotal = _decimal(cart_total)
    if subtotal <= ZERO:
        return BillSummary(
            subtotal=ZERO,
            discount=ZERO,
            gst=ZERO,
            delivery_fee=ZERO,
            platform_fee=ZERO,
            total=ZERO,
        )

    gst = money(subtotal * _decimal(_bill_constant("GST_RATE"))) if include_gst else money(ZERO)
    fee = delivery_fee(subtotal, distance_km)
    platform = money(_bill_constant("PLATFORM_FEE"))

    return BillSummary(
        subtotal=money(subtotal),
        discount=money(total_discount),
        gst=gst,
        delivery_fee=fee,
        platform_fee=platform,
        total=money(subtotal) + gst + fee + platform,
    )


def checkout_bill(cart_total, total_discount=ZERO, distance_km=None) -> BillSummary:
    """
    Amount persisted on the order: cart total + delivery + platform fee.
    """
    return bill_summary(cart_total, total_discount, distance_km, include_gst=False)
