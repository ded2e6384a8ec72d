# cart/domain.py

"""
CART AGGREGATE + BOOKMARK SET (no I/O)

Cart:
- Lines keep insertion order and are unique by medicine id
- Each line holds a FROZEN snapshot of the medicine taken at add-time;
  later catalog price changes do not reach existing lines
- Quantities are in units (tablets), never strips
- Totals are derived on every read through pricing.engine

Mutators return True when the aggregate actually changed so the service
layer can persist exactly once per effective mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from pricing.engine import ZERO, PriceQuote, price_quote

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = (
    "id",
    "name",
    "brand_example",
    "generic_price",
    "branded_price",
    "strip_size",
    "image_url",
)


def freeze_snapshot(medicine) -> dict:
    if hasattr(medicine, "snapshot"):
        return medicine.snapshot()
    return {name: medicine.get(name) for name in SNAPSHOT_FIELDS}


# ============================================================
# CART
# ============================================================


@dataclass
class CartLineItem:
    medicine: dict
    quantity: int

    @property
    def id(self) -> str:
        return self.medicine["id"]

    @property
    def strip_size(self) -> int:
        return int(self.medicine.get("strip_size") or 1)

    def quote(self) -> PriceQuote:
        return price_quote(self.medicine, self.quantity)

    def savings(self) -> Decimal:
        """Branded cost of the same units minus what the shopper pays."""
        branded_unit = Decimal(str(self.medicine.get("branded_price") or 0)) / Decimal(
            self.strip_size
        )
        diff = branded_unit * self.quantity - self.quote().final_total
        return max(diff, ZERO)

    def to_dict(self) -> dict:
        return {"medicine": dict(self.medicine), "quantity": int(self.quantity)}

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        medicine = dict(data["medicine"])
        if not medicine.get("id"):
            raise ValueError("cart line without medicine id")
        quantity = int(data["quantity"])
        if quantity < 1:
            raise ValueError("cart line quantity must be >= 1")
        return cls(medicine=medicine, quantity=quantity)


@dataclass
class Cart:
    items: list[CartLineItem] = field(default_factory=list)

    # ---------------- lookups ----------------
    def get(self, medicine_id: str) -> CartLineItem | None:
        for line in self.items:
            if line.id == medicine_id:
                return line
        return None

    def __contains__(self, medicine_id) -> bool:
        return self.get(medicine_id) is not None

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # ---------------- mutations ----------------
    def add(self, medicine, quantity: int | None = None) -> bool:
        snapshot = freeze_snapshot(medicine)
        qty = int(snapshot["strip_size"]) if quantity is None else int(quantity)
        if qty < 1:
            raise ValueError("quantity must be >= 1")

        existing = self.get(snapshot["id"])
        if existing is not None:
            # snapshot retained; only the quantity grows
            existing.quantity += qty
        else:
            self.items.append(CartLineItem(medicine=snapshot, quantity=qty))
        return True

    def remove(self, medicine_id: str) -> bool:
        before = len(self.items)
        self.items = [line for line in self.items if line.id != medicine_id]
        return len(self.items) != before

    def update_quantity(self, medicine_id: str, quantity: int) -> bool:
        if int(quantity) < 1:
            return False
        line = self.get(medicine_id)
        if line is None or line.quantity == int(quantity):
            return False
        line.quantity = int(quantity)
        return True

    def clear(self) -> bool:
        if not self.items:
            return False
        self.items = []
        return True

    # ---------------- derived ----------------
    @property
    def cart_total(self) -> Decimal:
        return sum((line.quote().final_total for line in self.items), ZERO)

    @property
    def total_discount(self) -> Decimal:
        return sum((line.quote().discount_amount for line in self.items), ZERO)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)

    @property
    def total_savings(self) -> Decimal:
        return sum((line.savings() for line in self.items), ZERO)

    # ---------------- persistence shape ----------------
    def to_payload(self) -> list[dict]:
        return [line.to_dict() for line in self.items]

    @classmethod
    def from_payload(cls, payload) -> "Cart":
        cart = cls()
        for row in payload or []:
            try:
                line = CartLineItem.from_dict(row)
            except (KeyError, TypeError, ValueError):
                logger.warning("Dropping unreadable cart line", extra={"row": row})
                continue
            if line.id in cart:
                cart.get(line.id).quantity += line.quantity
            else:
                cart.items.append(line)
        return cart


# ============================================================
# BOOKMARKS
# ============================================================


@dataclass
class BookmarkSet:
    ids: list[str] = field(default_factory=list)

    def contains(self, medicine_id: str) -> bool:
        return medicine_id in self.ids

    def add(self, medicine_id: str) -> bool:
        if self.contains(medicine_id):
            return False
        self.ids.append(medicine_id)
        return True

    def remove(self, medicine_id: str) -> bool:
        if not self.contains(medicine_id):
            return False
        self.ids.remove(medicine_id)
        return True

    def list(self) -> list[str]:
        return list(self.ids)

    def to_payload(self) -> list[str]:
        return self.list()

    @classmethod
    def from_payload(cls, payload) -> "BookmarkSet":
        bookmarks = cls()
        for value in payload or []:
            if isinstance(value, str) and value:
                bookmarks.add(value)
        return bookmarks
