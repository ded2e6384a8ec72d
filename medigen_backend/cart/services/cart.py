# cart/services/cart.py

"""
CART SERVICE

Binds one Cart aggregate to one Identity and a KeyValueStore.

Rules:
- The cart is loaded once, on construction
- Every EFFECTIVE mutation is followed by exactly one store.set()
- No-op mutations (unknown id, quantity < 1, clearing an empty cart)
  never touch the store
- Store failures propagate as PersistenceError
"""

from __future__ import annotations

import logging

from cart.domain import Cart
from cart.services.exceptions import InvalidQuantityError
from catalog.services import get_medicine
from storage.gateway import KeyValueStore, cart_key, get_default_store

logger = logging.getLogger(__name__)


class CartService:
    def __init__(self, identity, store: KeyValueStore | None = None):
        self.identity = identity
        self.store = store or get_default_store()
        self.key = cart_key(identity)
        self.cart = Cart.from_payload(self.store.get(self.key))

    def _persist(self) -> None:
        self.store.set(self.key, self.cart.to_payload())

    # ---------------- mutations ----------------
    def add_to_cart(self, medicine, quantity: int | None = None) -> Cart:
        """
        `medicine` is a Medicine (or snapshot dict) or a catalog id.
        Default quantity is one strip.
        """
        if isinstance(medicine, str):
            medicine = get_medicine(medicine)

        try:
            self.cart.add(medicine, quantity)
        except ValueError as exc:
            raise InvalidQuantityError(str(exc)) from exc

        self._persist()
        logger.info(
            "Cart line added",
            extra={"identity": self.identity.key, "quantity": quantity},
        )
        return self.cart

    def remove_from_cart(self, medicine_id: str) -> Cart:
        if self.cart.remove(medicine_id):
            self._persist()
        return self.cart

    def update_quantity(self, medicine_id: str, quantity: int) -> Cart:
        if self.cart.update_quantity(medicine_id, quantity):
            self._persist()
        return self.cart

    def clear_cart(self) -> Cart:
        if self.cart.clear():
            self._persist()
            logger.info("Cart cleared", extra={"identity": self.identity.key})
        return self.cart
