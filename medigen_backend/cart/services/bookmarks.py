# cart/services/bookmarks.py

from __future__ import annotations

from cart.domain import BookmarkSet
from catalog.services import get_medicine
from storage.gateway import KeyValueStore, bookmarks_key, get_default_store


class BookmarkService:
    """Saved medicines for one identity; same persistence rules as the cart."""

    def __init__(self, identity, store: KeyValueStore | None = None):
        self.identity = identity
        self.store = store or get_default_store()
        self.key = bookmarks_key(identity)
        self.bookmarks = BookmarkSet.from_payload(self.store.get(self.key))

    def _persist(self) -> None:
        self.store.set(self.key, self.bookmarks.to_payload())

    def add(self, medicine_id: str, *, check_catalog: bool = True) -> BookmarkSet:
        if check_catalog:
            get_medicine(medicine_id)
        if self.bookmarks.add(medicine_id):
            self._persist()
        return self.bookmarks

    def remove(self, medicine_id: str) -> BookmarkSet:
        if self.bookmarks.remove(medicine_id):
            self._persist()
        return self.bookmarks

    def contains(self, medicine_id: str) -> bool:
        return self.bookmarks.contains(medicine_id)

    def list(self) -> list[str]:
        return self.bookmarks.list()
