# storage/gateway.py

"""
PERSISTENCE GATEWAY

Durable per-identity storage for carts and bookmarks.

Contract:
- get(key) returns the stored JSON value, or None when nothing is stored
- set(key, value) replaces the whole value (last write wins)
- delete(key) removes it (idempotent)
- Failures raise PersistenceError; they are never swallowed here

Key format helpers live here so every caller builds keys the same way.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from django.db import DatabaseError, transaction

from storage.models import KeyValueEntry

logger = logging.getLogger(__name__)

CART_NAMESPACE = "cart"
BOOKMARKS_NAMESPACE = "bookmarks"


class PersistenceError(Exception):
    pass


def scoped_key(namespace: str, identity) -> str:
    return f"{namespace}:{identity.key}"


def cart_key(identity) -> str:
    return scoped_key(CART_NAMESPACE, identity)


def bookmarks_key(identity) -> str:
    return scoped_key(BOOKMARKS_NAMESPACE, identity)


# ============================================================
# INTERFACE
# ============================================================


class KeyValueStore:
    def get(self, key: str) -> Any | None:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


# ============================================================
# DATABASE (default)
# ============================================================


class DatabaseKeyValueStore(KeyValueStore):
    def get(self, key: str) -> Any | None:
        try:
            entry = KeyValueEntry.objects.filter(scope_key=key).only("value").first()
        except DatabaseError as exc:
            logger.exception("Persistence read failed", extra={"scope_key": key})
            raise PersistenceError(f"Could not read '{key}'") from exc
        return None if entry is None else entry.value

    def set(self, key: str, value: Any) -> None:
        try:
            with transaction.atomic():
                KeyValueEntry.objects.update_or_create(
                    scope_key=key,
                    defaults={"value": value},
                )
        except DatabaseError as exc:
            logger.exception("Persistence write failed", extra={"scope_key": key})
            raise PersistenceError(f"Could not write '{key}'") from exc

    def delete(self, key: str) -> None:
        try:
            KeyValueEntry.objects.filter(scope_key=key).delete()
        except DatabaseError as exc:
            logger.exception("Persistence delete failed", extra={"scope_key": key})
            raise PersistenceError(f"Could not delete '{key}'") from exc


# ============================================================
# IN-MEMORY (tests / scripts)
# ============================================================


class InMemoryKeyValueStore(KeyValueStore):
    """
    Process-local store. Values are deep-copied on the way in and out so
    callers cannot mutate stored state by accident.
    """

    def __init__(self):
        self._data: dict[str, Any] = {}
        self._lock = threading.Lock()
        self.writes = 0

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)
            self.writes += 1

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


_default_store: KeyValueStore | None = None


def get_default_store() -> KeyValueStore:
    global _default_store
    if _default_store is None:
        _default_store = DatabaseKeyValueStore()
    return _default_store
