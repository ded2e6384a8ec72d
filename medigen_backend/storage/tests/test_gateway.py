# storage/tests/test_gateway.py

from unittest import mock

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from storage.gateway import (
    DatabaseKeyValueStore,
    InMemoryKeyValueStore,
    PersistenceError,
    bookmarks_key,
    cart_key,
)
from storage.models import KeyValueEntry
from users.identity import Identity


class KeyFormatTests(SimpleTestCase):
    def test_keys_are_scoped_by_identity(self):
        user = Identity(id="42")
        guest = Identity.guest("guest-token-1")

        self.assertEqual(cart_key(user), "cart:user:42")
        self.assertEqual(bookmarks_key(user), "bookmarks:user:42")
        self.assertEqual(cart_key(guest), "cart:guest:guest-token-1")
        self.assertNotEqual(cart_key(user), cart_key(guest))


class DatabaseStoreTests(TestCase):
    def setUp(self):
        self.store = DatabaseKeyValueStore()

    def test_missing_key_reads_none(self):
        self.assertIsNone(self.store.get("cart:user:nobody"))

    def test_write_then_read(self):
        self.store.set("cart:user:1", [{"id": "med_a", "quantity": 3}])
        self.assertEqual(self.store.get("cart:user:1"), [{"id": "med_a", "quantity": 3}])

    def test_write_replaces_whole_value(self):
        self.store.set("bookmarks:user:1", ["a", "b"])
        self.store.set("bookmarks:user:1", ["c"])

        self.assertEqual(self.store.get("bookmarks:user:1"), ["c"])
        self.assertEqual(KeyValueEntry.objects.count(), 1)

    def test_delete_is_idempotent(self):
        self.store.set("cart:user:1", [])
        self.store.delete("cart:user:1")
        self.store.delete("cart:user:1")
        self.assertIsNone(self.store.get("cart:user:1"))

    def test_write_failure_raises_persistence_error(self):
        with mock.patch.object(
            KeyValueEntry.objects, "update_or_create", side_effect=DatabaseError("down")
        ):
            with self.assertRaises(PersistenceError):
                self.store.set("cart:user:1", [])


class InMemoryStoreTests(SimpleTestCase):
    def test_values_are_copied(self):
        store = InMemoryKeyValueStore()
        value = [{"quantity": 1}]
        store.set("k", value)

        value[0]["quantity"] = 99
        read_back = store.get("k")
        read_back[0]["quantity"] = 50

        self.assertEqual(store.get("k"), [{"quantity": 1}])
        self.assertEqual(store.writes, 1)
