# cart/tests/test_api.py

from datetime import date, timedelta
from decimal import Decimal
from unittest import mock

from rest_framework import status
from rest_framework.test import APITestCase

from catalog.models import Medicine, MedicineCategory
from storage.gateway import PersistenceError
from storage.models import KeyValueEntry
from users.models import User

GUEST = {"HTTP_X_GUEST_ID": "guest-token-0001"}


class CartAPITests(APITestCase):
    def setUp(self):
        Medicine.objects.create(
            id="med_para",
            name="Paracetamol 500mg",
            category=MedicineCategory.FEVER,
            generic_price=Decimal("30.00"),
            branded_price=Decimal("60.00"),
            strip_size=10,
            expiry_date=date.today() + timedelta(days=365),
        )
        self.user = User.objects.create_user(email="shopper@example.com", password="Shop@1234")

    def test_guest_add_and_read(self):
        res = self.client.post(
            "/api/cart/items/", {"medicine_id": "med_para"}, format="json", **GUEST
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["item_count"], 10)
        self.assertEqual(res.data["cart_total"], "30.00")

        res = self.client.get("/api/cart/", **GUEST)
        self.assertEqual(res.data["items"][0]["id"], "med_para")
        self.assertTrue(KeyValueEntry.objects.filter(scope_key="cart:guest:guest-token-0001").exists())

    def test_bulk_tier_reflected_in_cart(self):
        res = self.client.post(
            "/api/cart/items/",
            {"medicine_id": "med_para", "quantity": 100},
            format="json",
            **GUEST,
        )
        line = res.data["items"][0]
        self.assertEqual(line["discount_percent"], 10)
        self.assertEqual(line["final_total"], "270.00")
        self.assertEqual(res.data["total_discount"], "30.00")

    def test_add_zero_quantity_is_400(self):
        res = self.client.post(
            "/api/cart/items/",
            {"medicine_id": "med_para", "quantity": 0},
            format="json",
            **GUEST,
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(KeyValueEntry.objects.exists())

    def test_add_unknown_medicine_is_404(self):
        res = self.client.post("/api/cart/items/", {"medicine_id": "nope"}, format="json", **GUEST)
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "medicine_not_found")

    def test_update_and_remove(self):
        self.client.post("/api/cart/items/", {"medicine_id": "med_para"}, format="json", **GUEST)

        res = self.client.patch("/api/cart/items/med_para/", {"quantity": 0}, format="json", **GUEST)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["item_count"], 10)

        res = self.client.patch("/api/cart/items/med_para/", {"quantity": 55}, format="json", **GUEST)
        self.assertEqual(res.data["item_count"], 55)

        res = self.client.delete("/api/cart/items/med_para/", **GUEST)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["items"], [])

        res = self.client.delete("/api/cart/items/med_para/", **GUEST)
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_summary(self):
        self.client.post(
            "/api/cart/items/",
            {"medicine_id": "med_para", "quantity": 50},
            format="json",
            **GUEST,
        )
        res = self.client.get("/api/cart/summary/", {"distance_km": "1.5"}, **GUEST)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["subtotal"], "142.50")
        self.assertEqual(res.data["gst"], "17.10")
        self.assertEqual(res.data["delivery_fee"], "20.00")
        self.assertEqual(res.data["total"], "189.60")

    def test_clear(self):
        self.client.post("/api/cart/items/", {"medicine_id": "med_para"}, format="json", **GUEST)
        res = self.client.post("/api/cart/clear/", **GUEST)
        self.assertEqual(res.data["items"], [])

    def test_login_does_not_merge_guest_cart(self):
        self.client.post("/api/cart/items/", {"medicine_id": "med_para"}, format="json", **GUEST)

        self.client.force_authenticate(self.user)
        res = self.client.get("/api/cart/", **GUEST)
        self.assertEqual(res.data["items"], [])

    def test_invalid_guest_token_is_400(self):
        res = self.client.get("/api/cart/", HTTP_X_GUEST_ID="bad token!")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "invalid_identity")

    def test_storage_failure_is_503(self):
        with mock.patch(
            "storage.gateway.DatabaseKeyValueStore.set",
            side_effect=PersistenceError("down"),
        ):
            res = self.client.post(
                "/api/cart/items/", {"medicine_id": "med_para"}, format="json", **GUEST
            )
        self.assertEqual(res.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)


class BookmarkAPITests(APITestCase):
    def setUp(self):
        Medicine.objects.create(
            id="med_cet",
            name="Cetirizine 10mg",
            category=MedicineCategory.ALLERGY,
            generic_price=Decimal("12.00"),
            branded_price=Decimal("48.00"),
            expiry_date=date.today() + timedelta(days=365),
        )

    def test_bookmark_flow(self):
        res = self.client.post("/api/bookmarks/", {"medicine_id": "med_cet"}, format="json", **GUEST)
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["medicine_ids"], ["med_cet"])

        res = self.client.post("/api/bookmarks/", {"medicine_id": "med_cet"}, format="json", **GUEST)
        self.assertEqual(res.data["medicine_ids"], ["med_cet"])

        res = self.client.delete("/api/bookmarks/med_cet/", **GUEST)
        self.assertEqual(res.data["medicine_ids"], [])

        res = self.client.get("/api/bookmarks/", **GUEST)
        self.assertEqual(res.data["medicine_ids"], [])
