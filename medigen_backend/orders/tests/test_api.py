# orders/tests/test_api.py

from datetime import date, timedelta
from decimal import Decimal

from django.core import mail
from rest_framework import status
from rest_framework.test import APITestCase

from activity.models import ActivityLog
from catalog.models import Medicine, MedicineCategory
from orders.models import Order
from orders.tests.helpers import ADDRESS, make_order
from storage.models import KeyValueEntry
from users.models import ROLE_ADMIN, User

GUEST = {"HTTP_X_GUEST_ID": "guest-token-0001"}


class CheckoutAPITests(APITestCase):
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
        self.shopper = User.objects.create_user(
            email="shopper@example.com", password="Shop@1234"
        )

    def _add(self, quantity, **extra):
        return self.client.post(
            "/api/cart/items/",
            {"medicine_id": "med_para", "quantity": quantity},
            format="json",
            **extra,
        )

    def test_guest_checkout_places_order_and_clears_cart(self):
        self._add(50, **GUEST)

        res = self.client.post(
            "/api/orders/checkout/",
            {"address": ADDRESS, "customer_email": "asha@example.com"},
            format="json",
            **GUEST,
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["status"], "placed")
        self.assertEqual(res.data["total_amount"], "192.50")
        self.assertEqual(res.data["items"][0]["final_total"], "142.50")
        self.assertEqual(res.data["bill"]["gst"], "0.00")
        self.assertEqual(len(mail.outbox), 1)

        cart = self.client.get("/api/cart/", **GUEST)
        self.assertEqual(cart.data["items"], [])

    def test_checkout_uses_distance_band(self):
        self._add(50, **GUEST)

        res = self.client.post(
            "/api/orders/checkout/",
            {"address": ADDRESS, "customer_email": "asha@example.com", "distance_km": "0.8"},
            format="json",
            **GUEST,
        )
        self.assertEqual(res.data["bill"]["delivery_fee"], "15.00")
        self.assertEqual(res.data["total_amount"], "167.50")

    def test_empty_cart_is_400(self):
        res = self.client.post(
            "/api/orders/checkout/",
            {"address": ADDRESS, "customer_email": "asha@example.com"},
            format="json",
            **GUEST,
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "empty_cart")
        self.assertFalse(Order.objects.exists())

    def test_bad_address_is_400_and_cart_kept(self):
        self._add(10, **GUEST)

        res = self.client.post(
            "/api/orders/checkout/",
            {"address": dict(ADDRESS, pincode="ABCDEF"), "customer_email": "asha@example.com"},
            format="json",
            **GUEST,
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Order.objects.exists())
        self.assertEqual(self.client.get("/api/cart/", **GUEST).data["item_count"], 10)

    def test_guest_without_email_is_400(self):
        self._add(10, **GUEST)

        res = self.client.post(
            "/api/orders/checkout/", {"address": ADDRESS}, format="json", **GUEST
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "invalid_order")

    def test_shopper_checkout_defaults_to_account_email(self):
        self.client.force_authenticate(self.shopper)
        self._add(10)

        res = self.client.post("/api/orders/checkout/", {"address": ADDRESS}, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["customer_email"], "shopper@example.com")
        self.assertEqual(
            KeyValueEntry.objects.get(scope_key=f"cart:user:{self.shopper.id}").value, []
        )

        mine = self.client.get("/api/orders/mine/")
        self.assertEqual(mine.data["count"], 1)


class TrackingAPITests(APITestCase):
    def test_public_tracking(self):
        order = make_order()

        res = self.client.get(f"/api/orders/{order.order_no}/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "placed")
        self.assertIn(res.data["display_progress_hint"], (1, 2))

    def test_unknown_order_is_404(self):
        res = self.client.get("/api/orders/ORD-00000/")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "order_not_found")


class AdminOrderAPITests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            email="admin@medigen.com", password="Admin@1234", role=ROLE_ADMIN
        )
        self.shopper = User.objects.create_user(
            email="shopper@example.com", password="Shop@1234"
        )
        self.order = make_order()
        self.url = f"/api/admin/orders/{self.order.order_no}/status/"

    def test_admin_advances_status(self):
        self.client.force_authenticate(self.admin)
        res = self.client.patch(self.url, {"status": "packed"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.assertEqual(res.data["status"], "packed")

        log = ActivityLog.objects.get(category=ActivityLog.CATEGORY_ORDER_STATUS)
        self.assertIn(self.order.order_no, log.message)
        self.assertEqual(log.actor_email, "admin@medigen.com")

    def test_shopper_forbidden(self):
        self.client.force_authenticate(self.shopper)
        res = self.client.patch(self.url, {"status": "packed"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_order_404(self):
        self.client.force_authenticate(self.admin)
        res = self.client.patch(
            "/api/admin/orders/ORD-00000/status/", {"status": "packed"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_skip_is_409(self):
        self.client.force_authenticate(self.admin)
        res = self.client.patch(self.url, {"status": "delivered"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "placed")

    def test_unknown_status_value_400(self):
        self.client.force_authenticate(self.admin)
        res = self.client.patch(self.url, {"status": "shipped"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_and_stats(self):
        self.client.force_authenticate(self.admin)

        res = self.client.get("/api/admin/orders/", {"status": "placed"})
        self.assertEqual(res.data["count"], 1)

        res = self.client.get("/api/admin/orders/stats/")
        self.assertEqual(res.data["total_orders"], 1)
        self.assertEqual(res.data["pending_orders"], 1)
        self.assertEqual(res.data["revenue"], "192.50")
