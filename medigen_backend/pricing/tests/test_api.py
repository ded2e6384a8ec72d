# pricing/tests/test_api.py

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from catalog.models import Medicine, MedicineCategory


class PriceQuoteAPITests(APITestCase):
    def setUp(self):
        self.medicine = Medicine.objects.create(
            id="med_para",
            name="Paracetamol 500mg",
            category=MedicineCategory.FEVER,
            generic_price=Decimal("30.00"),
            branded_price=Decimal("60.00"),
            strip_size=10,
            expiry_date=date.today() + timedelta(days=365),
        )
        self.url = reverse("pricing:quote")

    def test_quote_uses_bulk_tiers(self):
        res = self.client.get(self.url, {"medicine_id": "med_para", "quantity": 50})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["base_total"], "150.00")
        self.assertEqual(res.data["discount_percent"], 5)
        self.assertEqual(res.data["discount_amount"], "7.50")
        self.assertEqual(res.data["final_total"], "142.50")
        self.assertEqual(res.data["price_per_unit"], "3.00")

    def test_zero_quantity_is_zero_quote(self):
        res = self.client.get(self.url, {"medicine_id": "med_para", "quantity": 0})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["final_total"], "0.00")
        self.assertEqual(res.data["quantity"], 0)

    def test_unknown_medicine_is_404(self):
        res = self.client.get(self.url, {"medicine_id": "nope", "quantity": 5})

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "medicine_not_found")

    def test_inactive_medicine_is_not_quoted(self):
        self.medicine.is_active = False
        self.medicine.save()

        res = self.client.get(self.url, {"medicine_id": "med_para", "quantity": 5})
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_missing_params_is_400(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_tiers_endpoint(self):
        res = self.client.get(reverse("pricing:tiers"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.data,
            [{"min_quantity": 50, "percent": 5}, {"min_quantity": 100, "percent": 10}],
        )
