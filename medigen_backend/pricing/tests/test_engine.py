# pricing/tests/test_engine.py

from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from pricing.engine import (
    bill_summary,
    bulk_discount_percent,
    checkout_bill,
    delivery_fee,
    price_quote,
)

# ₹30 per strip of 10 -> ₹3 per unit
SNAPSHOT = {"id": "med_test", "generic_price": "30.00", "strip_size": 10}


class BulkDiscountTierTests(SimpleTestCase):
    """
    GUARANTEES:
    - Highest threshold wins
    - Tiers are not cumulative
    - Non-positive quantity has no discount
    """

    def test_tier_boundaries(self):
        self.assertEqual(bulk_discount_percent(1), 0)
        self.assertEqual(bulk_discount_percent(49), 0)
        self.assertEqual(bulk_discount_percent(50), 5)
        self.assertEqual(bulk_discount_percent(99), 5)
        self.assertEqual(bulk_discount_percent(100), 10)
        self.assertEqual(bulk_discount_percent(1000), 10)

    def test_non_positive_quantity(self):
        self.assertEqual(bulk_discount_percent(0), 0)
        self.assertEqual(bulk_discount_percent(-5), 0)

    def test_custom_tiers_in_any_order(self):
        tiers = [(10, 2), (30, 8), (20, 4)]
        self.assertEqual(bulk_discount_percent(25, tiers), 4)
        self.assertEqual(bulk_discount_percent(30, tiers), 8)

    @override_settings(PRICING={"BULK_DISCOUNT_TIERS": [(5, 50)]})
    def test_tiers_read_from_settings(self):
        self.assertEqual(bulk_discount_percent(5), 50)
        self.assertEqual(bulk_discount_percent(100), 50)


class PriceQuoteTests(SimpleTestCase):
    def test_below_first_tier(self):
        quote = price_quote(SNAPSHOT, 49)
        self.assertEqual(quote.base_total, Decimal("147"))
        self.assertEqual(quote.discount_percent, 0)
        self.assertEqual(quote.discount_amount, Decimal("0"))
        self.assertEqual(quote.final_total, Decimal("147"))

    def test_five_percent_tier(self):
        quote = price_quote(SNAPSHOT, 50)
        self.assertEqual(quote.base_total, Decimal("150"))
        self.assertEqual(quote.discount_percent, 5)
        self.assertEqual(quote.discount_amount, Decimal("7.5"))
        self.assertEqual(quote.final_total, Decimal("142.5"))

    def test_ten_percent_tier(self):
        quote = price_quote(SNAPSHOT, 100)
        self.assertEqual(quote.base_total, Decimal("300"))
        self.assertEqual(quote.discount_percent, 10)
        self.assertEqual(quote.discount_amount, Decimal("30"))
        self.assertEqual(quote.final_total, Decimal("270"))

    def test_zero_and_negative_quantity_yield_zero_quote(self):
        for qty in (0, -3):
            quote = price_quote(SNAPSHOT, qty)
            self.assertEqual(quote.base_total, Decimal("0"))
            self.assertEqual(quote.discount_percent, 0)
            self.assertEqual(quote.final_total, Decimal("0"))

    def test_final_total_identity(self):
        for qty in (1, 7, 50, 73, 100, 250):
            quote = price_quote(SNAPSHOT, qty)
            self.assertEqual(quote.final_total, quote.base_total - quote.discount_amount)
            self.assertGreaterEqual(quote.final_total, 0)

    def test_accepts_objects_with_price_fields(self):
        class Med:
            generic_price = Decimal("30.00")
            strip_size = 10

        self.assertEqual(price_quote(Med(), 10).final_total, Decimal("30"))

    def test_invalid_strip_size_rejected(self):
        with self.assertRaises(ValueError):
            price_quote({"generic_price": "30.00", "strip_size": 0}, 10)


class BillSummaryTests(SimpleTestCase):
    def test_delivery_fee_free_above_threshold(self):
        self.assertEqual(delivery_fee(Decimal("200.01")), Decimal("0"))

    def test_delivery_fee_flat_without_distance(self):
        self.assertEqual(delivery_fee(Decimal("200.00")), Decimal("40.00"))

    def test_delivery_fee_distance_bands(self):
        self.assertEqual(delivery_fee(Decimal("100"), 0.5), Decimal("15.00"))
        self.assertEqual(delivery_fee(Decimal("100"), 1), Decimal("15.00"))
        self.assertEqual(delivery_fee(Decimal("100"), 1.5), Decimal("20.00"))
        self.assertEqual(delivery_fee(Decimal("100"), 5), Decimal("40.00"))
        self.assertEqual(delivery_fee(Decimal("100"), 12), Decimal("60.00"))

    def test_summary_totals(self):
        summary = bill_summary(Decimal("142.50"), Decimal("7.50"))

        self.assertEqual(summary.subtotal, Decimal("142.50"))
        self.assertEqual(summary.discount, Decimal("7.50"))
        self.assertEqual(summary.gst, Decimal("17.10"))
        self.assertEqual(summary.delivery_fee, Decimal("40.00"))
        self.assertEqual(summary.platform_fee, Decimal("10.00"))
        self.assertEqual(summary.total, Decimal("209.60"))

    def test_empty_cart_summary_is_zero(self):
        summary = bill_summary(Decimal("0"))
        self.assertEqual(summary.total, Decimal("0"))
        self.assertEqual(summary.platform_fee, Decimal("0"))

    def test_checkout_bill_leaves_out_gst(self):
        summary = checkout_bill(Decimal("150.00"), Decimal("0"), 2.5)

        self.assertEqual(summary.gst, Decimal("0.00"))
        self.assertEqual(summary.delivery_fee, Decimal("40.00"))
        self.assertEqual(summary.total, Decimal("200.00"))

    def test_cart_preview_still_adds_gst(self):
        preview = bill_summary(Decimal("150.00"), Decimal("0"), 2.5)
        charged = checkout_bill(Decimal("150.00"), Decimal("0"), 2.5)

        self.assertEqual(preview.gst, Decimal("18.00"))
        self.assertEqual(preview.total - charged.total, preview.gst)
