# pricing/serializers.py

from rest_framework import serializers


class QuoteQuerySerializer(serializers.Serializer):
    medicine_id = serializers.CharField(max_length=64)
    quantity = serializers.IntegerField()


class PriceQuoteSerializer(serializers.Serializer):
    """Serializes engine.PriceQuote (money as 2dp strings)."""

    base_total = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount_percent = serializers.IntegerField()
    discount_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    final_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class BillSummarySerializer(serializers.Serializer):
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2)
    gst = serializers.DecimalField(max_digits=12, decimal_places=2)
    delivery_fee = serializers.DecimalField(max_digits=12, decimal_places=2)
    platform_fee = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class DiscountTierSerializer(serializers.Serializer):
    min_quantity = serializers.IntegerField()
    percent = serializers.IntegerField()
