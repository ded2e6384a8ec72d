# orders/serializers.py

"""
ORDER SERIALIZERS

Address rules live in orders.services.address; the serializer reuses them
so API validation and place_order() can never disagree.
"""

from rest_framework import serializers

from orders.models import Order
from orders.services.address import ADDRESS_TYPES, PHONE_RE, PINCODE_RE
from orders.services.tracking import display_progress_hint


# =====================================================
# INPUT
# =====================================================

class AddressSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=120)
    phone = serializers.CharField(max_length=20)
    line = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=80)
    pincode = serializers.CharField(max_length=6, min_length=6)
    type = serializers.ChoiceField(choices=ADDRESS_TYPES, default="home")

    def validate_phone(self, value):
        value = value.strip()
        if not PHONE_RE.match(value):
            raise serializers.ValidationError("Enter a valid 10-digit mobile number.")
        return value

    def validate_pincode(self, value):
        value = value.strip()
        if not PINCODE_RE.match(value):
            raise serializers.ValidationError("Enter a valid 6-digit pincode.")
        return value


class CheckoutInputSerializer(serializers.Serializer):
    address = AddressSerializer()
    # optional for signed-in shoppers (falls back to the account email)
    customer_email = serializers.EmailField(required=False, allow_blank=True, default="")
    distance_km = serializers.DecimalField(
        max_digits=6, decimal_places=2, min_value=0, required=False, allow_null=True
    )


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


# =====================================================
# OUTPUT
# =====================================================

class OrderSerializer(serializers.ModelSerializer):
    item_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "order_no",
            "items",
            "item_count",
            "address",
            "bill",
            "total_amount",
            "customer_email",
            "status",
            "delivery_time",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderTrackingSerializer(OrderSerializer):
    display_progress_hint = serializers.SerializerMethodField()

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["display_progress_hint"]
        read_only_fields = fields

    def get_display_progress_hint(self, obj) -> int:
        return display_progress_hint(obj, self.context.get("now"))


class DashboardStatsSerializer(serializers.Serializer):
    total_orders = serializers.IntegerField()
    pending_orders = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
