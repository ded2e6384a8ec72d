# catalog/serializers.py

"""
CATALOG SERIALIZERS

MedicineSerializer is shared by the public storefront (read) and the
admin back-office (write). Derived fields are server-computed.
"""

from decimal import Decimal

from rest_framework import serializers

from catalog.models import Medicine
from catalog.services import expiry_status, savings, savings_percent


class DosageSerializer(serializers.Serializer):
    normal = serializers.CharField(required=False, allow_blank=True, default="")
    max_safe = serializers.CharField(required=False, allow_blank=True, default="")
    overdose_warning = serializers.CharField(required=False, allow_blank=True, default="")


class DetailsSerializer(serializers.Serializer):
    mechanism = serializers.CharField(required=False, allow_blank=True, default="")
    side_effects = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    contraindications = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    storage = serializers.CharField(required=False, allow_blank=True, default="")


class MarketRateSerializer(serializers.Serializer):
    shop_name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    type = serializers.ChoiceField(choices=["Generic", "Branded"])

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        # JSONField storage: keep money as a string
        value["price"] = str(value["price"])
        return value


class MedicineSerializer(serializers.ModelSerializer):
    id = serializers.CharField(max_length=64, required=False)
    common_use = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    dosage = serializers.JSONField(required=False)
    details = serializers.JSONField(required=False)
    market_rates = serializers.JSONField(required=False)

    price_per_unit = serializers.SerializerMethodField(read_only=True)
    savings = serializers.SerializerMethodField(read_only=True)
    savings_percent = serializers.SerializerMethodField(read_only=True)
    expiry_status = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Medicine
        fields = [
            "id",
            "name",
            "brand_example",
            "salt_composition",
            "batch_number",
            "category",
            "common_use",
            "description",
            "generic_price",
            "branded_price",
            "strip_size",
            "price_per_unit",
            "savings",
            "savings_percent",
            "stock",
            "expiry_date",
            "expiry_status",
            "image_url",
            "dosage",
            "details",
            "market_rates",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "price_per_unit",
            "savings",
            "savings_percent",
            "expiry_status",
            "created_at",
            "updated_at",
        ]

    def validate_id(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("id cannot be blank")
        if self.instance is not None and value != self.instance.id:
            raise serializers.ValidationError("id cannot be changed")
        if self.instance is None and Medicine.objects.filter(id=value).exists():
            raise serializers.ValidationError("A medicine with this id already exists")
        return value

    def _validate_with(self, serializer_class, value, many=False):
        checker = serializer_class(data=value, many=many)
        if not checker.is_valid():
            raise serializers.ValidationError(checker.errors)
        return checker.validated_data

    def validate_dosage(self, value):
        return dict(self._validate_with(DosageSerializer, value or {}))

    def validate_details(self, value):
        return dict(self._validate_with(DetailsSerializer, value or {}))

    def validate_market_rates(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("market_rates must be a list")
        return [dict(row) for row in self._validate_with(MarketRateSerializer, value, many=True)]

    def validate_strip_size(self, value):
        if value is None or int(value) < 1:
            raise serializers.ValidationError("strip_size must be >= 1")
        return value

    def get_price_per_unit(self, obj) -> str:
        per_unit = Decimal(str(obj.generic_price)) / Decimal(int(obj.strip_size))
        return f"{per_unit:.2f}"

    def get_savings(self, obj) -> str:
        return f"{savings(obj):.2f}"

    def get_savings_percent(self, obj) -> int:
        return savings_percent(obj)

    def get_expiry_status(self, obj) -> str:
        return expiry_status(obj)
