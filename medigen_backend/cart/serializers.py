# cart/serializers.py

"""
CART / BOOKMARK SERIALIZERS

Output serializers read the in-memory aggregate (cart.domain), not models.
Money is rendered at 2dp; totals are recomputed on every read.
"""

from rest_framework import serializers

from pricing.engine import money


# =====================================================
# INPUT
# =====================================================

class AddCartItemInputSerializer(serializers.Serializer):
    medicine_id = serializers.CharField(max_length=64)
    # omitted -> one strip
    quantity = serializers.IntegerField(min_value=1, required=False)


class UpdateCartItemInputSerializer(serializers.Serializer):
    # < 1 is accepted here and ignored by the cart (no change, no error)
    quantity = serializers.IntegerField()


class AddBookmarkInputSerializer(serializers.Serializer):
    medicine_id = serializers.CharField(max_length=64)


class SummaryQuerySerializer(serializers.Serializer):
    distance_km = serializers.DecimalField(
        max_digits=6, decimal_places=2, min_value=0, required=False
    )


# =====================================================
# OUTPUT
# =====================================================

class CartLineSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    medicine = serializers.DictField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    base_total = serializers.SerializerMethodField()
    discount_percent = serializers.SerializerMethodField()
    discount_amount = serializers.SerializerMethodField()
    final_total = serializers.SerializerMethodField()
    savings = serializers.SerializerMethodField()

    def get_base_total(self, line) -> str:
        return str(money(line.quote().base_total))

    def get_discount_percent(self, line) -> int:
        return line.quote().discount_percent

    def get_discount_amount(self, line) -> str:
        return str(money(line.quote().discount_amount))

    def get_final_total(self, line) -> str:
        return str(money(line.quote().final_total))

    def get_savings(self, line) -> str:
        return str(money(line.savings()))


class CartSerializer(serializers.Serializer):
    items = CartLineSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    cart_total = serializers.SerializerMethodField()
    total_discount = serializers.SerializerMethodField()
    total_savings = serializers.SerializerMethodField()

    def get_cart_total(self, cart) -> str:
        return str(money(cart.cart_total))

    def get_total_discount(self, cart) -> str:
        return str(money(cart.total_discount))

    def get_total_savings(self, cart) -> str:
        return str(money(cart.total_savings))


class BookmarkListSerializer(serializers.Serializer):
    medicine_ids = serializers.ListField(child=serializers.CharField(), read_only=True)
