# pricing/views.py

"""
PRICING API (read-only, AllowAny)

- GET /api/pricing/quote/?medicine_id=<id>&quantity=<units>
- GET /api/pricing/tiers/

The live product quote uses the same engine as the cart and checkout.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response
from backend.throttling import PublicCatalogThrottle
from catalog.services import MedicineNotFoundError, get_medicine
from pricing.engine import configured_tiers, price_per_unit, price_quote
from pricing.serializers import (
    DiscountTierSerializer,
    PriceQuoteSerializer,
    QuoteQuerySerializer,
)


class PriceQuoteView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        parameters=[
            OpenApiParameter(name="medicine_id", required=True, type=str),
            OpenApiParameter(name="quantity", required=True, type=int, description="Units"),
        ],
        responses={200: PriceQuoteSerializer},
    )
    def get(self, request):
        query = QuoteQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            medicine = get_medicine(query.validated_data["medicine_id"])
        except MedicineNotFoundError as exc:
            return error_response(
                code="medicine_not_found",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )

        quantity = query.validated_data["quantity"]
        quote = price_quote(medicine, quantity)

        data = dict(PriceQuoteSerializer(quote).data)
        data["medicine_id"] = medicine.id
        data["quantity"] = max(quantity, 0)
        data["price_per_unit"] = f"{price_per_unit(medicine):.2f}"
        return Response(data)


class DiscountTiersView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(responses={200: DiscountTierSerializer(many=True)})
    def get(self, request):
        tiers = [
            {"min_quantity": threshold, "percent": percent}
            for threshold, percent in sorted(configured_tiers())
        ]
        return Response(DiscountTierSerializer(tiers, many=True).data)
