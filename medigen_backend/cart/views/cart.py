# cart/views/cart.py

"""
CART API

Open to guests and signed-in shoppers. The owning identity is resolved
once per request (users.identity.resolve_cart_identity) and handed to
CartService; views never touch request state below that point.

Endpoints:
- GET    /api/cart/
- POST   /api/cart/items/              {medicine_id, quantity?}
- PATCH  /api/cart/items/<id>/         {quantity}
- DELETE /api/cart/items/<id>/
- POST   /api/cart/clear/
- GET    /api/cart/summary/?distance_km=
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.errors import error_response
from cart.serializers import (
    AddCartItemInputSerializer,
    CartSerializer,
    SummaryQuerySerializer,
    UpdateCartItemInputSerializer,
)
from cart.services import CartService, InvalidQuantityError
from catalog.services import MedicineNotFoundError
from pricing.engine import bill_summary
from pricing.serializers import BillSummarySerializer
from storage.gateway import PersistenceError
from users.identity import IdentityError, resolve_cart_identity


class CartAPIView(APIView):
    """
    Shared plumbing: identity resolution + domain error mapping.
    """

    permission_classes = [AllowAny]

    def get_cart_service(self) -> CartService:
        return CartService(resolve_cart_identity(self.request))

    def handle_exception(self, exc):
        if isinstance(exc, IdentityError):
            return error_response(
                code="invalid_identity",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        if isinstance(exc, PersistenceError):
            return error_response(
                code="storage_unavailable",
                message="Cart storage is temporarily unavailable.",
                http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        if isinstance(exc, MedicineNotFoundError):
            return error_response(
                code="medicine_not_found",
                message=str(exc),
                http_status=status.HTTP_404_NOT_FOUND,
            )
        if isinstance(exc, InvalidQuantityError):
            return error_response(
                code="invalid_quantity",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        return super().handle_exception(exc)

    def cart_response(self, cart, http_status=status.HTTP_200_OK):
        return Response(CartSerializer(cart).data, status=http_status)


class CartView(CartAPIView):
    @extend_schema(responses={200: CartSerializer})
    def get(self, request):
        return self.cart_response(self.get_cart_service().cart)


class CartItemsView(CartAPIView):
    @extend_schema(request=AddCartItemInputSerializer, responses={201: CartSerializer})
    def post(self, request):
        ser = AddCartItemInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        service = self.get_cart_service()
        cart = service.add_to_cart(
            ser.validated_data["medicine_id"],
            ser.validated_data.get("quantity"),
        )
        return self.cart_response(cart, status.HTTP_201_CREATED)


class CartItemDetailView(CartAPIView):
    @extend_schema(request=UpdateCartItemInputSerializer, responses={200: CartSerializer})
    def patch(self, request, medicine_id: str):
        ser = UpdateCartItemInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        cart = self.get_cart_service().update_quantity(
            medicine_id, ser.validated_data["quantity"]
        )
        return self.cart_response(cart)

    @extend_schema(responses={200: CartSerializer})
    def delete(self, request, medicine_id: str):
        cart = self.get_cart_service().remove_from_cart(medicine_id)
        return self.cart_response(cart)


class ClearCartView(CartAPIView):
    @extend_schema(request=None, responses={200: CartSerializer})
    def post(self, request):
        return self.cart_response(self.get_cart_service().clear_cart())


class CartSummaryView(CartAPIView):
    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="distance_km",
                required=False,
                type=float,
                description="Distance to the delivery address; omitted -> flat fee",
            )
        ],
        responses={200: BillSummarySerializer},
    )
    def get(self, request):
        query = SummaryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        cart = self.get_cart_service().cart
        summary = bill_summary(
            cart.cart_total,
            cart.total_discount,
            query.validated_data.get("distance_km"),
        )
        data = dict(BillSummarySerializer(summary).data)
        data["item_count"] = cart.item_count
        return Response(data)
