# orders/views/public.py

"""
STOREFRONT ORDER ENDPOINTS

- POST /api/orders/checkout/     (guest or shopper; cart -> order)
- GET  /api/orders/mine/         (signed-in shopper, newest first)
- GET  /api/orders/<order_no>/   (public tracking by order number)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.throttling import PublicPollThrottle, PublicWriteThrottle
from orders.serializers import (
    CheckoutInputSerializer,
    OrderSerializer,
    OrderTrackingSerializer,
)
from orders.services import checkout_cart, get_order, orders_for_email
from orders.views.errors import OrderErrorMixin
from users.identity import resolve_cart_identity
from users.permissions import IsShopper


class CheckoutView(OrderErrorMixin, APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            201: OrderSerializer,
            400: OpenApiResponse(description="Empty cart or invalid address"),
        },
    )
    def post(self, request):
        ser = CheckoutInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        order = checkout_cart(
            identity=resolve_cart_identity(request),
            address=dict(data["address"]),
            customer_email=data.get("customer_email", ""),
            distance_km=data.get("distance_km"),
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderTrackingView(OrderErrorMixin, APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicPollThrottle]

    @extend_schema(responses={200: OrderTrackingSerializer})
    def get(self, request, order_no: str):
        order = get_order(order_no)
        return Response(OrderTrackingSerializer(order).data)


class MyOrdersView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, IsShopper]
    serializer_class = OrderSerializer

    def get_queryset(self):
        return orders_for_email(self.request.user.email)
