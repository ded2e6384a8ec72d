# orders/views/admin.py

"""
ADMIN ORDER ENDPOINTS (role: admin)

- GET   /api/admin/orders/?status=<status>
- GET   /api/admin/orders/stats/
- PATCH /api/admin/orders/<order_no>/status/   {status}
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from activity.services import client_ip
from orders.models import Order
from orders.serializers import (
    DashboardStatsSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
)
from orders.services import dashboard_stats, update_status
from orders.views.errors import OrderErrorMixin
from users.permissions import IsAdmin


class AdminOrderListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = OrderSerializer
    queryset = Order.objects.all().order_by("-created_at", "-id")
    filterset_fields = ["status", "customer_email"]


class AdminOrderStatsView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    @extend_schema(responses={200: DashboardStatsSerializer})
    def get(self, request):
        return Response(DashboardStatsSerializer(dashboard_stats()).data)


class AdminOrderStatusView(OrderErrorMixin, APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={
            200: OrderSerializer,
            404: OpenApiResponse(description="Unknown order number"),
            409: OpenApiResponse(description="Not the next status in sequence"),
        },
    )
    def patch(self, request, order_no: str):
        ser = OrderStatusUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        order = update_status(
            order_no,
            ser.validated_data["status"],
            actor=request.user,
            ip_address=client_ip(request),
        )
        return Response(OrderSerializer(order).data)
