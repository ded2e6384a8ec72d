# catalog/views.py

"""
MEDICINE VIEWSET

Purpose:
- Public storefront browsing (AllowAny, active medicines only)
- Admin catalog management (create / update / delete)

Filters:
- ?category=<category>
- ?search=<name, salt or brand>
- /medicines/expiring-soon/ for the admin back-office
"""

from datetime import timedelta

from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from catalog.models import Medicine
from catalog.serializers import MedicineSerializer
from catalog.services import (
    EXPIRING_SOON_DAYS,
    delete_medicine,
    list_medicines,
    record_saved,
)
from users.permissions import IsAdmin


class MedicineViewSet(viewsets.ModelViewSet):
    serializer_class = MedicineSerializer
    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
    ]
    filterset_fields = ["category", "is_active"]
    search_fields = ["name", "salt_composition", "brand_example"]

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [AllowAny()]
        return [IsAuthenticated(), IsAdmin()]

    def get_queryset(self):
        user = getattr(self.request, "user", None)
        is_admin = bool(user and user.is_authenticated and getattr(user, "is_admin", False))
        return list_medicines(include_inactive=is_admin)

    def perform_create(self, serializer):
        medicine = serializer.save()
        record_saved(medicine, created=True, actor_email=self.request.user.email)

    def perform_update(self, serializer):
        medicine = serializer.save()
        record_saved(medicine, created=False, actor_email=self.request.user.email)

    def perform_destroy(self, instance):
        delete_medicine(instance.id, actor_email=self.request.user.email)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="days",
                required=False,
                type=int,
                description=f"Window in days (default {EXPIRING_SOON_DAYS})",
            )
        ],
        responses=MedicineSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="expiring-soon")
    def expiring_soon(self, request):
        try:
            days = int(request.query_params.get("days") or EXPIRING_SOON_DAYS)
        except ValueError:
            days = EXPIRING_SOON_DAYS

        today = timezone.localdate()
        qs = Medicine.objects.filter(
            expiry_date__lte=today + timedelta(days=max(days, 0))
        ).order_by("expiry_date", "name")

        return Response(MedicineSerializer(qs, many=True).data)
