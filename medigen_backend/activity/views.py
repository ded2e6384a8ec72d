# activity/views.py

"""
ADMIN ACTIVITY FEED

GET  /api/admin/activity/?category=<category>&is_read=<bool>
POST /api/admin/activity/<id>/read/

Admin-only. Entries are append-only; marking read is the only mutation.
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from activity.models import ActivityLog
from activity.serializers import ActivityLogSerializer
from activity.services import mark_read
from users.permissions import IsAdmin


class ActivityLogListView(ListAPIView):
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = ActivityLogSerializer
    queryset = ActivityLog.objects.all()
    filterset_fields = ["category", "is_read"]

    @extend_schema(tags=["Admin"], description="Admin activity / notification feed (newest first)")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class ActivityLogMarkReadView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = ActivityLogSerializer

    @extend_schema(
        tags=["Admin"],
        request=None,
        responses={200: ActivityLogSerializer},
        description="Mark an activity entry as read",
    )
    def post(self, request, pk):
        entry = get_object_or_404(ActivityLog, pk=pk)
        mark_read(entry)
        return Response(ActivityLogSerializer(entry).data, status=status.HTTP_200_OK)
