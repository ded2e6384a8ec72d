# activity/serializers.py

from rest_framework import serializers

from activity.models import ActivityLog


class ActivityLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ActivityLog
        fields = [
            "id",
            "category",
            "message",
            "actor_email",
            "ip_address",
            "is_read",
            "created_at",
        ]
        read_only_fields = fields
