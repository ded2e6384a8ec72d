# activity/admin.py

from django.contrib import admin

from activity.models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "category", "message", "actor_email", "is_read")
    list_filter = ("category", "is_read")
    search_fields = ("message", "actor_email")
    readonly_fields = (
        "category",
        "message",
        "actor_email",
        "ip_address",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        # only the read flag is editable
        obj.save(update_fields=["is_read"])
