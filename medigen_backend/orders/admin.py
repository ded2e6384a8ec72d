# orders/admin.py

from django.contrib import admin

from orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Read-only: status changes go through the API so the lifecycle rules and
    the activity log are always applied.
    """

    list_display = ("order_no", "customer_email", "total_amount", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("order_no", "customer_email")
    ordering = ("-created_at",)
    readonly_fields = [field.name for field in Order._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
