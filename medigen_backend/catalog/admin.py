# catalog/admin.py

from django.contrib import admin

from catalog.models import Medicine
from catalog.services import delete_medicine, expiry_status, record_saved


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "category",
        "generic_price",
        "branded_price",
        "strip_size",
        "stock",
        "expiry_date",
        "expiry_state",
        "is_active",
    )
    list_filter = ("category", "is_active", "expiry_date")
    search_fields = ("id", "name", "salt_composition", "brand_example")
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        record_saved(obj, created=not change, actor_email=request.user.email)

    def delete_model(self, request, obj):
        delete_medicine(obj.id, actor_email=request.user.email)

    def expiry_state(self, obj):
        return expiry_status(obj)

    expiry_state.short_description = "Expiry"
