# storage/admin.py

from django.contrib import admin

from storage.models import KeyValueEntry


@admin.register(KeyValueEntry)
class KeyValueEntryAdmin(admin.ModelAdmin):
    list_display = ("scope_key", "updated_at")
    search_fields = ("scope_key",)
    readonly_fields = ("scope_key", "value", "updated_at")

    def has_add_permission(self, request):
        return False
