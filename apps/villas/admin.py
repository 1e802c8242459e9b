"""
apps.villas.admin
"""
from django.contrib import admin

from .models import Villa


@admin.register(Villa)
class VillaAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "rate", "occupancy", "sqft", "created_date"]
    search_fields = ["name", "amenity"]
    readonly_fields = ["id", "created_date", "updated_date"]
    ordering = ["id"]

    def get_fields(self, request, obj=None):
        """Keep the ID at the top of the detail form."""
        fields = super().get_fields(request, obj)
        if obj and "id" in fields:
            fields = list(fields)
            fields.remove("id")
            fields.insert(0, "id")
        return fields
