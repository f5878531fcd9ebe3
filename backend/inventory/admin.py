from django.contrib import admin
from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("id", "item_name", "quantity", "updated_at")
    search_fields = ("item_name",)
