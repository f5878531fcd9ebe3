from django.contrib import admin
from .models import MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "item_type", "combo_type", "price", "is_active")
    list_filter = ("item_type", "is_active")
    search_fields = ("name",)
    readonly_fields = ("combo_type", "archived_at", "created_at", "updated_at")

    def get_queryset(self, request):
        return MenuItem.objects.with_archived()
