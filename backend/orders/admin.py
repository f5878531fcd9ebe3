from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    raw_id_fields = ("menu_item",)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "time", "total", "staff", "payment")
    list_filter = ("time",)
    date_hierarchy = "time"
    raw_id_fields = ("staff", "payment")
    inlines = [OrderItemInline]
