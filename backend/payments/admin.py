from django.contrib import admin
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "payment_type", "payment_amount", "payment_time")
    list_filter = ("payment_type",)
    date_hierarchy = "payment_time"
