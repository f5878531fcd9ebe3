from django.contrib import admin

from .models import ZReport


@admin.register(ZReport)
class ZReportAdmin(admin.ModelAdmin):
    list_display = ("business_date", "total_transactions", "total_sales", "created_at")
    readonly_fields = (
        "business_date",
        "total_transactions",
        "total_sales",
        "employee_breakdown",
        "created_at",
    )
    ordering = ("-business_date",)

    def has_add_permission(self, request):
        # Z reports are only produced by the daily close.
        return False
