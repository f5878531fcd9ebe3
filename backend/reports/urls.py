from django.urls import path
from .views import (
    BusiestDaysView,
    InventoryUsageView,
    SalesReportView,
    XReportView,
    ZReportView,
)

app_name = "reports"

urlpatterns = [
    path("reports/sales/", SalesReportView.as_view(), name="sales"),
    path("reports/x-report/", XReportView.as_view(), name="x-report"),
    path("reports/z-report/", ZReportView.as_view(), name="z-report"),
    path("reports/inventory/", InventoryUsageView.as_view(), name="inventory"),
    path("reports/busiest/", BusiestDaysView.as_view(), name="busiest"),
]
