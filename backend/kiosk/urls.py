from django.urls import path
from .views import (
    KioskCheckoutView,
    KioskOrderItemDetailView,
    KioskOrderItemsView,
    KioskOrderView,
)

app_name = "kiosk"

urlpatterns = [
    path("order/", KioskOrderView.as_view(), name="order"),
    path("order/items/", KioskOrderItemsView.as_view(), name="order-items"),
    path("order/items/<int:position>/", KioskOrderItemDetailView.as_view(), name="order-item-detail"),
    path("checkout/", KioskCheckoutView.as_view(), name="checkout"),
]
