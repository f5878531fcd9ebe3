from django.urls import path
from .views import OrderItemsView, OrderListCreateView

app_name = "orders"

urlpatterns = [
    path("orders/", OrderListCreateView.as_view(), name="order-list"),
    path("orders/<int:pk>/items/", OrderItemsView.as_view(), name="order-items"),
]
