from django.urls import path
from .views import InventoryItemViewSet

app_name = "inventory"

urlpatterns = [
    path("inventory-items/", InventoryItemViewSet.as_view({'get': 'list', 'post': 'create'}), name="inventory-item-list"),
    path("inventory-items/<int:pk>/", InventoryItemViewSet.as_view({
        'get': 'retrieve',
        'put': 'update',
        'patch': 'partial_update',
        'delete': 'destroy'
    }), name="inventory-item-detail"),
]
