from core_backend.base.viewsets import BaseViewSet
from users.permissions import ReadOnlyForCashiers
from .models import InventoryItem
from .serializers import InventoryItemSerializer


class InventoryItemViewSet(BaseViewSet):
    queryset = InventoryItem.objects.all()
    serializer_class = InventoryItemSerializer
    permission_classes = [ReadOnlyForCashiers]
    search_fields = ["item_name"]
    ordering_fields = ["id", "item_name", "quantity"]
