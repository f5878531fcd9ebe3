from core_backend.base import BaseModelSerializer
from .models import InventoryItem


class InventoryItemSerializer(BaseModelSerializer):
    class Meta:
        model = InventoryItem
        fields = ["id", "item_name", "quantity", "updated_at"]
        read_only_fields = ["id", "updated_at"]
        updatable_fields = ["item_name", "quantity"]
