from rest_framework import serializers
from core_backend.base import BaseModelSerializer
from .models import MenuItem


class MenuItemSerializer(BaseModelSerializer):
    """
    Manager-facing menu item. ``availability`` reads "Available" or
    "Unavailable"; writing anything but "Available" takes the item off sale.
    """

    availability = serializers.CharField(required=False)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "name",
            "item_type",
            "combo_type",
            "price",
            "description",
            "image",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "combo_type", "created_at", "updated_at"]
        updatable_fields = ["name", "item_type", "price", "description", "image", "availability"]

    def create(self, validated_data):
        availability = validated_data.pop("availability", "Available")
        item = super().create(validated_data)
        item.set_active(availability == "Available")
        return item

    def update(self, instance, validated_data):
        availability = validated_data.pop("availability", None)
        if "name" in validated_data or "item_type" in validated_data:
            # Re-derive the anchor tag from the new name/category on save.
            instance.combo_type = ""
        instance = super().update(instance, validated_data)
        if availability is not None:
            instance.set_active(availability == "Available")
        return instance


class PublicMenuItemSerializer(BaseModelSerializer):
    """What the kiosk, cashier and menu boards see."""

    class Meta:
        model = MenuItem
        fields = ["id", "name", "item_type", "combo_type", "price", "description", "image"]
        read_only_fields = fields


class MenuBoardSectionSerializer(serializers.Serializer):
    category = serializers.CharField()
    items = PublicMenuItemSerializer(many=True)
