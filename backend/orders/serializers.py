from decimal import Decimal

from rest_framework import serializers

from .models import Order


class OrderSerializer(serializers.ModelSerializer):
    staff_id = serializers.IntegerField(read_only=True, allow_null=True)
    payment_id = serializers.IntegerField(read_only=True, allow_null=True)
    staff_name = serializers.CharField(source="staff.name", read_only=True, default=None)
    payment_type = serializers.CharField(source="payment.payment_type", read_only=True, default=None)
    menu_item_ids = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "total",
            "time",
            "staff_id",
            "staff_name",
            "payment_id",
            "payment_type",
            "menu_item_ids",
        ]
        read_only_fields = fields

    def get_menu_item_ids(self, obj):
        return [item.menu_item_id for item in obj.items.all()]


class OrderCreateSerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.00"))
    staffId = serializers.IntegerField(required=False, allow_null=True)
    paymentId = serializers.IntegerField(required=False, allow_null=True)


class OrderItemsSerializer(serializers.Serializer):
    menuItemIds = serializers.ListField(
        child=serializers.IntegerField(min_value=1), allow_empty=False
    )
