from rest_framework import serializers

from menu.models import MenuItem
from payments.models import Payment
from .calculators import PriceCalculator


class OrderLineSerializer(serializers.Serializer):
    sequence = serializers.IntegerField()
    item_id = serializers.IntegerField()
    name = serializers.CharField()
    category = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    kind = serializers.CharField(source="kind.value")
    combo_type = serializers.CharField(allow_null=True)


class OrderStateSerializer(serializers.Serializer):
    """Read-only view of an OrderState with its derived prices."""

    lines = serializers.SerializerMethodField()
    active_combo = serializers.CharField(allow_null=True)
    side_count = serializers.IntegerField()
    entree_count = serializers.IntegerField()
    combo_progress = serializers.SerializerMethodField()

    def get_lines(self, state):
        lines = []
        for position, line in enumerate(state.lines):
            data = OrderLineSerializer(line).data
            data["position"] = position
            lines.append(data)
        return lines

    def get_combo_progress(self, state):
        return state.combo_progress()

    def to_representation(self, state):
        data = super().to_representation(state)
        totals = PriceCalculator(state).calculate_totals()
        data.update({key: str(value) for key, value in totals.items()})
        return data


class AddItemSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField(min_value=1)
    category = serializers.ChoiceField(choices=MenuItem.Category.choices, required=False)


class RemoveItemSerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=MenuItem.Category.choices, required=False)


class CheckoutSerializer(serializers.Serializer):
    payment_type = serializers.ChoiceField(choices=Payment.PaymentType.choices)
