from decimal import Decimal

from rest_framework import serializers

from .models import Payment


class PaymentCreateSerializer(serializers.Serializer):
    paymentType = serializers.ChoiceField(choices=Payment.PaymentType.choices)
    paymentAmount = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.00")
    )


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = ["id", "payment_type", "payment_amount", "payment_time"]
        read_only_fields = fields
