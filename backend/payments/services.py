import logging
from decimal import Decimal

from django.db import transaction

from .models import Payment
from .money import quantize

logger = logging.getLogger(__name__)


class PaymentService:
    @staticmethod
    @transaction.atomic
    def record_payment(payment_type: str, amount, currency: str = "USD") -> Payment:
        """
        Record a settled payment. The amount is rounded to the currency unit
        before it is stored.
        """
        if payment_type not in Payment.PaymentType.values:
            raise ValueError(f"Unsupported payment type: {payment_type}")

        amount = quantize(currency, Decimal(str(amount)))
        if amount < 0:
            raise ValueError("Payment amount cannot be negative")

        payment = Payment.objects.create(payment_type=payment_type, payment_amount=amount)
        logger.info(f"Recorded payment {payment.id}: {payment_type} {amount}")
        return payment
