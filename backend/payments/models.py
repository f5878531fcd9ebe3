from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Payment(models.Model):
    """
    A settled payment. Card processing happens on the terminal hardware;
    this row records what was charged and how.
    """

    class PaymentType(models.TextChoices):
        CREDIT_CARD = "Credit Card", _("Credit Card")
        TAMU_ID = "TAMU_ID", _("TAMU ID (Dining Dollars)")
        CASH = "Cash", _("Cash")

    payment_type = models.CharField(
        max_length=30, choices=PaymentType.choices, db_index=True
    )
    payment_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    payment_time = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["payment_time"]

    def __str__(self):
        return f"Payment {self.id}: {self.payment_type} {self.payment_amount}"
