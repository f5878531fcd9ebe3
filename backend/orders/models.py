from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Order(models.Model):
    """
    A checked-out order. ``staff`` is the cashier who rang it up; kiosk
    orders have none.
    """

    total = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Amount charged, tax included."),
    )
    time = models.DateTimeField(default=timezone.now, db_index=True)
    staff = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )
    payment = models.ForeignKey(
        "payments.Payment",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="orders",
    )

    class Meta:
        ordering = ["time"]

    def __str__(self):
        return f"Order {self.id}"

    @property
    def menu_item_ids(self):
        return [item.menu_item_id for item in self.items.all()]


class OrderItem(models.Model):
    """
    One line of an order. Buying the same item twice gives two rows;
    ``position`` keeps the order the lines were added in.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey(
        "menu.MenuItem", on_delete=models.PROTECT, related_name="order_items"
    )
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["order", "position"]
        constraints = [
            models.UniqueConstraint(fields=["order", "position"], name="unique_order_line_position"),
        ]

    def __str__(self):
        return f"{self.order_id}#{self.position}: {self.menu_item_id}"
