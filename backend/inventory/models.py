from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class InventoryItem(models.Model):
    """
    Non-food stock kept at the store: cups, napkins, bags, containers.
    """

    item_name = models.CharField(max_length=200, db_index=True)
    quantity = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text=_("Units on hand."),
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.item_name} ({self.quantity})"
