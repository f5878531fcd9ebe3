from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from decimal import Decimal

from core_backend.utils.archiving import SoftDeleteMixin


class MenuItem(SoftDeleteMixin):
    """
    Something a customer can buy. Archived items are "Unavailable": they stay
    referenced by past orders but disappear from the kiosk and menu boards.
    """

    class Category(models.TextChoices):
        COMBOS = "Combos", _("Combos")
        SIDE = "Side", _("Side")
        ENTREE = "Entree", _("Entree")
        APPETIZER = "Appetizer", _("Appetizer")
        DRINK = "Drink", _("Drink")

    class ComboType(models.TextChoices):
        BOWL = "BOWL", _("Bowl")
        PLATE = "PLATE", _("Plate")
        BIGGER_PLATE = "BIGGER_PLATE", _("Bigger Plate")

    # Display order on the kiosk tabs and menu boards.
    CATEGORY_ORDER = [
        Category.COMBOS,
        Category.SIDE,
        Category.ENTREE,
        Category.APPETIZER,
        Category.DRINK,
    ]

    name = models.CharField(max_length=200, help_text=_("Name shown to customers."))
    item_type = models.CharField(
        max_length=20,
        choices=Category.choices,
        db_index=True,
        help_text=_("Menu category the item is listed under."),
    )
    combo_type = models.CharField(
        max_length=20,
        choices=ComboType.choices,
        blank=True,
        default="",
        help_text=_("Set on combo anchors (Bowl, Plate, Bigger Plate) only."),
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("The selling price of the item."),
    )
    description = models.TextField(blank=True)
    image = models.CharField(
        max_length=255, blank=True, help_text=_("Image path or URL for the kiosk card.")
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name

    @classmethod
    def combo_type_for_name(cls, name):
        """Map an anchor's display name ("Bigger Plate") to its ComboType."""
        normalized = " ".join(str(name or "").split()).lower()
        for value, label in cls.ComboType.choices:
            if normalized == str(label).lower():
                return value
        return ""

    def save(self, *args, **kwargs):
        # Anchors are tagged when written so nothing downstream matches on names.
        if self.item_type == self.Category.COMBOS:
            if not self.combo_type:
                self.combo_type = self.combo_type_for_name(self.name)
        else:
            self.combo_type = ""
        super().save(*args, **kwargs)

    @property
    def availability(self):
        return "Available" if self.is_active else "Unavailable"
