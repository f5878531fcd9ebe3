from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class ZReport(models.Model):
    """
    End-of-day close for one business date. Generated at most once per date;
    later requests for the same date get the stored figures back.
    """

    business_date = models.DateField(unique=True)
    total_transactions = models.PositiveIntegerField(default=0)
    total_sales = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    employee_breakdown = models.JSONField(
        default=list,
        help_text=_("Per-employee transactions and sales, highest sales first."),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-business_date"]
        verbose_name = "Z Report"
        verbose_name_plural = "Z Reports"

    def __str__(self):
        return f"Z Report {self.business_date}"
