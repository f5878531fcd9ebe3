"""
Price calculator for the in-progress kiosk order.

The order keeps its subtotal unrounded; tax and total are derived from it
and rounded half-up to the currency unit only when they are read, so
repeated adds and removes never accumulate rounding error.
"""

from decimal import Decimal
from typing import Dict, Optional

from django.conf import settings

from payments.money import quantize


def get_tax_rate() -> Decimal:
    """Sales tax rate applied at the kiosk, read per call so tests can override it."""
    return Decimal(str(getattr(settings, "KIOSK_TAX_RATE", "0.0825")))


def get_currency() -> str:
    return getattr(settings, "KIOSK_CURRENCY", "USD")


class PriceCalculator:
    def __init__(self, state, tax_rate: Optional[Decimal] = None, currency: Optional[str] = None):
        self.state = state
        self.tax_rate = Decimal(str(tax_rate)) if tax_rate is not None else get_tax_rate()
        self.currency = currency or get_currency()

    def subtotal(self) -> Decimal:
        """The order's running subtotal, verbatim."""
        return self.state.subtotal

    def tax(self) -> Decimal:
        return quantize(self.currency, self.subtotal() * self.tax_rate)

    def total(self) -> Decimal:
        """
        Subtotal grossed up by the tax rate, rounded once. This is not
        ``subtotal + tax()``: rounding happens a single time on the product.
        """
        return quantize(self.currency, self.subtotal() * (Decimal("1") + self.tax_rate))

    def calculate_totals(self) -> Dict[str, Decimal]:
        return {
            "subtotal": quantize(self.currency, self.subtotal()),
            "tax": self.tax(),
            "total": self.total(),
        }
