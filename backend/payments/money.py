"""
Monetary precision helpers.

Money is always Decimal, never float. Amounts are kept unrounded while an
order is being built and rounded half-up to the currency's minor unit only
when they are displayed, charged or stored.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# Currency minor unit exponents (how many decimal places)
CURRENCY_EXPONENT = {
    "USD": 2,
    "EUR": 2,
    "GBP": 2,
    "CAD": 2,
    "MXN": 2,
    "JPY": 0,
    "KRW": 0,
}


def currency_exponent(currency: str) -> int:
    """
    Get the number of decimal places for a currency.

    Examples:
        >>> currency_exponent("USD")
        2
        >>> currency_exponent("JPY")
        0
    """
    return CURRENCY_EXPONENT.get(currency.upper(), 2)


def quantize_decimal(currency: str) -> Decimal:
    return Decimal(10) ** -currency_exponent(currency)


def quantize(currency: str, amount: Union[Decimal, str, int, float], rounding=ROUND_HALF_UP) -> Decimal:
    """
    Round to currency decimals, half-up by default (receipt rounding).

    Examples:
        >>> quantize("USD", "7.036250")
        Decimal('7.04')
        >>> quantize("USD", "10.125")
        Decimal('10.13')
    """
    if isinstance(amount, float):
        # Convert float to string first to avoid binary precision artifacts
        amount = str(amount)

    return Decimal(amount).quantize(quantize_decimal(currency), rounding=rounding)
