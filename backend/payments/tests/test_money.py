"""
Money helper tests: currency precision and half-up receipt rounding.
"""
from decimal import Decimal

import pytest

from payments.money import currency_exponent, quantize


class TestQuantize:
    @pytest.mark.parametrize('amount,expected', [
        ('7.036250', Decimal('7.04')),
        ('0.53625', Decimal('0.54')),
        ('10.125', Decimal('10.13')),
        ('10.124', Decimal('10.12')),
        (3, Decimal('3.00')),
    ])
    def test_half_up_to_cents(self, amount, expected):
        assert quantize('USD', amount) == expected

    def test_float_input_uses_its_decimal_text(self):
        assert quantize('USD', 2.675) == Decimal('2.68')

    def test_zero_decimal_currency(self):
        assert quantize('JPY', '1234.5') == Decimal('1235')


class TestCurrencyExponent:
    def test_cents_currencies(self):
        assert currency_exponent('usd') == 2

    def test_unknown_currency_defaults_to_cents(self):
        assert currency_exponent('CHF') == 2

    def test_zero_decimal_currency(self):
        assert currency_exponent('KRW') == 0
