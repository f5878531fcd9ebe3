from decimal import Decimal

import pytest

from orders.models import Order
from orders.services import OrderService
from payments.models import Payment


@pytest.fixture
def place_order():
    """
    Check out an order and backdate it, payment included.

    Usage:
        place_order([item.id], '7.04', when=some_datetime, staff=cashier_user)
    """
    def _place(item_ids, total, when, staff=None, payment_type='Credit Card'):
        order = OrderService.place_order(
            {'line_item_ids': item_ids, 'total': Decimal(total)}, payment_type, staff=staff
        )
        Order.objects.filter(pk=order.pk).update(time=when)
        Payment.objects.filter(pk=order.payment_id).update(payment_time=when)
        order.refresh_from_db()
        return order

    return _place
