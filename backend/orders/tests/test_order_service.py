"""
Order service tests: checkout in one transaction, line ordering and
duplicate lines.
"""
from decimal import Decimal

import pytest

from orders.models import Order, OrderItem
from orders.services import OrderService, OrderServiceError
from payments.models import Payment


@pytest.mark.django_db
class TestPlaceOrder:
    """Test OrderService.place_order"""

    def test_places_order_with_payment_and_lines(self, menu, cashier_user):
        payload = {
            'line_item_ids': [menu['bowl'].id, menu['chow_mein'].id, menu['orange_chicken'].id],
            'total': Decimal('7.04'),
        }

        order = OrderService.place_order(payload, 'Credit Card', staff=cashier_user)

        assert order.total == Decimal('7.04')
        assert order.staff == cashier_user
        assert order.payment.payment_amount == Decimal('7.04')
        assert order.menu_item_ids == payload['line_item_ids']

    def test_duplicate_items_become_separate_lines(self, menu):
        egg_roll = menu['egg_roll'].id
        order = OrderService.place_order(
            {'line_item_ids': [egg_roll, egg_roll], 'total': Decimal('4.33')}, 'Cash'
        )

        assert order.staff is None
        assert list(order.items.values_list('position', flat=True)) == [1, 2]
        assert order.menu_item_ids == [egg_roll, egg_roll]

    def test_empty_order_rejected(self, db):
        with pytest.raises(OrderServiceError):
            OrderService.place_order({'line_item_ids': [], 'total': Decimal('0')}, 'Cash')
        assert Payment.objects.count() == 0

    def test_unknown_item_rolls_back_payment(self, menu):
        with pytest.raises(OrderServiceError):
            OrderService.place_order({'line_item_ids': [menu['bowl'].id, 9999], 'total': Decimal('1.00')}, 'Cash')

        assert Order.objects.count() == 0
        assert Payment.objects.count() == 0

    def test_bad_payment_type(self, menu):
        with pytest.raises(OrderServiceError):
            OrderService.place_order({'line_item_ids': [menu['bowl'].id], 'total': Decimal('1.00')}, 'Gold')


@pytest.mark.django_db
class TestAddItems:
    """Test OrderService.add_items"""

    def test_appends_after_existing_lines(self, menu):
        order = OrderService.create_order(Decimal('5.00'))
        OrderService.add_items(order, [menu['egg_roll'].id])
        OrderService.add_items(order, [menu['fountain_drink'].id])

        positions = list(OrderItem.objects.filter(order=order).values_list('position', 'menu_item_id'))
        assert positions == [(1, menu['egg_roll'].id), (2, menu['fountain_drink'].id)]

    def test_archived_item_still_accepted(self, menu):
        menu['egg_roll'].archive()
        order = OrderService.create_order(Decimal('2.17'))

        items = OrderService.add_items(order, [menu['egg_roll'].id])
        assert len(items) == 1

    def test_negative_total_rejected(self, db):
        with pytest.raises(OrderServiceError):
            OrderService.create_order(Decimal('-1'))
