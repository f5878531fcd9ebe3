from decimal import Decimal
from typing import Iterable, List, Optional
import logging

from django.db import transaction
from django.db.models import Max

from menu.models import MenuItem
from orders.models import Order, OrderItem
from payments.models import Payment
from payments.services import PaymentService
from users.models import User

logger = logging.getLogger(__name__)


class OrderServiceError(Exception):
    """Raised when an order cannot be placed or amended."""


class OrderService:
    """Persisting checked-out orders: payment, order row and line items."""

    @staticmethod
    @transaction.atomic
    def create_order(total, staff: Optional[User] = None, payment: Optional[Payment] = None) -> Order:
        total = Decimal(str(total))
        if total < 0:
            raise OrderServiceError("Order total cannot be negative")
        order = Order.objects.create(total=total, staff=staff, payment=payment)
        logger.info(f"Created order {order.id} (total={total}, staff={staff.id if staff else None})")
        return order

    @staticmethod
    @transaction.atomic
    def add_items(order: Order, menu_item_ids: Iterable[int]) -> List[OrderItem]:
        """
        Attach menu items to an order in the given sequence, after any lines
        it already has. Duplicated ids produce duplicated lines.
        """
        menu_item_ids = [int(item_id) for item_id in menu_item_ids]
        if not menu_item_ids:
            raise OrderServiceError("No menu items supplied")

        # Items taken off sale after being added to an order still belong to it.
        known = set(
            MenuItem.objects.with_archived()
            .filter(pk__in=set(menu_item_ids))
            .values_list("pk", flat=True)
        )
        missing = sorted(set(menu_item_ids) - known)
        if missing:
            raise OrderServiceError(f"Unknown menu items: {missing}")

        start = (order.items.aggregate(last=Max("position"))["last"] or 0) + 1
        items = OrderItem.objects.bulk_create(
            OrderItem(order=order, menu_item_id=item_id, position=start + offset)
            for offset, item_id in enumerate(menu_item_ids)
        )
        logger.info(f"Added {len(items)} items to order {order.id}")
        return items

    @staticmethod
    @transaction.atomic
    def place_order(payload: dict, payment_type: str, staff: Optional[User] = None) -> Order:
        """
        Check out a kiosk or cashier order in one transaction.

        ``payload`` is ``{"line_item_ids": [...], "total": Decimal}``; the
        total is charged as-is.
        """
        line_item_ids = list(payload.get("line_item_ids") or [])
        if not line_item_ids:
            raise OrderServiceError("Cannot place an empty order")

        try:
            payment = PaymentService.record_payment(payment_type, payload["total"])
        except ValueError as e:
            raise OrderServiceError(str(e)) from e

        order = OrderService.create_order(payload["total"], staff=staff, payment=payment)
        OrderService.add_items(order, line_item_ids)
        logger.info(
            f"Placed order {order.id}: {len(line_item_ids)} items, {payment_type} {payment.payment_amount}"
        )
        return order
