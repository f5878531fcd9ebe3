"""
Sales-side reports: item sales over a range, busiest trading days and
inventory usage.
"""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from django.db.models import Count, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from inventory.models import InventoryItem
from menu.models import MenuItem
from orders.models import OrderItem
from .base import BaseReportService, ReportError

logger = logging.getLogger(__name__)


class SalesReportService(BaseReportService):
    """Service for generating sales, busiest-day and inventory reports."""

    BUSIEST_PERIODS = (
        ("week", 7),
        ("month", 30),
        ("year", 365),
    )

    @staticmethod
    def generate_sales_report(start, end) -> Dict[str, Any]:
        """
        Sales generated and quantity sold per menu item with an order placed
        between ``start`` and ``end`` (inclusive). Combo anchors carry no
        price of their own and are left out. Highest sales first.
        """
        start_dt = SalesReportService.parse_bound(start, "from")
        end_dt = SalesReportService.parse_bound(end, "to", end=True)
        if start_dt > end_dt:
            raise ReportError("Invalid date range parameters: from is after to")

        logger.info(f"Generating sales report for {start_dt.isoformat()} to {end_dt.isoformat()}")

        rows = (
            OrderItem.objects.filter(order__time__range=(start_dt, end_dt))
            .exclude(menu_item__item_type=MenuItem.Category.COMBOS)
            .values("menu_item_id", "menu_item__name")
            .annotate(sales_generated=Sum("menu_item__price"), quantity_sold=Count("id"))
            .order_by("-sales_generated", "menu_item_id")
        )

        items = [
            {
                "menu_item_id": row["menu_item_id"],
                "name": row["menu_item__name"],
                "sales_generated": SalesReportService.money(row["sales_generated"]),
                "quantity_sold": row["quantity_sold"],
            }
            for row in rows
        ]
        return {
            "date_range": {"start": start_dt.isoformat(), "end": end_dt.isoformat()},
            "items": items,
        }

    @staticmethod
    def busiest_days(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """
        For the trailing week, month and year, the calendar day with the
        highest menu-item sales, or a placeholder when nothing sold.
        """
        now = now or timezone.now()
        results = []

        for period, days in SalesReportService.BUSIEST_PERIODS:
            top = (
                OrderItem.objects.filter(order__time__range=(now - timedelta(days=days), now))
                .annotate(day=TruncDate("order__time"))
                .values("day")
                .annotate(total_sales=Sum("menu_item__price"))
                .order_by("-total_sales", "-day")
                .first()
            )

            if top is None:
                results.append({"period": period, "date": "N/A", "day": "No data", "total_sales": 0})
                continue

            results.append(
                {
                    "period": period,
                    "date": top["day"].isoformat(),
                    "day": top["day"].strftime("%A"),
                    "total_sales": float(top["total_sales"]),
                }
            )
        return results

    @staticmethod
    def inventory_usage() -> List[Dict[str, Any]]:
        """Quantity per inventory item name, alphabetical."""
        rows = (
            InventoryItem.objects.values("item_name")
            .annotate(total_used=Sum("quantity"))
            .order_by("item_name")
        )
        return [
            {"inventory_name": row["item_name"], "total_used": row["total_used"]}
            for row in rows
        ]
