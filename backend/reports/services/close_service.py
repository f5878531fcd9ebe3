"""
Register close-out reports. The X report is a read-only snapshot of one day
taken as often as wanted; the Z report closes the day and is stored once.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from django.db import transaction
from django.db.models import Count, Q, Sum
from django.db.models.functions import ExtractHour
from django.utils import timezone

from orders.models import Order
from payments.models import Payment
from users.models import User
from ..models import ZReport
from .base import BaseReportService

logger = logging.getLogger(__name__)


class CloseReportService(BaseReportService):
    """Service for X (hourly snapshot) and Z (end of day) reports."""

    @staticmethod
    def generate_x_report(business_date) -> List[Dict[str, Any]]:
        """
        Hourly payments for one day: transaction count, total, TAMU ID and
        credit card takings. Every hour between the first and the last hour
        with a payment is listed; quiet hours in between are zero-filled.
        """
        day = CloseReportService.parse_business_date(business_date)
        logger.info(f"Generating X report for {day.isoformat()}")

        rows = (
            Payment.objects.filter(payment_time__date=day)
            .annotate(hour=ExtractHour("payment_time"))
            .values("hour")
            .annotate(
                total_transactions=Count("id"),
                total_sales=Sum("payment_amount"),
                tamu_id_sales=Sum(
                    "payment_amount", filter=Q(payment_type=Payment.PaymentType.TAMU_ID)
                ),
                credit_card_sales=Sum(
                    "payment_amount", filter=Q(payment_type=Payment.PaymentType.CREDIT_CARD)
                ),
            )
            .order_by("hour")
        )
        by_hour = {row["hour"]: row for row in rows}
        if not by_hour:
            return []

        report = []
        for hour in range(min(by_hour), max(by_hour) + 1):
            row = by_hour.get(hour, {})
            report.append(
                {
                    "hour": f"{hour}:00",
                    "total_transactions": row.get("total_transactions", 0),
                    "total_sales": CloseReportService.money(row.get("total_sales")),
                    "tamu_id_sales": CloseReportService.money(row.get("tamu_id_sales")),
                    "credit_card_sales": CloseReportService.money(row.get("credit_card_sales")),
                }
            )
        return report

    @staticmethod
    def _employee_breakdown(day: date) -> List[Dict[str, Any]]:
        on_day = Q(orders__time__date=day)
        staff = (
            User.objects.with_archived()
            .annotate(
                total_transactions=Count("orders", filter=on_day),
                total_sales=Sum("orders__total", filter=on_day),
            )
            .values("id", "name", "total_transactions", "total_sales")
        )
        breakdown = [
            {
                "staff_id": member["id"],
                "employee_name": member["name"],
                "total_transactions": member["total_transactions"],
                "total_sales": CloseReportService.money(member["total_sales"]),
            }
            for member in staff
        ]
        breakdown.sort(key=lambda entry: (-Decimal(entry["total_sales"]), entry["employee_name"]))
        return breakdown

    @staticmethod
    def _daily_totals(day: date) -> Tuple[int, Decimal]:
        totals = Order.objects.filter(time__date=day).aggregate(
            count=Count("id"), sales=Sum("total")
        )
        return totals["count"], totals["sales"] or Decimal("0.00")

    @staticmethod
    @transaction.atomic
    def generate_z_report(business_date=None) -> Tuple[ZReport, bool]:
        """
        Close the given day (today by default). The first call stores the
        figures; any later call for the same date returns the stored report
        untouched. Returns ``(report, created)``.
        """
        day = (
            CloseReportService.parse_business_date(business_date)
            if business_date not in (None, "")
            else timezone.localdate()
        )

        existing = ZReport.objects.filter(business_date=day).first()
        if existing is not None:
            logger.info(f"Z report for {day.isoformat()} already exists (id={existing.id})")
            return existing, False

        count, sales = CloseReportService._daily_totals(day)
        report, created = ZReport.objects.get_or_create(
            business_date=day,
            defaults={
                "total_transactions": count,
                "total_sales": sales,
                "employee_breakdown": CloseReportService._employee_breakdown(day),
            },
        )
        if created:
            logger.info(f"Generated Z report for {day.isoformat()}: {count} orders, {sales} in sales")
        return report, created

    @staticmethod
    def serialize_z_report(report: ZReport, created: Optional[bool] = None) -> Dict[str, Any]:
        data = {
            "id": report.id,
            "business_date": report.business_date.isoformat(),
            "created_at": report.created_at.isoformat(),
            "report": report.employee_breakdown,
            "totals": {
                "totalTransactions": report.total_transactions,
                "totalSales": CloseReportService.money(report.total_sales),
            },
        }
        if created is not None:
            data["created"] = created
        return data
