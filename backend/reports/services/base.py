"""
Shared helpers for report services: date parsing and number formatting.
"""
import logging
from datetime import date, datetime, time
from typing import Optional, Union

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from payments.money import quantize

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Raised when report parameters are missing or malformed."""


class BaseReportService:
    """Base class for all report services with common functionality."""

    @staticmethod
    def parse_business_date(value: Union[str, date, None], field: str = "date") -> date:
        """
        Accept a date, a datetime or an ISO string of either; datetimes are
        reduced to their local calendar date.
        """
        if value in (None, ""):
            raise ReportError(f"Missing {field}")
        if isinstance(value, datetime):
            return timezone.localdate(value) if timezone.is_aware(value) else value.date()
        if isinstance(value, date):
            return value

        text = str(value).strip()
        try:
            parsed = parse_datetime(text)
            if parsed is not None:
                return BaseReportService.parse_business_date(parsed, field)
            parsed_date = parse_date(text)
        except ValueError:
            parsed_date = None
        if parsed_date is None:
            raise ReportError(f"Invalid {field}: {value}")
        return parsed_date

    @staticmethod
    def parse_bound(value: Union[str, datetime, None], field: str, end: bool = False) -> datetime:
        """
        Turn a range bound into an aware datetime. A bare date covers the whole
        day: midnight for the lower bound, the last instant for the upper one.
        """
        if value in (None, ""):
            raise ReportError("Missing date range parameters")

        parsed: Optional[datetime]
        if isinstance(value, datetime):
            parsed = value
        else:
            text = str(value).strip()
            try:
                # A bare date must be read as a date; parse_datetime would
                # accept it as midnight.
                day = parse_date(text)
                if day is not None:
                    parsed = datetime.combine(day, time.max if end else time.min)
                else:
                    parsed = parse_datetime(text)
            except ValueError:
                parsed = None
        if parsed is None:
            raise ReportError(f"Invalid date range parameters: {field}={value}")

        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed)
        return parsed

    @staticmethod
    def money(amount) -> str:
        """Two-place string for a possibly-null aggregate."""
        return f"{quantize('USD', amount or 0):.2f}"
