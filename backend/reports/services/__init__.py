from .base import BaseReportService, ReportError
from .close_service import CloseReportService
from .export_service import ExportService
from .sales_service import SalesReportService

__all__ = [
    "BaseReportService",
    "ReportError",
    "CloseReportService",
    "ExportService",
    "SalesReportService",
]
