import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsManagerOrHigher
from .models import ZReport
from .services import CloseReportService, ExportService, ReportError, SalesReportService

logger = logging.getLogger(__name__)


class ReportAPIView(APIView):
    """
    Manager-only report endpoint. ``?format=csv|xlsx|pdf`` turns the report
    into a file download instead of JSON.
    """

    permission_classes = [IsManagerOrHigher]
    report_type = None

    def perform_content_negotiation(self, request, force=False):
        # ``format`` doubles as DRF's renderer override; export formats are ours.
        if self.export_format(request):
            force = True
        return super().perform_content_negotiation(request, force=force)

    @staticmethod
    def export_format(request):
        format_type = (request.query_params.get("format") or "").lower()
        return format_type if format_type in ExportService.FORMATS else None

    def render_report(self, request, report_data, status_code=status.HTTP_200_OK):
        format_type = self.export_format(request)
        if format_type is None:
            return Response(report_data, status=status_code)

        file_data = ExportService.export(report_data, self.report_type, format_type)
        content_type, extension = ExportService.FORMATS[format_type]
        filename = f"{self.report_type}_report_{timezone.localdate():%Y%m%d}.{extension}"
        response = HttpResponse(file_data, content_type=content_type, status=status_code)
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response

    @staticmethod
    def bad_request(error):
        return Response({"success": False, "message": str(error)}, status=status.HTTP_400_BAD_REQUEST)


class SalesReportView(ReportAPIView):
    """GET ?from=&to=: sales generated and quantity sold per menu item."""

    report_type = "sales"

    def get(self, request):
        try:
            report = SalesReportService.generate_sales_report(
                request.query_params.get("from"), request.query_params.get("to")
            )
        except ReportError as e:
            return self.bad_request(e)
        return self.render_report(request, {"success": True, **report})


class XReportView(ReportAPIView):
    """POST {date}: hourly payment snapshot for one day."""

    report_type = "x"

    def post(self, request):
        try:
            day = CloseReportService.parse_business_date(request.data.get("date"))
            report = CloseReportService.generate_x_report(day)
        except ReportError as e:
            return self.bad_request(e)
        return self.render_report(
            request, {"success": True, "date": day.isoformat(), "report": report}
        )


class ZReportView(ReportAPIView):
    """
    GET: stored Z reports, newest first.
    POST {date?}: close the day (today by default). Closing an already
    closed day returns the stored report with ``created: false``.
    """

    report_type = "z"

    def get(self, request):
        reports = [CloseReportService.serialize_z_report(report) for report in ZReport.objects.all()]
        return Response({"success": True, "reports": reports})

    def post(self, request):
        try:
            report, created = CloseReportService.generate_z_report(request.data.get("date"))
        except ReportError as e:
            return self.bad_request(e)

        data = {"success": True, **CloseReportService.serialize_z_report(report, created=created)}
        return self.render_report(
            request, data, status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )


class InventoryUsageView(ReportAPIView):
    report_type = "inventory"

    def get(self, request):
        return self.render_report(request, {"success": True, "data": SalesReportService.inventory_usage()})


class BusiestDaysView(ReportAPIView):
    """GET: best trading day over the last week, month and year."""

    report_type = "busiest"

    def get(self, request):
        return self.render_report(request, {"success": True, "data": SalesReportService.busiest_days()})
