from django.core.management.base import BaseCommand, CommandError

from reports.services import CloseReportService, ReportError


class Command(BaseCommand):
    help = "Close a business day by generating its Z report (today by default)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            type=str,
            help="Business date to close, YYYY-MM-DD",
        )

    def handle(self, *args, **options):
        try:
            report, created = CloseReportService.generate_z_report(options.get("date"))
        except ReportError as e:
            raise CommandError(str(e)) from e

        if created:
            self.stdout.write(
                self.style.SUCCESS(
                    f"Z report for {report.business_date}: {report.total_transactions} orders, "
                    f"${report.total_sales} in sales"
                )
            )
        else:
            self.stdout.write(
                self.style.WARNING(f"Z report for {report.business_date} already exists, nothing to do")
            )
