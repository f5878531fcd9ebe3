"""
Export service for report downloads. Supports CSV, Excel (XLSX) and PDF for
every report: each list of rows becomes a table section and each scalar or
small mapping becomes label/value lines.
"""
import csv
import io
import logging
import re
from decimal import Decimal
from typing import Any, Dict, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .base import BaseReportService

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, Decimal)


def _label(key: str) -> str:
    # snake_case and camelCase keys both read as "Total Sales"
    return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", key).replace("_", " ").title()


class ExportService(BaseReportService):
    """Service for exporting reports to various formats."""

    FORMATS = {
        "csv": ("text/csv", "csv"),
        "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"),
        "pdf": ("application/pdf", "pdf"),
    }

    @classmethod
    def export(cls, report_data: Dict[str, Any], report_type: str, format_type: str) -> bytes:
        if format_type == "csv":
            return cls.export_to_csv(report_data, report_type)
        if format_type == "xlsx":
            return cls.export_to_xlsx(report_data, report_type)
        if format_type == "pdf":
            return cls.export_to_pdf(report_data, report_type)
        raise ValueError(f"Unsupported export format: {format_type}")

    @classmethod
    def export_to_csv(cls, report_data: Dict[str, Any], report_type: str) -> bytes:
        """
        Export report data to CSV format.

        Args:
            report_data: The report data to export
            report_type: Type of report (sales, x, z)

        Returns:
            CSV file content as bytes
        """
        output = io.StringIO()
        writer = csv.writer(output)

        try:
            writer.writerow([cls.report_title(report_type)])
            writer.writerow([])

            for key, value in report_data.items():
                if isinstance(value, list):
                    writer.writerow([_label(key)])
                    if value and isinstance(value[0], dict):
                        headers = list(value[0].keys())
                        writer.writerow([_label(h) for h in headers])
                        for item in value:
                            writer.writerow([item.get(h, "") for h in headers])
                    else:
                        for item in value:
                            writer.writerow([str(item)])
                    writer.writerow([])
                elif isinstance(value, dict):
                    for sub_key, sub_value in value.items():
                        writer.writerow([_label(sub_key), str(sub_value)])
                elif isinstance(value, SCALAR_TYPES):
                    writer.writerow([_label(key), str(value)])

            return output.getvalue().encode("utf-8")

        except Exception as e:
            logger.error(f"CSV export failed for {report_type}: {e}")
            raise
        finally:
            output.close()

    @classmethod
    def export_to_xlsx(cls, report_data: Dict[str, Any], report_type: str) -> bytes:
        """
        Export report data to Excel format.

        Returns:
            Excel file content as bytes
        """
        wb = Workbook()
        ws = wb.active
        ws.title = cls.report_title(report_type)[:31]

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="500000", end_color="500000", fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")

        try:
            row = 1
            ws.cell(row=row, column=1, value=cls.report_title(report_type)).font = Font(bold=True, size=14)
            row += 2

            for key, value in report_data.items():
                if isinstance(value, list):
                    ws.cell(row=row, column=1, value=_label(key)).font = Font(bold=True, size=12)
                    row += 1

                    if value and isinstance(value[0], dict):
                        headers = list(value[0].keys())
                        for col, header in enumerate(headers, 1):
                            cell = ws.cell(row=row, column=col, value=_label(header))
                            cell.font = header_font
                            cell.fill = header_fill
                            cell.alignment = header_alignment
                        row += 1

                        for item in value:
                            for col, header in enumerate(headers, 1):
                                ws.cell(row=row, column=col, value=cls._cell_value(item.get(header, "")))
                            row += 1
                    row += 1
                elif isinstance(value, dict):
                    for sub_key, sub_value in value.items():
                        ws.cell(row=row, column=1, value=_label(sub_key))
                        ws.cell(row=row, column=2, value=str(sub_value))
                        row += 1
                elif isinstance(value, SCALAR_TYPES):
                    ws.cell(row=row, column=1, value=_label(key))
                    ws.cell(row=row, column=2, value=str(value))
                    row += 1

            for column in ws.columns:
                column_letter = get_column_letter(column[0].column)
                max_length = max(
                    (len(str(cell.value)) for cell in column if cell.value is not None), default=0
                )
                ws.column_dimensions[column_letter].width = min(max_length + 2, 50)

            output = io.BytesIO()
            wb.save(output)
            return output.getvalue()

        except Exception as e:
            logger.error(f"Excel export failed for {report_type}: {e}")
            raise

    @classmethod
    def export_to_pdf(
        cls,
        report_data: Dict[str, Any],
        report_type: str,
        title: Optional[str] = None,
        page_size=letter,
    ) -> bytes:
        """
        Export report data to PDF format.

        Args:
            report_data: The report data to export
            report_type: Type of report (sales, x, z)
            title: Optional custom title for the report
            page_size: Page size for the PDF (default: letter)

        Returns:
            PDF file content as bytes
        """
        output = io.BytesIO()
        doc = SimpleDocTemplate(
            output,
            pagesize=page_size,
            leftMargin=0.75 * inch,
            rightMargin=0.75 * inch,
            topMargin=0.75 * inch,
            bottomMargin=0.75 * inch,
        )

        story = []
        styles = getSampleStyleSheet()
        styles.add(
            ParagraphStyle(
                name="CustomTitle",
                parent=styles["Title"],
                alignment=TA_CENTER,
                fontSize=16,
                spaceAfter=30,
            )
        )
        story.append(Paragraph(title or cls.report_title(report_type), styles["CustomTitle"]))

        if "date_range" in report_data:
            date_range = report_data["date_range"]
            story.append(
                Paragraph(
                    f"Period: {date_range.get('start', 'N/A')} to {date_range.get('end', 'N/A')}",
                    styles["Normal"],
                )
            )
            story.append(Spacer(1, 0.2 * inch))

        try:
            for key, value in report_data.items():
                if key == "date_range":
                    continue
                if isinstance(value, list):
                    story.append(Paragraph(_label(key), styles["Heading2"]))
                    if value and isinstance(value[0], dict):
                        story.append(cls._pdf_table(value))
                    else:
                        story.append(Paragraph("No data", styles["Normal"]))
                    story.append(Spacer(1, 0.2 * inch))
                elif isinstance(value, dict):
                    for sub_key, sub_value in value.items():
                        story.append(Paragraph(f"<b>{_label(sub_key)}:</b> {sub_value}", styles["Normal"]))
                    story.append(Spacer(1, 0.1 * inch))
                elif isinstance(value, SCALAR_TYPES):
                    story.append(Paragraph(f"<b>{_label(key)}:</b> {value}", styles["Normal"]))
                    story.append(Spacer(1, 0.1 * inch))

            doc.build(story)
            return output.getvalue()

        except Exception as e:
            logger.error(f"PDF export failed for {report_type}: {e}")
            raise
        finally:
            output.close()

    @staticmethod
    def report_title(report_type: str) -> str:
        titles = {"sales": "Sales Report", "x": "X Report", "z": "Z Report"}
        return titles.get(report_type, f"{report_type.capitalize()} Report")

    @staticmethod
    def _cell_value(value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        return str(value)

    @staticmethod
    def _pdf_table(rows):
        headers = list(rows[0].keys())
        table_data = [[_label(h) for h in headers]]
        for item in rows:
            table_data.append([str(item.get(h, "")) for h in headers])

        table = Table(table_data, repeatRows=1)
        table.setStyle(
            TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("ALIGN", (0, 0), (-1, -1), "CENTER"),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 10),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 12),
                ("BACKGROUND", (0, 1), (-1, -1), colors.beige),
                ("GRID", (0, 0), (-1, -1), 1, colors.black),
            ])
        )
        return table
