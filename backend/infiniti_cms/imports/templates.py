"""
Sample import workbooks, one per import kind.
"""

import io
import logging

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation

from infiniti_cms.imports.registry import get_handler

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E78"
TEMPLATE_ROWS = 500

# Dropdowns offered on enum-like columns
CHOICES = {
    "industry": ("airlines", "travel_agency", "gds", "ota", "aviation_services"),
    "serviceType": ("implementation", "cr", "subscription", "hosting", "others"),
    "billingCycle": ("one-time", "monthly", "quarterly", "semi-annual", "annual"),
    "currency": ("INR", "USD", "EUR"),
    "role": ("admin", "csm", "finance", "viewer"),
    "isRecurring": ("true", "false"),
    "autoRenewal": ("true", "false"),
}

STATUS_CHOICES = {
    "clients": ("active", "inactive"),
    "services": ("pending", "paid"),
    "agreements": ("active", "inactive"),
    "users": ("active", "inactive", "pending"),
    "cr_invoices": ("initiated", "pending", "approved"),
}


def template_filename(kind) -> str:
    return f"{get_handler(kind).kind.value}_import_template.xlsx"


def build_template(kind) -> io.BytesIO:
    """Workbook with the expected header row and example rows for a kind."""
    handler = get_handler(kind)

    wb = Workbook()
    ws = wb.active
    ws.title = handler.kind.value

    ws.append(list(handler.columns))
    for values in handler.sample_rows:
        ws.append(list(values))

    for position, column in enumerate(handler.columns, start=1):
        cell = ws.cell(row=1, column=position)
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type="solid")
        cell.alignment = Alignment(horizontal="center", vertical="center")
        ws.column_dimensions[get_column_letter(position)].width = max(14, len(column) + 4)

        choices = CHOICES.get(column)
        if column == "status":
            choices = STATUS_CHOICES[handler.kind.value]
        if choices:
            letter = get_column_letter(position)
            dv = DataValidation(type="list", formula1=f'"{",".join(choices)}"', allow_blank=True)
            ws.add_data_validation(dv)
            dv.add(f"{letter}2:{letter}{TEMPLATE_ROWS}")

    ws.freeze_panes = "A2"

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)

    logger.info(f"Built {handler.kind.value} import template")
    return output
