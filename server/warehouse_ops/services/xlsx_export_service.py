"""
XLSX Export Service.

Generates XLSX files for:
- The consolidated material table (all sources or one source)
- The bulking serial list (union of all valid serial rows)
- Per-DN serial lists, one sheet per uploaded source ("All DN")
- A single DN serial list

Uses openpyxl for XLSX generation with styled headers.
"""

from __future__ import annotations

import logging
import re
from io import BytesIO
from typing import Iterable, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from warehouse_ops.models.records import AggregateRow, SerialRecord, Source
from warehouse_ops.services.consolidation_aggregator import serials_for

logger = logging.getLogger(__name__)

# Styling constants
TABLE_HEADER_FILL = PatternFill(start_color="D9E2F3", end_color="D9E2F3", fill_type="solid")
TABLE_HEADER_FONT = Font(bold=True, size=10, color="1F4E79")
THIN_BORDER = Border(
    left=Side(style="thin", color="CCCCCC"),
    right=Side(style="thin", color="CCCCCC"),
    top=Side(style="thin", color="CCCCCC"),
    bottom=Side(style="thin", color="CCCCCC"),
)

CONSOLIDATED_HEADERS = [
    "Material Code", "Material Description", "Category", "Qty.", "UM", "ShipName", "Remarks",
]
CONSOLIDATED_WIDTHS = [16, 40, 22, 8, 6, 30, 18]

SERIAL_HEADERS = [
    "DN No", "Location", "Bin Code", "Material Code", "Material Desc",
    "Barcode", "Ship To Name", "Ship To Address",
]
SERIAL_WIDTHS = [16, 12, 12, 16, 40, 24, 30, 40]

# Unit of measure is not tracked per line
UNIT_PLACEHOLDER = "-"

MAX_SHEET_TITLE = 31
_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")


def _set_column_widths(ws, widths: list[int]) -> None:
    """Set column widths for a worksheet."""
    for i, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(i)].width = width


def _write_header_row(ws, row: int, headers: list[str], start_col: int = 1) -> None:
    """Write a styled table header row."""
    for col, header in enumerate(headers, start=start_col):
        cell = ws.cell(row=row, column=col, value=header)
        cell.fill = TABLE_HEADER_FILL
        cell.font = TABLE_HEADER_FONT
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = THIN_BORDER


def _write_body_row(ws, row: int, values: Sequence[object]) -> None:
    for col, value in enumerate(values, start=1):
        ws.cell(row=row, column=col, value=value).border = THIN_BORDER


def _to_bytes(wb: Workbook) -> bytes:
    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output.getvalue()


def safe_sheet_title(name: str, taken: set[str]) -> str:
    """
    Excel-safe, unique sheet title.

    Strips characters Excel rejects, truncates to 31 characters and appends
    " (2)", " (3)"... when the title is already used in the workbook.
    """
    base = _INVALID_TITLE_CHARS.sub("-", name or "").strip() or "Sheet"
    title = base[:MAX_SHEET_TITLE]
    counter = 2
    while title.lower() in taken:
        suffix = f" ({counter})"
        title = base[: MAX_SHEET_TITLE - len(suffix)] + suffix
        counter += 1
    taken.add(title.lower())
    return title


def _serial_values(serial: SerialRecord) -> list[str]:
    return [
        serial.dn_no,
        serial.location,
        serial.bin_code,
        serial.material_code,
        serial.material_desc,
        serial.barcode,
        serial.ship_to_name,
        serial.ship_to_address,
    ]


def _fill_serial_sheet(ws, serials: Iterable[SerialRecord]) -> None:
    _write_header_row(ws, 1, SERIAL_HEADERS)
    row = 2
    for serial in serials:
        _write_body_row(ws, row, _serial_values(serial))
        row += 1
    _set_column_widths(ws, SERIAL_WIDTHS)
    ws.freeze_panes = "A2"


def generate_consolidated_xlsx(rows: Sequence[AggregateRow]) -> bytes:
    """
    Generate the consolidated material table.

    Args:
        rows: Aggregated rows in display order

    Returns:
        XLSX file as bytes
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Consolidated"

    _write_header_row(ws, 1, CONSOLIDATED_HEADERS)
    row = 2
    for aggregate in rows:
        _write_body_row(
            ws,
            row,
            [
                aggregate.material_code,
                aggregate.description,
                aggregate.category.value,
                aggregate.qty,
                UNIT_PLACEHOLDER,
                aggregate.ship_name,
                aggregate.remarks,
            ],
        )
        ws.cell(row=row, column=4).number_format = "#,##0"
        row += 1

    _set_column_widths(ws, CONSOLIDATED_WIDTHS)
    ws.freeze_panes = "A2"
    return _to_bytes(wb)


def generate_serial_list_xlsx(serials: Sequence[SerialRecord]) -> bytes:
    """Generate the bulking serial list (one sheet)."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Serial List"
    _fill_serial_sheet(ws, serials)
    return _to_bytes(wb)


def generate_all_dn_xlsx(sources: Sequence[Source]) -> bytes:
    """
    Generate one serial-list sheet per source, in registration order.

    Sheets are titled by the source's document id.
    """
    wb = Workbook()
    wb.remove(wb.active)

    taken: set[str] = set()
    for source in sources:
        ws = wb.create_sheet(title=safe_sheet_title(source.natural_document_id, taken))
        _fill_serial_sheet(ws, serials_for(source))

    if not sources:
        # a workbook needs at least one sheet
        ws = wb.create_sheet(title="Serial List")
        _write_header_row(ws, 1, SERIAL_HEADERS)

    logger.debug("Generated all-DN workbook", extra={"sheets": len(wb.sheetnames)})
    return _to_bytes(wb)


def generate_dn_xlsx(source: Source) -> bytes:
    """Generate the serial list of one source."""
    wb = Workbook()
    ws = wb.active
    ws.title = safe_sheet_title(source.natural_document_id, set())
    _fill_serial_sheet(ws, serials_for(source))
    return _to_bytes(wb)
