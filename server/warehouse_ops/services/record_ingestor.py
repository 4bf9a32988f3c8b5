"""
Record Ingestor.

Turns one uploaded delivery-note sheet into a Source with two parallel row
sets: aggregable material records and per-unit serial records.

Header Resolution:
------------------
Headers are lower-cased and trimmed, then each logical field takes the first
column whose header contains one of its variants (e.g. "Material Code" and
"MaterialCode" both resolve the material code). "ship to" and "sold to" must
match exactly; as substrings they would also hit "ship to name" and
"sold to name". Column order is irrelevant.

Row Rules:
----------
- Rows without a material code are skipped (and counted), never fatal
- Missing optional columns degrade to ""
- Quantity: leading integer of the qty cell; absent, unparseable or
  non-positive quantities count as 1
- The category is assigned here, from the material code

Natural document id:
--------------------
Caller-supplied id if given, otherwise the DN column of the first data row,
otherwise the configured default ("N/A"). It is copied into `remarks` of every
material record of the source.
"""

from __future__ import annotations

import logging
import math
import re
import uuid
from io import BytesIO
from typing import Any, Optional, Sequence

import pandas as pd

from warehouse_ops.config import get_settings
from warehouse_ops.models.records import MaterialRecord, SerialRecord, Source
from warehouse_ops.services.category_classifier import classify

logger = logging.getLogger(__name__)

# Column name variations for delivery-note exports
DN_NO_CANDIDATES = ["dn no", "dn_no", "dnno"]
MATERIAL_CODE_CANDIDATES = ["material code", "materialcode"]
MATERIAL_DESC_CANDIDATES = ["material desc", "material description"]
BIN_CODE_CANDIDATES = ["bincode", "bin code"]
SHIP_TO_NAME_CANDIDATES = ["ship to name", "shiptoname", "ship name", "shipname"]
ORDER_ITEM_CANDIDATES = ["order item", "orderitem"]
FACTORY_CODE_CANDIDATES = ["factory code", "factorycode"]
LOCATION_CANDIDATES = ["location"]
BARCODE_CANDIDATES = ["barcode"]
MATERIAL_TYPE_CANDIDATES = ["material type", "materialtype"]
PRODUCT_STATUS_CANDIDATES = ["product status", "productstatus"]
SHIP_TO_CANDIDATES = ["ship to", "shipto"]
SHIP_TO_ADDRESS_CANDIDATES = ["ship to address", "shiptoaddress"]
SOLD_TO_CANDIDATES = ["sold to", "soldto"]
SOLD_TO_NAME_CANDIDATES = ["sold to name", "soldtoname"]
SCAN_BY_CANDIDATES = ["scan by", "scanby"]
SCAN_TIME_CANDIDATES = ["scan time", "scantime"]
QUANTITY_CANDIDATES = ["qty", "quantity", "qnt"]

# field -> (candidates, exact)
HEADER_FIELDS: dict[str, tuple[list[str], bool]] = {
    "dn_no": (DN_NO_CANDIDATES, False),
    "material_code": (MATERIAL_CODE_CANDIDATES, False),
    "material_desc": (MATERIAL_DESC_CANDIDATES, False),
    "bin_code": (BIN_CODE_CANDIDATES, False),
    "ship_to_name": (SHIP_TO_NAME_CANDIDATES, False),
    "order_item": (ORDER_ITEM_CANDIDATES, False),
    "factory_code": (FACTORY_CODE_CANDIDATES, False),
    "location": (LOCATION_CANDIDATES, False),
    "barcode": (BARCODE_CANDIDATES, False),
    "material_type": (MATERIAL_TYPE_CANDIDATES, False),
    "product_status": (PRODUCT_STATUS_CANDIDATES, False),
    "ship_to": (SHIP_TO_CANDIDATES, True),
    "ship_to_address": (SHIP_TO_ADDRESS_CANDIDATES, False),
    "sold_to": (SOLD_TO_CANDIDATES, True),
    "sold_to_name": (SOLD_TO_NAME_CANDIDATES, False),
    "scan_by": (SCAN_BY_CANDIDATES, False),
    "scan_time": (SCAN_TIME_CANDIDATES, False),
    "qty": (QUANTITY_CANDIDATES, False),
}

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class SpreadsheetReadError(ValueError):
    """Raised when an uploaded file cannot be read as a spreadsheet."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(f"Could not read '{file_name or '<upload>'}': {reason}")
        self.file_name = file_name
        self.reason = reason


# =============================================================================
# Cell helpers
# =============================================================================


def _cell_text(value: Any) -> str:
    """Render a spreadsheet cell as trimmed text; blanks and NaN become ""."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def _normalize_header(value: Any) -> str:
    return _cell_text(value).lower()


def _find_column(headers: Sequence[str], candidates: list[str], exact: bool = False) -> int:
    """Index of the first header matching any candidate, or -1."""
    for idx, header in enumerate(headers):
        if exact:
            if header in candidates:
                return idx
        elif any(candidate in header for candidate in candidates):
            return idx
    return -1


def resolve_columns(header_row: Sequence[Any]) -> dict[str, int]:
    """Map every logical field to its column index (-1 when absent)."""
    headers = [_normalize_header(h) for h in header_row]
    return {
        field_name: _find_column(headers, candidates, exact)
        for field_name, (candidates, exact) in HEADER_FIELDS.items()
    }


def _get(row: Sequence[Any], idx: int) -> str:
    if idx < 0 or idx >= len(row):
        return ""
    return _cell_text(row[idx])


def parse_quantity(value: Any) -> int:
    """
    Parse a quantity cell.

    Takes the leading integer ("3", "3.0", "12 pcs" -> 3, 3, 12). Anything
    absent, unparseable or not positive counts as a single unit.
    """
    match = _LEADING_INT_RE.match(_cell_text(value))
    if not match:
        return 1
    qty = int(match.group(1))
    return qty if qty > 0 else 1


# =============================================================================
# Ingestion
# =============================================================================


def derive_document_id(raw_table: Sequence[Sequence[Any]], columns: dict[str, int]) -> Optional[str]:
    """DN number from the first data row, if the sheet has a DN column."""
    if columns["dn_no"] < 0 or len(raw_table) < 2:
        return None
    return _get(raw_table[1], columns["dn_no"]) or None


def ingest(
    raw_table: Sequence[Sequence[Any]],
    source_id: Optional[str] = None,
    file_name: str = "",
) -> Source:
    """
    Parse a header-plus-rows table into a Source.

    Args:
        raw_table: First row is the header, the rest are data rows
        source_id: Natural document id supplied by the caller (overrides the DN column)
        file_name: Original upload name, kept for display and exports

    Returns:
        Source with material and serial records; rows that could not be used
        are reported in `skipped_rows`
    """
    if not raw_table:
        logger.warning("Empty sheet ingested", extra={"file_name": file_name})
        return Source(
            id=str(uuid.uuid4()),
            natural_document_id=(source_id or "").strip() or get_settings().default_document_id,
            file_name=file_name,
        )

    columns = resolve_columns(raw_table[0])
    if columns["material_code"] < 0:
        logger.warning(
            "No material code column found; every row will be skipped",
            extra={"file_name": file_name},
        )

    document_id = (
        (source_id or "").strip()
        or derive_document_id(raw_table, columns)
        or get_settings().default_document_id
    )

    material_records: list[MaterialRecord] = []
    serial_records: list[SerialRecord] = []
    skipped = 0

    for row in raw_table[1:]:
        material_code = _get(row, columns["material_code"]) if row else ""
        if not material_code:
            skipped += 1
            continue

        description = _get(row, columns["material_desc"])
        ship_name = _get(row, columns["ship_to_name"])
        qty = parse_quantity(_get(row, columns["qty"])) if columns["qty"] >= 0 else 1

        material_records.append(
            MaterialRecord(
                material_code=material_code,
                description=description,
                category=classify(material_code),
                qty=qty,
                remarks=document_id,
                ship_name=ship_name,
            )
        )

        serial_records.append(
            SerialRecord(
                dn_no=_get(row, columns["dn_no"]) or document_id,
                material_code=material_code,
                material_desc=description,
                barcode=_get(row, columns["barcode"]),
                order_item=_get(row, columns["order_item"]),
                factory_code=_get(row, columns["factory_code"]),
                location=_get(row, columns["location"]),
                bin_code=_get(row, columns["bin_code"]),
                material_type=_get(row, columns["material_type"]),
                product_status=_get(row, columns["product_status"]),
                ship_to=_get(row, columns["ship_to"]),
                ship_to_name=ship_name,
                ship_to_address=_get(row, columns["ship_to_address"]),
                sold_to=_get(row, columns["sold_to"]),
                sold_to_name=_get(row, columns["sold_to_name"]),
                scan_by=_get(row, columns["scan_by"]),
                scan_time=_get(row, columns["scan_time"]),
            )
        )

    if skipped:
        logger.info(
            "Skipped rows without material code",
            extra={"file_name": file_name, "document_id": document_id, "skipped_rows": skipped},
        )

    return Source(
        id=str(uuid.uuid4()),
        natural_document_id=document_id,
        material_records=tuple(material_records),
        serial_records=tuple(serial_records),
        file_name=file_name,
        skipped_rows=skipped,
    )


# =============================================================================
# Spreadsheet reading
# =============================================================================


def read_table(file_bytes: bytes, file_name: str = "") -> list[list[str]]:
    """
    Read the first sheet of an uploaded workbook (or a CSV) as text rows.

    The header row is returned as row 0; all cells are strings with blanks as "".

    Raises:
        SpreadsheetReadError: If the bytes are not a readable spreadsheet
    """
    if not file_bytes:
        raise SpreadsheetReadError(file_name, "file is empty")

    buffer = BytesIO(file_bytes)
    head = file_bytes[:8]

    # Detect file type by magic bytes
    is_xlsx = head.startswith(b"PK")
    is_xls = head.startswith(b"\xD0\xCF\x11\xE0")
    is_csv = not is_xlsx and not is_xls and file_name.lower().endswith((".csv", ".txt"))

    read_kwargs: dict[str, Any] = {"header": None, "dtype": str, "keep_default_na": False}
    df = None
    last_error: Optional[Exception] = None

    if is_csv:
        try:
            df = pd.read_csv(buffer, **read_kwargs)
        except Exception as e:
            last_error = e
    else:
        engines = ["openpyxl", "xlrd"] if not is_xls else ["xlrd", "openpyxl"]
        for engine in engines:
            buffer.seek(0)
            try:
                df = pd.read_excel(buffer, sheet_name=0, engine=engine, **read_kwargs)
                break
            except Exception as e:
                last_error = e

    if df is None:
        raise SpreadsheetReadError(file_name, f"not a valid .xlsx/.xls/.csv file ({last_error})")

    return [[_cell_text(value) for value in row] for row in df.itertuples(index=False, name=None)]


def ingest_file(
    file_bytes: bytes,
    file_name: str = "",
    source_id: Optional[str] = None,
) -> Source:
    """Read an uploaded spreadsheet and ingest its first sheet."""
    return ingest(read_table(file_bytes, file_name), source_id=source_id, file_name=file_name)
