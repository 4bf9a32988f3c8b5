"""
Pytest configuration and shared fixtures for the consolidation tests.
"""

import io

import pandas as pd
import pytest

from warehouse_ops.models.records import MaterialRecord, SerialRecord, Source
from warehouse_ops.services.category_labels import CategoryLabel

DN_HEADER = [
    "DN No", "Order Item", "Factory Code", "Location", "Bin Code",
    "Material Code", "Material Desc", "Barcode", "Material Type", "Product Status",
    "Ship To", "Ship To Name", "Ship To Address", "Sold To", "Sold To Name",
    "Scan By", "Scan Time", "Qty",
]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test exercising the HTTP API"
    )


def dn_row(dn_no, material_code, description="", barcode="", ship_to_name="", qty="1", **extra):
    """Build one data row in DN_HEADER order."""
    values = {
        "DN No": dn_no,
        "Material Code": material_code,
        "Material Desc": description,
        "Barcode": barcode,
        "Ship To Name": ship_to_name,
        "Qty": qty,
    }
    for key, value in extra.items():
        values[key.replace("_", " ").title()] = value
    return [values.get(column, "") for column in DN_HEADER]


def make_source(source_id, document_id, records=(), serials=(), file_name=""):
    """Build a Source directly, bypassing the ingestor."""
    return Source(
        id=source_id,
        natural_document_id=document_id,
        material_records=tuple(records),
        serial_records=tuple(serials),
        file_name=file_name,
    )


def material(code, description, qty, remarks, ship_name="", category=CategoryLabel.others):
    return MaterialRecord(
        material_code=code,
        description=description,
        category=category,
        qty=qty,
        remarks=remarks,
        ship_name=ship_name,
    )


def serial(dn_no, code, barcode, ship_to_name=""):
    return SerialRecord(dn_no=dn_no, material_code=code, barcode=barcode, ship_to_name=ship_to_name)


def table_to_xlsx(rows) -> bytes:
    """Write a header-plus-rows table to an in-memory xlsx file."""
    df = pd.DataFrame(rows[1:], columns=rows[0])
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, engine="openpyxl")
    buffer.seek(0)
    return buffer.getvalue()


@pytest.fixture
def dn_table():
    """A two-line delivery note for DN 8001."""
    return [
        DN_HEADER,
        dn_row("8001", "BS0900EAE", "Fridge 90L", "SN-001", "Shop A", "2"),
        dn_row("8001", "BS0900EAE", "Fridge 90L", "SN-002", "Shop B", "3"),
    ]


@pytest.fixture
def dn_xlsx(dn_table) -> bytes:
    return table_to_xlsx(dn_table)
