"""
In-memory records produced by ingesting a delivery-note spreadsheet.

A Source is one uploaded sheet. It carries two parallel row sets:
- material_records: aggregable lines (summed by the consolidation aggregator)
- serial_records: one line per scanned physical unit (only ever unioned)

Records are frozen; aggregation builds new AggregateRow objects and never
touches what the ingestor produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from warehouse_ops.services.category_labels import CategoryLabel


@dataclass(frozen=True)
class MaterialRecord:
    """One aggregable line of an upload."""

    material_code: str
    description: str
    category: CategoryLabel
    qty: int
    remarks: str  # owning source's natural document id
    ship_name: str = ""


@dataclass(frozen=True)
class SerialRecord:
    """One scanned unit with its routing metadata."""

    dn_no: str
    material_code: str
    material_desc: str = ""
    barcode: str = ""
    order_item: str = ""
    factory_code: str = ""
    location: str = ""
    bin_code: str = ""
    material_type: str = ""
    product_status: str = ""
    ship_to: str = ""
    ship_to_name: str = ""
    ship_to_address: str = ""
    sold_to: str = ""
    sold_to_name: str = ""
    scan_by: str = ""
    scan_time: str = ""

    @property
    def is_valid(self) -> bool:
        """Serial rows count only with both a material code and a barcode."""
        return bool(self.material_code.strip()) and bool(self.barcode.strip())


@dataclass(frozen=True)
class Source:
    """One ingested upload."""

    id: str
    natural_document_id: str
    material_records: tuple[MaterialRecord, ...] = ()
    serial_records: tuple[SerialRecord, ...] = ()
    file_name: str = ""
    skipped_rows: int = 0

    @property
    def total_quantity(self) -> int:
        return sum(record.qty for record in self.material_records)

    @property
    def ship_to_name(self) -> Optional[str]:
        """Ship-to name of the first serial row, as shown on DN print-outs."""
        for serial in self.serial_records:
            if serial.ship_to_name:
                return serial.ship_to_name
        return None


@dataclass
class AggregateRow:
    """Accumulated total for one (material_code, description, remarks) key."""

    material_code: str
    description: str
    category: CategoryLabel
    qty: int
    remarks: str
    ship_names: list[str] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.material_code, self.description, self.remarks)

    @property
    def ship_name(self) -> str:
        return ", ".join(self.ship_names)
