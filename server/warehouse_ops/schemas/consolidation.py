"""
Request/Response schemas for the consolidation endpoints.

Upload flow:
1. One or more delivery-note spreadsheets are uploaded
2. Each readable file is ingested into a Source
3. The batch is registered; duplicates of an already loaded document id are
   rejected and reported, the rest are accepted
4. The response carries the refreshed consolidated view
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from warehouse_ops.models.records import AggregateRow, SerialRecord, Source
from warehouse_ops.services.category_labels import CategoryLabel
from warehouse_ops.services.consolidation_aggregator import serials_for, total_quantity
from warehouse_ops.services.view_selector import ConsolidatedView, ViewMode


class WarningSeverity(str, Enum):
    """Severity level for upload warnings."""

    info = "info"
    warning = "warning"
    error = "error"


class UploadWarning(BaseModel):
    """A warning generated while ingesting an upload."""

    file_name: str = Field(..., description="Upload that triggered the warning")
    reason: str = Field(..., description="Reason for the warning")
    severity: WarningSeverity = Field(default=WarningSeverity.warning)


class SourceSummary(BaseModel):
    """A registered upload."""

    id: str = Field(..., description="Internal source id (used for removal and single views)")
    document_id: str = Field(..., description="Natural document id (DN number)")
    file_name: str = Field(default="")
    material_rows: int = Field(..., ge=0)
    serial_rows: int = Field(..., ge=0, description="Valid serial rows (material code and barcode)")
    total_quantity: int = Field(..., ge=0)
    skipped_rows: int = Field(default=0, ge=0)
    ship_to_name: Optional[str] = None

    @classmethod
    def from_source(cls, source: Source) -> "SourceSummary":
        return cls(
            id=source.id,
            document_id=source.natural_document_id,
            file_name=source.file_name,
            material_rows=len(source.material_records),
            serial_rows=len(serials_for(source)),
            total_quantity=source.total_quantity,
            skipped_rows=source.skipped_rows,
            ship_to_name=source.ship_to_name,
        )


class RejectedUpload(BaseModel):
    """An upload refused because its document id is already loaded."""

    document_id: str
    file_name: str = ""
    reason: str = Field(..., description="Rejection reason code")


class UnreadableUpload(BaseModel):
    """An upload that could not be read as a spreadsheet."""

    file_name: str
    detail: str


class AggregateRowOut(BaseModel):
    """One consolidated material line."""

    material_code: str
    material_description: str
    category: CategoryLabel
    qty: int
    ship_name: str = ""
    remarks: str = ""

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_row(cls, row: AggregateRow) -> "AggregateRowOut":
        return cls(
            material_code=row.material_code,
            material_description=row.description,
            category=row.category,
            qty=row.qty,
            ship_name=row.ship_name,
            remarks=row.remarks,
        )


class SerialRowOut(BaseModel):
    """One scanned unit."""

    dn_no: str
    location: str = ""
    bin_code: str = ""
    material_code: str
    material_desc: str = ""
    barcode: str
    ship_to_name: str = ""
    ship_to_address: str = ""
    order_item: str = ""
    factory_code: str = ""
    material_type: str = ""
    product_status: str = ""
    ship_to: str = ""
    sold_to: str = ""
    sold_to_name: str = ""
    scan_by: str = ""
    scan_time: str = ""

    @classmethod
    def from_record(cls, record: SerialRecord) -> "SerialRowOut":
        return cls(
            dn_no=record.dn_no,
            location=record.location,
            bin_code=record.bin_code,
            material_code=record.material_code,
            material_desc=record.material_desc,
            barcode=record.barcode,
            ship_to_name=record.ship_to_name,
            ship_to_address=record.ship_to_address,
            order_item=record.order_item,
            factory_code=record.factory_code,
            material_type=record.material_type,
            product_status=record.product_status,
            ship_to=record.ship_to,
            sold_to=record.sold_to,
            sold_to_name=record.sold_to_name,
            scan_by=record.scan_by,
            scan_time=record.scan_time,
        )


class ViewResponse(BaseModel):
    """The active consolidated view."""

    mode: ViewMode
    source_id: Optional[str] = None
    rows: list[AggregateRowOut] = Field(default_factory=list)
    serials: list[SerialRowOut] = Field(default_factory=list)
    total_quantity: int = Field(default=0, ge=0)
    total_rows: int = Field(default=0, ge=0)
    total_serials: int = Field(default=0, ge=0)

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_view(cls, view: ConsolidatedView) -> "ViewResponse":
        return cls(
            mode=view.mode,
            source_id=view.source_id,
            rows=[AggregateRowOut.from_row(r) for r in view.rows],
            serials=[SerialRowOut.from_record(s) for s in view.serials],
            total_quantity=total_quantity(view.rows),
            total_rows=len(view.rows),
            total_serials=len(view.serials),
        )


class UploadResponse(BaseModel):
    """Result of a batch upload."""

    accepted: list[SourceSummary] = Field(default_factory=list)
    rejected: list[RejectedUpload] = Field(default_factory=list)
    unreadable: list[UnreadableUpload] = Field(default_factory=list)
    warnings: list[UploadWarning] = Field(default_factory=list)
    view: ViewResponse


class SourceListResponse(BaseModel):
    items: list[SourceSummary] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class ClassificationResponse(BaseModel):
    """Classification of a single code, with the rule that decided it."""

    code: str = Field(..., description="Code as submitted")
    normalized_code: str
    category: CategoryLabel
    exact_match: bool = Field(..., description="True when the catalogue lists the code")
    rule: Optional[str] = Field(default=None, description="Name of the winning heuristic rule")

    model_config = ConfigDict(use_enum_values=True)


class MaterialResolutionResponse(BaseModel):
    barcode: str
    material_code: str
    material_description: str = ""
    category: str = ""
    source: str = Field(..., description="'lookup' or 'category_mapping'")
