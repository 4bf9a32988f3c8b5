"""
Exports Router.

XLSX downloads of the consolidated table and the serial lists.

- consolidated.xlsx / serials.xlsx follow the active view (all uploads or
  the single upload currently shown)
- dn.xlsx has one sheet per loaded upload
- dn/{source_id}.xlsx is the serial list of one upload
"""

from __future__ import annotations

import logging
import re
from io import BytesIO

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from warehouse_ops.dependencies import get_registry, get_view_selector
from warehouse_ops.services.source_registry import SourceRegistry
from warehouse_ops.services.view_selector import ViewSelector
from warehouse_ops.services.xlsx_export_service import (
    generate_all_dn_xlsx,
    generate_consolidated_xlsx,
    generate_dn_xlsx,
    generate_serial_list_xlsx,
)

router = APIRouter()
logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _xlsx_response(content: bytes, filename: str) -> StreamingResponse:
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )


@router.get("/consolidated.xlsx", summary="Download the consolidated table")
def export_consolidated(selector: ViewSelector = Depends(get_view_selector)) -> StreamingResponse:
    view = selector.current()
    return _xlsx_response(generate_consolidated_xlsx(view.rows), "Consolidated_Materials.xlsx")


@router.get("/serials.xlsx", summary="Download the bulking serial list")
def export_serials(selector: ViewSelector = Depends(get_view_selector)) -> StreamingResponse:
    view = selector.current()
    return _xlsx_response(generate_serial_list_xlsx(view.serials), "Bulking_Serial_List.xlsx")


@router.get("/dn.xlsx", summary="Download every upload's serial list, one sheet each")
def export_all_dn(registry: SourceRegistry = Depends(get_registry)) -> StreamingResponse:
    sources = registry.list()
    logger.info("Exporting all DN serial lists", extra={"sources": len(sources)})
    return _xlsx_response(generate_all_dn_xlsx(sources), "All_DN_Serial_Lists.xlsx")


@router.get(
    "/dn/{source_id}.xlsx",
    summary="Download one upload's serial list",
    responses={404: {"description": "Source not found"}},
)
def export_dn(source_id: str, registry: SourceRegistry = Depends(get_registry)) -> StreamingResponse:
    source = registry.get(source_id)
    if source is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "NOT_FOUND",
                "detail": f"Source '{source_id}' is not registered",
                "field": "source_id",
            },
        )

    stem = _UNSAFE_FILENAME_CHARS.sub("_", source.natural_document_id).strip("_") or "DN"
    return _xlsx_response(generate_dn_xlsx(source), f"{stem}_Serial_List.xlsx")
