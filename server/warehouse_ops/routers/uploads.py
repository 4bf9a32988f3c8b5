"""
Uploads Router.

Endpoints for loading delivery-note spreadsheets into the in-memory registry.

Upload Flow:
------------
1. The client posts one or more .xlsx/.xls/.csv files
2. Each file is read and ingested into a Source; files that cannot be read
   are reported under `unreadable` and do not stop the rest of the batch
3. The readable sources are registered in upload order; a source whose
   document id is already loaded (or appears earlier in the same batch) is
   rejected and listed under `rejected`
4. The refreshed consolidated view is returned

Error Handling:
---------------
- 422 Unprocessable Entity if:
  - A single uploaded file is empty, too large or not a spreadsheet
  - document_number is given together with more than one file
- 404 Not Found when removing an unknown source
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from warehouse_ops.config import get_settings
from warehouse_ops.dependencies import get_registry, get_view_selector
from warehouse_ops.models.records import Source
from warehouse_ops.schemas.consolidation import (
    RejectedUpload,
    SourceListResponse,
    SourceSummary,
    UnreadableUpload,
    UploadResponse,
    UploadWarning,
    ViewResponse,
    WarningSeverity,
)
from warehouse_ops.services.record_ingestor import SpreadsheetReadError, ingest_file
from warehouse_ops.services.source_registry import (
    SourceNotFoundError,
    SourceRegistry,
)
from warehouse_ops.services.view_selector import ViewSelector

router = APIRouter()
logger = logging.getLogger(__name__)


def _source_warnings(source: Source, default_document_id: str) -> list[UploadWarning]:
    warnings: list[UploadWarning] = []
    if source.skipped_rows:
        warnings.append(UploadWarning(
            file_name=source.file_name,
            reason=f"{source.skipped_rows} row(s) without a material code were skipped",
            severity=WarningSeverity.info,
        ))
    if not source.material_records:
        warnings.append(UploadWarning(
            file_name=source.file_name,
            reason="No material rows found (is there a 'Material Code' column?)",
            severity=WarningSeverity.warning,
        ))
    if source.natural_document_id == default_document_id:
        warnings.append(UploadWarning(
            file_name=source.file_name,
            reason=f"No DN number found; document id defaulted to '{default_document_id}'",
            severity=WarningSeverity.warning,
        ))
    return warnings


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload delivery-note spreadsheets",
    responses={
        200: {"description": "Batch processed (see accepted / rejected / unreadable)"},
        422: {"description": "Validation error (empty, oversized or unreadable single file)"},
    },
)
async def upload_sources(
    files: list[UploadFile] = File(..., description="Delivery-note files (.xlsx, .xls or .csv)"),
    document_number: Optional[str] = Form(
        default=None,
        description="Document number to use instead of the DN column (single file only)",
    ),
    registry: SourceRegistry = Depends(get_registry),
    selector: ViewSelector = Depends(get_view_selector),
) -> UploadResponse:
    """
    Ingest and register a batch of uploads.

    Raises:
        HTTPException 422: If a single file cannot be used, or document_number
            is combined with several files
    """
    settings = get_settings()

    manual_id = (document_number or "").strip() or None
    if manual_id and len(files) > 1:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "VALIDATION",
                "detail": "document_number can only be used when uploading a single file",
                "field": "document_number",
            },
        )

    sources: list[Source] = []
    unreadable: list[UnreadableUpload] = []
    warnings: list[UploadWarning] = []

    for upload in files:
        file_name = upload.filename or ""
        data = await upload.read()

        try:
            if len(data) > settings.max_upload_bytes:
                raise SpreadsheetReadError(
                    file_name, f"file exceeds {settings.max_upload_bytes} bytes"
                )
            source = ingest_file(data, file_name=file_name, source_id=manual_id)
        except SpreadsheetReadError as exc:
            logger.warning(
                "Unreadable upload",
                extra={"file_name": file_name, "reason": exc.reason},
            )
            unreadable.append(UnreadableUpload(file_name=file_name, detail=str(exc)))
            continue

        sources.append(source)
        warnings.extend(_source_warnings(source, settings.default_document_id))

    if len(files) == 1 and unreadable:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "VALIDATION",
                "detail": unreadable[0].detail,
                "field": "files",
            },
        )

    result = registry.register_batch(sources)

    logger.info(
        "Processed upload batch",
        extra={
            "files": len(files),
            "accepted": len(result.accepted),
            "rejected": len(result.rejected),
            "unreadable": len(unreadable),
        },
    )

    return UploadResponse(
        accepted=[SourceSummary.from_source(s) for s in result.accepted],
        rejected=[
            RejectedUpload(
                document_id=r.natural_document_id,
                file_name=r.source.file_name,
                reason=r.reason.value,
            )
            for r in result.rejected
        ],
        unreadable=unreadable,
        warnings=warnings,
        view=ViewResponse.from_view(selector.current()),
    )


@router.get("", response_model=SourceListResponse, summary="List loaded uploads")
def list_sources(registry: SourceRegistry = Depends(get_registry)) -> SourceListResponse:
    """Loaded sources in upload order."""
    items = [SourceSummary.from_source(s) for s in registry.list()]
    return SourceListResponse(items=items, total=len(items))


@router.delete(
    "/{source_id}",
    response_model=ViewResponse,
    summary="Remove one upload",
    responses={404: {"description": "Source not found"}},
)
def remove_source(
    source_id: str,
    selector: ViewSelector = Depends(get_view_selector),
) -> ViewResponse:
    """
    Remove an upload and return the recomputed view.

    If the removed upload was the one being viewed, the view switches back to
    all uploads.
    """
    try:
        view = selector.after_removal(source_id)
    except SourceNotFoundError as exc:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "NOT_FOUND",
                "detail": exc.message,
                "field": "source_id",
            },
        ) from exc

    return ViewResponse.from_view(view)


@router.delete("", response_model=ViewResponse, summary="Remove all uploads")
def clear_sources(selector: ViewSelector = Depends(get_view_selector)) -> ViewResponse:
    return ViewResponse.from_view(selector.clear())
