"""Pydantic schemas for the consolidation API."""

from warehouse_ops.schemas.consolidation import (
    AggregateRowOut,
    ClassificationResponse,
    MaterialResolutionResponse,
    RejectedUpload,
    SerialRowOut,
    SourceListResponse,
    SourceSummary,
    UnreadableUpload,
    UploadResponse,
    UploadWarning,
    ViewResponse,
    WarningSeverity,
)

__all__ = [
    "AggregateRowOut",
    "ClassificationResponse",
    "MaterialResolutionResponse",
    "RejectedUpload",
    "SerialRowOut",
    "SourceListResponse",
    "SourceSummary",
    "UnreadableUpload",
    "UploadResponse",
    "UploadWarning",
    "ViewResponse",
    "WarningSeverity",
]
