"""
Views Router.

Switches between the all-uploads view and a single upload. Every response is
recomputed from the registry.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from warehouse_ops.dependencies import get_view_selector
from warehouse_ops.schemas.consolidation import ViewResponse
from warehouse_ops.services.source_registry import SourceNotFoundError
from warehouse_ops.services.view_selector import ViewSelector

router = APIRouter()


@router.get("/current", response_model=ViewResponse, summary="Active view")
def current_view(selector: ViewSelector = Depends(get_view_selector)) -> ViewResponse:
    return ViewResponse.from_view(selector.current())


@router.get("/all", response_model=ViewResponse, summary="Switch to all uploads")
def all_sources_view(selector: ViewSelector = Depends(get_view_selector)) -> ViewResponse:
    return ViewResponse.from_view(selector.show_all())


@router.get(
    "/{source_id}",
    response_model=ViewResponse,
    summary="Switch to a single upload",
    responses={404: {"description": "Source not found"}},
)
def single_source_view(
    source_id: str,
    selector: ViewSelector = Depends(get_view_selector),
) -> ViewResponse:
    try:
        view = selector.show_one(source_id)
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
