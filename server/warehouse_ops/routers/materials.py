"""
Materials Router.

- GET /classify/{code}: local classification, with the rule that decided it
- GET /resolve/{code}: lookup service first, local classification as fallback
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from warehouse_ops.clients.material_lookup_client import (
    MaterialLookupClient,
    get_material_lookup_client,
)
from warehouse_ops.schemas.consolidation import (
    ClassificationResponse,
    MaterialResolutionResponse,
)
from warehouse_ops.services.category_classifier import (
    classify,
    first_matching_rule,
    is_exact_match,
)
from warehouse_ops.services.code_normalizer import normalize
from warehouse_ops.services.material_resolver import resolve_material

router = APIRouter()


@router.get(
    "/classify/{code:path}",
    response_model=ClassificationResponse,
    summary="Classify a material code",
)
def classify_code(code: str) -> ClassificationResponse:
    exact = is_exact_match(code)
    rule = None if exact else first_matching_rule(code)
    return ClassificationResponse(
        code=code,
        normalized_code=normalize(code),
        category=classify(code),
        exact_match=exact,
        rule=rule.name if rule is not None else None,
    )


@router.get(
    "/resolve/{code:path}",
    response_model=MaterialResolutionResponse,
    summary="Resolve a barcode or material code",
)
async def resolve_code(
    code: str,
    client: MaterialLookupClient = Depends(get_material_lookup_client),
) -> MaterialResolutionResponse:
    descriptor = await resolve_material(code, client)
    return MaterialResolutionResponse(
        barcode=descriptor.barcode,
        material_code=descriptor.material_code,
        material_description=descriptor.material_description,
        category=descriptor.category,
        source=descriptor.source,
    )
