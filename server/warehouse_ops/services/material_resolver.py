"""
Resolve a scanned barcode or material code to a material descriptor.

The lookup service is asked once. If it has no entry, is not configured or
fails in any way, the code is classified locally and the descriptor is marked
with source="category_mapping".
"""

from __future__ import annotations

import logging
from typing import Optional

from warehouse_ops.clients.material_lookup_client import (
    LookupClientError,
    MaterialDescriptor,
    MaterialLookupClient,
)
from warehouse_ops.services.category_classifier import classify
from warehouse_ops.services.code_normalizer import normalize

logger = logging.getLogger(__name__)

CATEGORY_MAPPING_SOURCE = "category_mapping"


def classify_descriptor(code: str) -> MaterialDescriptor:
    """Descriptor built from the local classifier alone."""
    clean = (code or "").strip()
    return MaterialDescriptor(
        barcode=clean,
        material_code=normalize(clean),
        category=classify(clean).value,
        source=CATEGORY_MAPPING_SOURCE,
    )


async def resolve_material(
    code: str,
    client: Optional[MaterialLookupClient] = None,
) -> MaterialDescriptor:
    """
    Resolve a code through the lookup service, falling back to classification.

    Never raises for lookup failures.
    """
    if client is None or not client.is_configured:
        return classify_descriptor(code)

    try:
        descriptor = await client.lookup(code)
    except LookupClientError as e:
        logger.warning(
            "Material lookup failed; using category mapping",
            extra={"code": code, "error": e.message, "status_code": e.status_code},
        )
        return classify_descriptor(code)

    if descriptor is None:
        logger.info("Material lookup miss; using category mapping", extra={"code": code})
        return classify_descriptor(code)

    return descriptor
