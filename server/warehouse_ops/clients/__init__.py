"""Material lookup clients package."""

from warehouse_ops.clients.material_lookup_client import (
    MaterialLookupClient,
    MaterialDescriptor,
    LookupClientError,
    LookupApiError,
    LookupClientConfigError,
    get_material_lookup_client,
    close_material_lookup_client,
)

__all__ = [
    "MaterialLookupClient",
    "MaterialDescriptor",
    "LookupClientError",
    "LookupApiError",
    "LookupClientConfigError",
    "get_material_lookup_client",
    "close_material_lookup_client",
]
