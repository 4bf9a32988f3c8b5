"""
Material Lookup Client.

Async HTTP client for the barcode -> material lookup service that backs the
warehouse UI. Used to resolve a scanned barcode to a catalogued material;
when the service has no answer the caller falls back to the local category
classifier (see services/material_resolver.py).

Features:
- Single GET per lookup, no retries
- In-memory caching of hits with configurable TTL
- Timeouts, connection failures and non-2xx responses surface as
  LookupClientError subclasses carrying a status code

Environment Variables:
- MATERIAL_LOOKUP_BASE_URL: Base URL of the lookup service (e.g., http://materials:8000)
- MATERIAL_LOOKUP_TIMEOUT_SECONDS: Request timeout in seconds (default: 5)
- MATERIAL_LOOKUP_CACHE_TTL_SECONDS: Cache TTL in seconds (default: 300)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Any, Optional

import httpx

from warehouse_ops.config import get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class MaterialDescriptor:
    """A resolved material, either from the lookup service or the classifier."""

    barcode: str
    material_code: str
    material_description: str = ""
    category: str = ""
    source: str = "lookup"


# =============================================================================
# Exceptions
# =============================================================================


class LookupClientError(Exception):
    """Base exception for material lookup client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class LookupApiError(LookupClientError):
    """Raised when the lookup service fails or answers with an error."""

    pass


class LookupClientConfigError(LookupClientError):
    """Raised when no lookup service base URL is configured."""

    pass


# =============================================================================
# In-Memory Cache
# =============================================================================


@dataclass
class CacheEntry:
    data: MaterialDescriptor
    timestamp: float


class TTLCache:
    """Thread-safe in-memory cache with TTL expiration."""

    def __init__(self, ttl_seconds: int = 300):
        self._cache: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._ttl = ttl_seconds

    def get(self, key: str) -> Optional[MaterialDescriptor]:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if time.time() - entry.timestamp > self._ttl:
                del self._cache[key]
                return None

            return entry.data

    def set(self, key: str, value: MaterialDescriptor) -> None:
        with self._lock:
            self._cache[key] = CacheEntry(data=value, timestamp=time.time())

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


# =============================================================================
# Lookup Client
# =============================================================================


class MaterialLookupClient:
    """
    Async HTTP client for the material lookup service.

    Usage:
        client = MaterialLookupClient(base_url="http://materials:8000")
        try:
            descriptor = await client.lookup("BS0900EAE")
        except LookupApiError as e:
            print(f"API error: {e.message}")
        finally:
            await client.aclose()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        cache_ttl_seconds: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the lookup client.

        Args:
            base_url: Lookup service base URL (falls back to MATERIAL_LOOKUP_BASE_URL)
            timeout_seconds: Request timeout (falls back to MATERIAL_LOOKUP_TIMEOUT_SECONDS)
            cache_ttl_seconds: Cache TTL (falls back to MATERIAL_LOOKUP_CACHE_TTL_SECONDS)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        settings = get_settings()

        self._base_url = base_url or settings.material_lookup_base_url
        self._timeout = timeout_seconds or settings.material_lookup_timeout_seconds
        cache_ttl = cache_ttl_seconds or settings.material_lookup_cache_ttl_seconds

        self._cache = TTLCache(ttl_seconds=cache_ttl)
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    @property
    def base_url(self) -> str:
        """Get the configured base URL, raising if not set."""
        if not self._base_url:
            raise LookupClientConfigError(
                "MATERIAL_LOOKUP_BASE_URL not configured. "
                "Set the environment variable or pass base_url to MaterialLookupClient."
            )
        return self._base_url.rstrip("/")

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client (lazy initialization)."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "User-Agent": "Warehouse-Consolidation-Client/1.0",
                },
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the HTTP client and clear cache."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        self._cache.clear()

    async def __aenter__(self) -> "MaterialLookupClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def lookup(self, barcode: str, use_cache: bool = True) -> Optional[MaterialDescriptor]:
        """
        Look up a barcode.

        Calls GET /api/materials/lookup?barcode=...

        Returns:
            MaterialDescriptor, or None when the service does not know the
            barcode (404 or empty body)

        Raises:
            LookupApiError: On timeout, connection failure or non-2xx response
            LookupClientConfigError: If no base URL is configured
        """
        clean = (barcode or "").strip()
        if not clean:
            return None

        cache_key = f"barcode:{clean}"
        if use_cache:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Cache hit for barcode: %s", clean)
                return cached

        logger.debug("Looking up barcode: %s", clean)

        try:
            response = await self.http_client.get(
                "/api/materials/lookup",
                params={"barcode": clean},
            )
        except httpx.TimeoutException as exc:
            raise LookupApiError(
                f"Request timed out after {self._timeout}s",
                status_code=504,
            ) from exc
        except httpx.RequestError as exc:
            raise LookupApiError(
                f"Failed to connect to material lookup service: {type(exc).__name__}",
                status_code=503,
            ) from exc

        if response.status_code == 404:
            return None

        if response.status_code >= 400:
            detail = self._extract_error_detail(response)
            raise LookupApiError(
                f"Material lookup error: {detail}",
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError as exc:
            raise LookupApiError(
                "Invalid JSON response from material lookup service",
                status_code=502,
            ) from exc

        if not data:
            return None

        if not isinstance(data, dict):
            raise LookupApiError(
                "Unexpected response shape from material lookup service",
                status_code=502,
            )

        result = self._parse_descriptor(clean, data)
        if use_cache:
            self._cache.set(cache_key, result)
        return result

    @staticmethod
    def _parse_descriptor(barcode: str, data: dict[str, Any]) -> MaterialDescriptor:
        return MaterialDescriptor(
            barcode=str(data.get("barcode") or barcode),
            material_code=str(data.get("material_code") or barcode),
            material_description=str(data.get("material_description") or ""),
            category=str(data.get("category") or ""),
            source=str(data.get("source") or "lookup"),
        )

    @staticmethod
    def _extract_error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
            if isinstance(data, dict) and isinstance(data.get("detail"), str):
                return data["detail"]
            return f"HTTP {response.status_code}"
        except ValueError:
            return f"HTTP {response.status_code}"

    def clear_cache(self) -> None:
        self._cache.clear()


# =============================================================================
# Module-level client instance (singleton pattern)
# =============================================================================

_client_instance: Optional[MaterialLookupClient] = None
_client_lock = Lock()


def get_material_lookup_client() -> MaterialLookupClient:
    """Get the shared lookup client instance (singleton)."""
    global _client_instance
    if _client_instance is None:
        with _client_lock:
            if _client_instance is None:
                _client_instance = MaterialLookupClient()
    return _client_instance


async def close_material_lookup_client() -> None:
    global _client_instance
    with _client_lock:
        client, _client_instance = _client_instance, None
    if client is not None:
        await client.aclose()
