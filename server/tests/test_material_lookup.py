"""
Unit tests for the material lookup client and the resolver fallback.

Tests use httpx.MockTransport (no real network calls).
"""

import asyncio
import time
from unittest.mock import MagicMock, patch

import httpx
import pytest

from warehouse_ops.clients.material_lookup_client import (
    LookupApiError,
    LookupClientConfigError,
    MaterialDescriptor,
    MaterialLookupClient,
    TTLCache,
)
from warehouse_ops.services.material_resolver import (
    CATEGORY_MAPPING_SOURCE,
    classify_descriptor,
    resolve_material,
)


BASE_URL = "http://materials-service:8000"


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def mock_settings():
    """Mock settings without a lookup service configured."""
    settings = MagicMock()
    settings.material_lookup_base_url = None
    settings.material_lookup_timeout_seconds = 5
    settings.material_lookup_cache_ttl_seconds = 300
    return settings


@pytest.fixture
def lookup_payload():
    return {
        "barcode": "6901234567890",
        "material_code": "BS0900EAE",
        "material_description": "Fridge 90L",
        "category": "Refrigerator",
    }


def make_client(handler, **kwargs) -> MaterialLookupClient:
    return MaterialLookupClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def run(coro):
    return asyncio.run(coro)


# =============================================================================
# TTLCache Tests
# =============================================================================


class TestTTLCache:
    """Tests for the in-memory TTL cache."""

    def test_set_and_get(self):
        cache = TTLCache(ttl_seconds=60)
        descriptor = MaterialDescriptor(barcode="X", material_code="X")
        cache.set("k", descriptor)
        assert cache.get("k") is descriptor

    def test_missing_key(self):
        assert TTLCache().get("nothing") is None

    def test_expired_entry(self):
        cache = TTLCache(ttl_seconds=1)
        cache.set("k", MaterialDescriptor(barcode="X", material_code="X"))
        with patch("warehouse_ops.clients.material_lookup_client.time.time", return_value=time.time() + 5):
            assert cache.get("k") is None
        assert len(cache) == 0


# =============================================================================
# Client Tests
# =============================================================================


class TestMaterialLookupClient:
    """Tests for MaterialLookupClient."""

    def test_successful_lookup(self, lookup_payload):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["barcode"] = request.url.params["barcode"]
            return httpx.Response(200, json=lookup_payload)

        async def scenario():
            async with make_client(handler) as client:
                return await client.lookup(" 6901234567890 ")

        result = run(scenario())

        assert seen == {"path": "/api/materials/lookup", "barcode": "6901234567890"}
        assert result.material_code == "BS0900EAE"
        assert result.category == "Refrigerator"
        assert result.source == "lookup"

    def test_not_found_returns_none(self):
        async def scenario():
            async with make_client(lambda request: httpx.Response(404)) as client:
                return await client.lookup("UNKNOWN")

        assert run(scenario()) is None

    def test_empty_body_returns_none(self):
        async def scenario():
            async with make_client(lambda request: httpx.Response(200)) as client:
                return await client.lookup("UNKNOWN")

        assert run(scenario()) is None

    def test_blank_barcode_skips_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        async def scenario():
            async with make_client(handler) as client:
                return await client.lookup("   ")

        assert run(scenario()) is None

    def test_server_error_raises(self):
        async def scenario():
            async with make_client(
                lambda request: httpx.Response(500, json={"detail": "boom"})
            ) as client:
                await client.lookup("X")

        with pytest.raises(LookupApiError) as exc_info:
            run(scenario())
        assert exc_info.value.status_code == 500
        assert "boom" in exc_info.value.message

    @pytest.mark.parametrize("payload", [[{"material_code": "X"}], "BS0900EAE", 42])
    def test_non_object_body_raises_502(self, payload):
        async def scenario():
            async with make_client(lambda request: httpx.Response(200, json=payload)) as client:
                await client.lookup("X")

        with pytest.raises(LookupApiError) as exc_info:
            run(scenario())
        assert exc_info.value.status_code == 502

    def test_timeout_raises_504(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async def scenario():
            async with make_client(handler) as client:
                await client.lookup("X")

        with pytest.raises(LookupApiError) as exc_info:
            run(scenario())
        assert exc_info.value.status_code == 504

    def test_connection_error_raises_503(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async def scenario():
            async with make_client(handler) as client:
                await client.lookup("X")

        with pytest.raises(LookupApiError) as exc_info:
            run(scenario())
        assert exc_info.value.status_code == 503

    def test_hits_are_cached(self, lookup_payload):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=lookup_payload)

        async def scenario():
            async with make_client(handler) as client:
                first = await client.lookup("6901234567890")
                second = await client.lookup("6901234567890")
                return first, second

        first, second = run(scenario())
        assert first == second
        assert len(calls) == 1

    def test_unconfigured_base_url(self, mock_settings):
        with patch("warehouse_ops.clients.material_lookup_client.get_settings", return_value=mock_settings):
            client = MaterialLookupClient()

        assert not client.is_configured
        with pytest.raises(LookupClientConfigError):
            client.base_url


# =============================================================================
# Resolver Tests
# =============================================================================


class TestResolveMaterial:
    """Lookup first, category mapping as fallback."""

    def test_lookup_hit_is_returned(self, lookup_payload):
        async def scenario():
            async with make_client(lambda request: httpx.Response(200, json=lookup_payload)) as client:
                return await resolve_material("6901234567890", client)

        result = run(scenario())
        assert result.source == "lookup"
        assert result.material_description == "Fridge 90L"

    def test_miss_falls_back_to_classifier(self):
        async def scenario():
            async with make_client(lambda request: httpx.Response(404)) as client:
                return await resolve_material("bs0900eae", client)

        result = run(scenario())
        assert result.source == CATEGORY_MAPPING_SOURCE
        assert result.material_code == "BS0900EAE"
        assert result.category == "Refrigerator"

    def test_failure_falls_back_to_classifier(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        async def scenario():
            async with make_client(handler) as client:
                return await resolve_material("TD0038301", client)

        result = run(scenario())
        assert result.source == CATEGORY_MAPPING_SOURCE
        assert result.category == "TV"
        assert len(calls) == 1

    def test_non_object_body_falls_back_to_classifier(self):
        async def scenario():
            async with make_client(
                lambda request: httpx.Response(200, json=[{"material_code": "X"}])
            ) as client:
                return await resolve_material("BS0900EAE", client)

        result = run(scenario())
        assert result.source == CATEGORY_MAPPING_SOURCE
        assert result.category == "Refrigerator"

    def test_without_client(self):
        result = run(resolve_material("ZZZZZZZZZ", None))
        assert result.category == "Others"
        assert result.source == CATEGORY_MAPPING_SOURCE

    def test_classify_descriptor(self):
        descriptor = classify_descriptor("  fs03b7e ")
        assert descriptor.barcode == "fs03b7e"
        assert descriptor.material_code == "FS03B7E"
        assert descriptor.category == "Water System"
