"""
Integration tests for the consolidation API.

Tests cover:
- Uploading one or several delivery notes
- Duplicate document rejection
- Switching views and removing uploads
- XLSX exports
- Material classification endpoints
- Error handling (unreadable files, unknown sources)
"""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from conftest import DN_HEADER, dn_row, table_to_xlsx
from warehouse_ops.config import get_settings
from warehouse_ops.dependencies import reset_state
from warehouse_ops.main import app

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    """Create a FastAPI test client with empty upload state."""
    reset_state()
    yield TestClient(app)
    reset_state()


def _dn_file(dn_no, rows, name=None):
    table = [DN_HEADER] + [dn_row(dn_no, *row) for row in rows]
    return ("files", (name or f"{dn_no}.xlsx", table_to_xlsx(table), XLSX_MIME))


@pytest.fixture
def dn_8001():
    return _dn_file("8001", [
        ("BS0900EAE", "Fridge 90L", "SN-001", "Shop A", "2"),
        ("BS0900EAE", "Fridge 90L", "SN-002", "Shop B", "3"),
    ])


@pytest.fixture
def dn_8002():
    return _dn_file("8002", [
        ("BS0900EAE", "Fridge 90L", "SN-101", "Shop C", "4"),
        ("TD0038301", "TV 55", "SN-102", "Shop C", "1"),
    ])


class TestUpload:
    """Tests for POST /api/uploads."""

    def test_single_upload(self, client, dn_8001):
        response = client.post("/api/uploads", files=[dn_8001])

        assert response.status_code == 200
        data = response.json()
        assert [s["document_id"] for s in data["accepted"]] == ["8001"]
        assert data["accepted"][0]["total_quantity"] == 5
        assert data["rejected"] == []

        view = data["view"]
        assert view["mode"] == "all"
        assert view["rows"] == [{
            "material_code": "BS0900EAE",
            "material_description": "Fridge 90L",
            "category": "Refrigerator",
            "qty": 5,
            "ship_name": "Shop A, Shop B",
            "remarks": "8001",
        }]
        assert view["total_serials"] == 2

    def test_two_uploads_keep_documents_apart(self, client, dn_8001, dn_8002):
        response = client.post("/api/uploads", files=[dn_8001, dn_8002])

        rows = response.json()["view"]["rows"]
        assert [(r["material_code"], r["remarks"], r["qty"]) for r in rows] == [
            ("BS0900EAE", "8001", 5),
            ("BS0900EAE", "8002", 4),
            ("TD0038301", "8002", 1),
        ]
        assert rows[2]["category"] == "TV"
        assert response.json()["view"]["total_quantity"] == 10

    def test_duplicate_document_is_rejected(self, client, dn_8001):
        client.post("/api/uploads", files=[dn_8001])
        again = _dn_file("8001", [("BS0900EAE", "Fridge 90L", "SN-009", "Shop Z", "7")], "copy.xlsx")

        response = client.post("/api/uploads", files=[again])

        assert response.status_code == 200
        data = response.json()
        assert data["accepted"] == []
        assert data["rejected"] == [
            {"document_id": "8001", "file_name": "copy.xlsx", "reason": "duplicate_document"}
        ]
        assert data["view"]["total_quantity"] == 5

    def test_document_number_overrides_dn_column(self, client, dn_8001):
        response = client.post("/api/uploads", files=[dn_8001], data={"document_number": "MANUAL-9"})
        assert response.json()["accepted"][0]["document_id"] == "MANUAL-9"
        assert response.json()["view"]["rows"][0]["remarks"] == "MANUAL-9"

    def test_document_number_with_several_files_returns_422(self, client, dn_8001, dn_8002):
        response = client.post(
            "/api/uploads", files=[dn_8001, dn_8002], data={"document_number": "X"}
        )
        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "document_number"

    def test_unreadable_single_file_returns_422(self, client):
        response = client.post(
            "/api/uploads", files=[("files", ("notes.xlsx", b"not a workbook", XLSX_MIME))]
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "VALIDATION"

    def test_empty_single_file_returns_422(self, client):
        response = client.post("/api/uploads", files=[("files", ("empty.xlsx", b"", XLSX_MIME))])
        assert response.status_code == 422

    def test_unreadable_file_in_batch_is_reported(self, client, dn_8001):
        response = client.post(
            "/api/uploads",
            files=[dn_8001, ("files", ("notes.xlsx", b"not a workbook", XLSX_MIME))],
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["accepted"]) == 1
        assert [u["file_name"] for u in data["unreadable"]] == ["notes.xlsx"]

    def test_warnings_for_skipped_rows_and_missing_dn(self, client):
        table = [["Material Code", "Qty"], ["BS0900EAE", "2"], ["", "1"]]
        response = client.post(
            "/api/uploads", files=[("files", ("nodn.xlsx", table_to_xlsx(table), XLSX_MIME))]
        )
        data = response.json()
        assert data["accepted"][0]["document_id"] == "N/A"
        assert data["accepted"][0]["skipped_rows"] == 1
        reasons = " ".join(w["reason"] for w in data["warnings"])
        assert "skipped" in reasons
        assert "N/A" in reasons

    def test_csv_upload(self, client):
        csv = b"DN No,Material Code,Material Desc,Qty\n8100,BS0900EAE,Fridge,3\n"
        response = client.post("/api/uploads", files=[("files", ("dn.csv", csv, "text/csv"))])
        assert response.json()["view"]["rows"][0]["qty"] == 3


class TestSourcesAndViews:
    """Tests for listing, removing and switching views."""

    def test_list_sources(self, client, dn_8001, dn_8002):
        client.post("/api/uploads", files=[dn_8001, dn_8002])
        data = client.get("/api/uploads").json()
        assert data["total"] == 2
        assert [s["document_id"] for s in data["items"]] == ["8001", "8002"]

    def test_single_view_and_removal_fallback(self, client, dn_8001, dn_8002):
        accepted = client.post("/api/uploads", files=[dn_8001, dn_8002]).json()["accepted"]
        first_id = accepted[0]["id"]

        single = client.get(f"/api/views/{first_id}").json()
        assert single["mode"] == "single"
        assert [r["remarks"] for r in single["rows"]] == ["8001"]
        assert client.get("/api/views/current").json()["source_id"] == first_id

        after = client.delete(f"/api/uploads/{first_id}").json()
        assert after["mode"] == "all"
        assert {r["remarks"] for r in after["rows"]} == {"8002"}

    def test_removed_document_can_be_uploaded_again(self, client, dn_8001):
        source_id = client.post("/api/uploads", files=[dn_8001]).json()["accepted"][0]["id"]
        client.delete(f"/api/uploads/{source_id}")
        response = client.post("/api/uploads", files=[dn_8001])
        assert len(response.json()["accepted"]) == 1

    def test_all_view(self, client, dn_8001):
        client.post("/api/uploads", files=[dn_8001])
        assert client.get("/api/views/all").json()["mode"] == "all"

    def test_unknown_source_view_returns_404(self, client):
        response = client.get("/api/views/does-not-exist")
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "NOT_FOUND"

    def test_remove_unknown_source_returns_404(self, client):
        assert client.delete("/api/uploads/does-not-exist").status_code == 404

    def test_clear(self, client, dn_8001, dn_8002):
        client.post("/api/uploads", files=[dn_8001, dn_8002])
        view = client.delete("/api/uploads").json()
        assert view["rows"] == []
        assert client.get("/api/uploads").json()["total"] == 0
        assert client.get("/health").json()["sources"] == 0


class TestExports:
    """Tests for the XLSX download endpoints."""

    def test_consolidated_export(self, client, dn_8001):
        client.post("/api/uploads", files=[dn_8001])

        response = client.get("/api/exports/consolidated.xlsx")

        assert response.status_code == 200
        assert "Consolidated_Materials.xlsx" in response.headers["content-disposition"]
        ws = load_workbook(BytesIO(response.content)).active
        assert ws.cell(row=2, column=1).value == "BS0900EAE"
        assert ws.cell(row=2, column=4).value == 5

    def test_serials_export_follows_single_view(self, client, dn_8001, dn_8002):
        accepted = client.post("/api/uploads", files=[dn_8001, dn_8002]).json()["accepted"]
        client.get(f"/api/views/{accepted[1]['id']}")

        response = client.get("/api/exports/serials.xlsx")

        ws = load_workbook(BytesIO(response.content)).active
        barcodes = [row[5] for row in ws.iter_rows(min_row=2, values_only=True)]
        assert barcodes == ["SN-101", "SN-102"]

    def test_all_dn_export(self, client, dn_8001, dn_8002):
        client.post("/api/uploads", files=[dn_8001, dn_8002])
        response = client.get("/api/exports/dn.xlsx")
        assert load_workbook(BytesIO(response.content)).sheetnames == ["8001", "8002"]

    def test_single_dn_export(self, client, dn_8001):
        source_id = client.post("/api/uploads", files=[dn_8001]).json()["accepted"][0]["id"]
        response = client.get(f"/api/exports/dn/{source_id}.xlsx")
        assert response.status_code == 200
        assert "8001_Serial_List.xlsx" in response.headers["content-disposition"]

    def test_single_dn_export_unknown_returns_404(self, client):
        assert client.get("/api/exports/dn/nope.xlsx").status_code == 404


class TestMaterialEndpoints:
    """Tests for classification and resolution endpoints."""

    def test_classify_exact(self, client):
        data = client.get("/api/materials/classify/bs0900eae").json()
        assert data == {
            "code": "bs0900eae",
            "normalized_code": "BS0900EAE",
            "category": "Refrigerator",
            "exact_match": True,
            "rule": None,
        }

    def test_classify_by_rule(self, client):
        data = client.get("/api/materials/classify/TD0038301").json()
        assert data["category"] == "TV"
        assert data["rule"] == "tv-prefixes"

    def test_classify_unknown(self, client):
        data = client.get("/api/materials/classify/ZZZZZZZZZ").json()
        assert data["category"] == "Others"
        assert data["rule"] is None

    def test_resolve_without_lookup_service(self, client):
        data = client.get("/api/materials/resolve/FS03B7E").json()
        assert data["category"] == "Water System"
        assert data["source"] == "category_mapping"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["sources"] == 0

    def test_debug_follows_settings(self):
        assert app.debug is get_settings().debug
