"""
Unit tests for the View Selector.
"""

import pytest

from conftest import make_source, material, serial
from warehouse_ops.services.source_registry import SourceNotFoundError, SourceRegistry
from warehouse_ops.services.view_selector import ViewMode, ViewSelector


@pytest.fixture
def registry():
    registry = SourceRegistry()
    registry.register(make_source(
        "s1", "DN-1",
        [material("A", "a", 2, "DN-1")],
        [serial("DN-1", "A", "SN1")],
    ))
    registry.register(make_source(
        "s2", "DN-2",
        [material("A", "a", 3, "DN-2"), material("B", "b", 1, "DN-2")],
        [serial("DN-2", "A", "SN2")],
    ))
    return registry


@pytest.fixture
def selector(registry):
    return ViewSelector(registry)


class TestViewSelector:
    """Tests for switching and recomputing views."""

    def test_starts_in_all_mode(self, selector):
        view = selector.current()
        assert view.mode == ViewMode.all
        assert view.source_id is None
        assert len(view.rows) == 3
        assert [s.barcode for s in view.serials] == ["SN1", "SN2"]

    def test_show_one(self, selector):
        view = selector.show_one("s2")
        assert view.mode == ViewMode.single
        assert view.source_id == "s2"
        assert [(r.material_code, r.qty) for r in view.rows] == [("A", 3), ("B", 1)]
        assert selector.current().source_id == "s2"

    def test_show_one_unknown_keeps_view(self, selector):
        selector.show_one("s1")
        with pytest.raises(SourceNotFoundError):
            selector.show_one("missing")
        assert selector.active_source_id == "s1"

    def test_show_all_after_single(self, selector):
        selector.show_one("s1")
        view = selector.show_all()
        assert view.mode == ViewMode.all
        assert selector.mode == ViewMode.all

    def test_removing_active_source_falls_back_to_all(self, selector, registry):
        selector.show_one("s1")

        view = selector.after_removal("s1")

        assert view.mode == ViewMode.all
        assert [r.remarks for r in view.rows] == ["DN-2", "DN-2"]
        assert "s1" not in registry

    def test_removing_other_source_keeps_single_view(self, selector, registry):
        selector.show_one("s1")

        view = selector.after_removal("s2")

        assert view.mode == ViewMode.single
        assert view.source_id == "s1"
        assert "s2" not in registry

    def test_after_removal_removes_from_registry(self, selector, registry):
        view = selector.after_removal("s2")

        assert [s.id for s in registry.list()] == ["s1"]
        assert [(r.remarks, r.qty) for r in view.rows] == [("DN-1", 2)]
        assert [s.barcode for s in view.serials] == ["SN1"]

    def test_after_removal_unknown_source_raises(self, selector, registry):
        selector.show_one("s1")
        with pytest.raises(SourceNotFoundError):
            selector.after_removal("missing")
        assert selector.active_source_id == "s1"
        assert len(registry) == 2

    def test_view_reflects_new_registrations(self, selector, registry):
        before = selector.current()
        registry.register(make_source("s3", "DN-3", [material("C", "c", 9, "DN-3")]))
        after = selector.current()
        assert len(after.rows) == len(before.rows) + 1

    def test_current_recovers_if_active_source_vanished(self, selector, registry):
        selector.show_one("s1")
        registry.remove("s1")
        assert selector.current().mode == ViewMode.all

    def test_clear(self, selector, registry):
        selector.show_one("s1")
        view = selector.clear()
        assert view.mode == ViewMode.all
        assert view.rows == []
        assert len(registry) == 0
