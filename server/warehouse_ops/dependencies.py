"""
Process-wide state shared by the routers.

Uploads live in memory for the life of the process: one SourceRegistry and
one ViewSelector over it. Routers receive them through FastAPI dependencies
so tests can swap them with `app.dependency_overrides`.
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from warehouse_ops.services.source_registry import SourceRegistry
from warehouse_ops.services.view_selector import ViewSelector

_registry: Optional[SourceRegistry] = None
_selector: Optional[ViewSelector] = None
_state_lock = Lock()


def _init_state() -> None:
    global _registry, _selector
    with _state_lock:
        if _registry is None or _selector is None:
            _registry = SourceRegistry()
            _selector = ViewSelector(_registry)


def get_registry() -> SourceRegistry:
    if _registry is None:
        _init_state()
    return _registry


def get_view_selector() -> ViewSelector:
    if _selector is None:
        _init_state()
    return _selector


def reset_state() -> None:
    """Drop all uploads and the active view (used on shutdown and in tests)."""
    global _registry, _selector
    with _state_lock:
        _registry = None
        _selector = None
