"""
View Selector.

Tracks which consolidated view the user is looking at: all sources together,
or a single source. Its only state is that choice; the rows are recomputed
from the live registry each time a view is requested, so removing or adding
sources can never leave a stale total behind.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from warehouse_ops.models.records import AggregateRow, SerialRecord
from warehouse_ops.services.consolidation_aggregator import (
    aggregate_all,
    aggregate_one,
    serials_for,
    union_serials,
)
from warehouse_ops.services.source_registry import SourceNotFoundError, SourceRegistry

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    all = "all"
    single = "single"


@dataclass(frozen=True)
class ConsolidatedView:
    mode: ViewMode
    source_id: Optional[str] = None
    rows: list[AggregateRow] = field(default_factory=list)
    serials: list[SerialRecord] = field(default_factory=list)


class ViewSelector:
    """Active view over a SourceRegistry."""

    def __init__(self, registry: SourceRegistry):
        self.registry = registry
        self._mode = ViewMode.all
        self._source_id: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def active_source_id(self) -> Optional[str]:
        return self._source_id

    def show_all(self) -> ConsolidatedView:
        with self._lock:
            self._mode = ViewMode.all
            self._source_id = None
        return self._build_all()

    def show_one(self, source_id: str) -> ConsolidatedView:
        """
        Switch to a single source.

        Raises:
            SourceNotFoundError: If the source is not registered; the active
                view is left unchanged
        """
        source = self.registry.get(source_id)
        if source is None:
            raise SourceNotFoundError(source_id)

        with self._lock:
            self._mode = ViewMode.single
            self._source_id = source_id

        return ConsolidatedView(
            mode=ViewMode.single,
            source_id=source_id,
            rows=aggregate_one(source),
            serials=serials_for(source),
        )

    def after_removal(self, removed_source_id: str) -> ConsolidatedView:
        """
        Remove a source from the registry and recompute the active view.

        If the removed source was the one being shown, fall back to all sources.

        Raises:
            SourceNotFoundError: If the source is not registered; the active
                view is left unchanged
        """
        self.registry.remove(removed_source_id)

        with self._lock:
            if self._mode == ViewMode.single and self._source_id == removed_source_id:
                logger.info(
                    "Active source removed; showing all sources",
                    extra={"source_id": removed_source_id},
                )
                self._mode = ViewMode.all
                self._source_id = None
        return self.current()

    def current(self) -> ConsolidatedView:
        """Recompute the active view from the registry."""
        with self._lock:
            mode, source_id = self._mode, self._source_id

        if mode == ViewMode.single and source_id is not None:
            source = self.registry.get(source_id)
            if source is not None:
                return ConsolidatedView(
                    mode=ViewMode.single,
                    source_id=source_id,
                    rows=aggregate_one(source),
                    serials=serials_for(source),
                )
            # source vanished without after_removal being called
            with self._lock:
                self._mode = ViewMode.all
                self._source_id = None

        return self._build_all()

    def clear(self) -> ConsolidatedView:
        """Empty the registry and go back to the all-sources view."""
        self.registry.clear()
        return self.show_all()

    def _build_all(self) -> ConsolidatedView:
        sources = self.registry.list()
        return ConsolidatedView(
            mode=ViewMode.all,
            rows=aggregate_all(sources),
            serials=union_serials(sources),
        )
