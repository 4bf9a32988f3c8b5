"""
Source Registry.

Ordered, in-memory collection of ingested sources. The only thing it enforces
is uniqueness of the natural document id: a source whose id (exact, case
sensitive string) is already registered is rejected and the registry is left
as it was. No aggregate state lives here; consolidated views are rebuilt from
`list()` on every request.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from warehouse_ops.models.records import Source

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    duplicate_document = "duplicate_document"


@dataclass(frozen=True)
class RejectedSource:
    source: Source
    reason: RejectionReason

    @property
    def natural_document_id(self) -> str:
        return self.source.natural_document_id


@dataclass(frozen=True)
class RegistrationResult:
    accepted: bool
    rejection: Optional[RejectedSource] = None


@dataclass
class BatchRegistrationResult:
    accepted: list[Source] = field(default_factory=list)
    rejected: list[RejectedSource] = field(default_factory=list)

    @property
    def rejected_document_ids(self) -> list[str]:
        return [r.natural_document_id for r in self.rejected]


class SourceNotFoundError(KeyError):
    """Raised when a source id is not registered."""

    def __init__(self, source_id: str):
        super().__init__(source_id)
        self.source_id = source_id
        self.message = f"Source '{source_id}' is not registered"
        self.status_code = 404

    def __str__(self) -> str:
        return self.message


class SourceRegistry:
    """Insertion-ordered sources keyed by their internal id."""

    def __init__(self):
        self._sources: dict[str, Source] = {}
        self._lock = threading.Lock()

    def register(self, source: Source) -> RegistrationResult:
        """
        Add a source unless its natural document id is already present.

        Returns:
            RegistrationResult; on rejection the registry is unchanged
        """
        with self._lock:
            return self._register_locked(source)

    def register_batch(self, sources: Iterable[Source]) -> BatchRegistrationResult:
        """
        Register sources in order.

        Each one is checked against everything registered before it, including
        earlier members of the same batch. Accepted sources stay registered
        even when a later one is rejected.
        """
        result = BatchRegistrationResult()
        with self._lock:
            for source in sources:
                outcome = self._register_locked(source)
                if outcome.accepted:
                    result.accepted.append(source)
                elif outcome.rejection is not None:
                    result.rejected.append(outcome.rejection)
        return result

    def _register_locked(self, source: Source) -> RegistrationResult:
        for existing in self._sources.values():
            if existing.natural_document_id == source.natural_document_id:
                logger.warning(
                    "Rejected duplicate document",
                    extra={
                        "document_id": source.natural_document_id,
                        "file_name": source.file_name,
                        "existing_source_id": existing.id,
                    },
                )
                return RegistrationResult(
                    accepted=False,
                    rejection=RejectedSource(source, RejectionReason.duplicate_document),
                )

        self._sources[source.id] = source
        logger.info(
            "Registered source",
            extra={
                "source_id": source.id,
                "document_id": source.natural_document_id,
                "material_rows": len(source.material_records),
            },
        )
        return RegistrationResult(accepted=True)

    def remove(self, source_id: str) -> Source:
        """
        Remove a registered source.

        Raises:
            SourceNotFoundError: If no source has this id
        """
        with self._lock:
            try:
                source = self._sources.pop(source_id)
            except KeyError:
                raise SourceNotFoundError(source_id) from None
        logger.info("Removed source", extra={"source_id": source_id})
        return source

    def get(self, source_id: str) -> Optional[Source]:
        with self._lock:
            return self._sources.get(source_id)

    def list(self) -> list[Source]:
        """Registered sources in insertion order."""
        with self._lock:
            return list(self._sources.values())

    def document_ids(self) -> list[str]:
        with self._lock:
            return [s.natural_document_id for s in self._sources.values()]

    def clear(self) -> None:
        with self._lock:
            self._sources.clear()

    def __contains__(self, source_id: object) -> bool:
        with self._lock:
            return source_id in self._sources

    def __len__(self) -> int:
        with self._lock:
            return len(self._sources)
