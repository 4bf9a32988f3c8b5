"""Models package exports."""

from warehouse_ops.models.records import (
    AggregateRow,
    MaterialRecord,
    SerialRecord,
    Source,
)

__all__ = [
    "AggregateRow",
    "MaterialRecord",
    "SerialRecord",
    "Source",
]
