"""
Consolidation Aggregator.

Builds consolidated views from ingested sources without touching them.

Material records are grouped by (material_code, description, remarks). Since
`remarks` holds the owning source's document id, the same material in two
different documents stays on two rows; within one document repeated lines are
summed. Serial records are never summed, only concatenated.
"""

from __future__ import annotations

from typing import Iterable

from warehouse_ops.models.records import AggregateRow, MaterialRecord, SerialRecord, Source


def _aggregate_records(records: Iterable[MaterialRecord]) -> list[AggregateRow]:
    groups: dict[tuple[str, str, str], AggregateRow] = {}

    for record in records:
        key = (record.material_code, record.description, record.remarks)
        row = groups.get(key)
        if row is None:
            # category of the first contributing record wins
            row = AggregateRow(
                material_code=record.material_code,
                description=record.description,
                category=record.category,
                qty=0,
                remarks=record.remarks,
            )
            groups[key] = row

        row.qty += record.qty
        if record.ship_name and record.ship_name not in row.ship_names:
            row.ship_names.append(record.ship_name)

    # dicts keep insertion order, i.e. first appearance of each key
    return list(groups.values())


def aggregate_all(sources: Iterable[Source]) -> list[AggregateRow]:
    """Aggregate every material record of every source, in registration order."""
    return _aggregate_records(
        record for source in sources for record in source.material_records
    )


def aggregate_one(source: Source) -> list[AggregateRow]:
    """Aggregate the material records of a single source."""
    return _aggregate_records(source.material_records)


def serials_for(source: Source) -> list[SerialRecord]:
    """Valid serial records of one source, in row order."""
    return [serial for serial in source.serial_records if serial.is_valid]


def union_serials(sources: Iterable[Source]) -> list[SerialRecord]:
    """Concatenate the valid serial records of all sources, without dedup."""
    return [serial for source in sources for serial in serials_for(source)]


def total_quantity(rows: Iterable[AggregateRow]) -> int:
    return sum(row.qty for row in rows)
