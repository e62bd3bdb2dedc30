"""Shared helper for writing one annotation field onto existing records."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from core.types import RecordMap


def stamp_records(
    records: RecordMap,
    codepoints: Iterable[int],
    field_name: str,
    value: object,
) -> int:
    """Set one field on every listed codepoint present in the map.

    Codepoints without a record are skipped. Later calls overwrite earlier
    values for the same field.

    Args:
        records: Record map mutated in place.
        codepoints: Candidate codepoints.
        field_name: Record attribute to set.
        value: New attribute value.

    Returns:
        Number of records updated.
    """
    updated = 0
    for codepoint in codepoints:
        record = records.get(codepoint)
        if record is None:
            continue
        records[codepoint] = replace(record, **{field_name: value})
        updated += 1
    return updated
