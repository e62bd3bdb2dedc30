"""Age annotation transform.

This module stamps each record with the Unicode version that first
assigned it, using the rows of DerivedAge.txt.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import COMMENT_PREFIX
from core.logging_config import get_logger
from core.types import RecordMap
from ingest.range_file import RangeRow
from transforms.record_stamping import stamp_records

_LOGGER = get_logger(__name__)


def annotate_ages(records: RecordMap, rows: Iterable[RangeRow]) -> int:
    """Set ``age`` on every record covered by an age range.

    Args:
        records: Record map mutated in place.
        rows: Decoded DerivedAge.txt rows.

    Returns:
        Number of record updates applied.
    """
    updated = 0
    for row in rows:
        updated += stamp_records(records, row.codepoints, "age", parse_version(row.value))
    _LOGGER.info("ages_annotated", records_updated=updated)
    return updated


def parse_version(value: str) -> str:
    """Strip a trailing comment from an age field, e.g. ``" 1.1 #  [32]"``."""
    return value.split(COMMENT_PREFIX, 1)[0].strip()
