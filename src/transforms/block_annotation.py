"""Block annotation transform.

This module stamps each record with the name of the block covering it,
using the ``range;block name`` rows of Blocks.txt.
"""

from __future__ import annotations

from typing import Iterable

from core.logging_config import get_logger
from core.types import RecordMap
from ingest.range_file import RangeRow
from transforms.record_stamping import stamp_records

_LOGGER = get_logger(__name__)


def annotate_blocks(records: RecordMap, rows: Iterable[RangeRow]) -> int:
    """Set ``block`` on every record covered by a block range.

    Args:
        records: Record map mutated in place.
        rows: Decoded Blocks.txt rows.

    Returns:
        Number of record updates applied.
    """
    updated = 0
    block_count = 0
    for row in rows:
        block_count += 1
        updated += stamp_records(records, row.codepoints, "block", row.value.strip())
    _LOGGER.info("blocks_annotated", block_count=block_count, records_updated=updated)
    return updated
