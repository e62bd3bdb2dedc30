"""Reader for ``range;value`` UCD property files.

Blocks.txt and DerivedAge.txt share this layout: ``#`` starts a comment
line and rows that do not split into exactly two fields are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from core.constants import COMMENT_PREFIX
from core.errors import UnidataRecordError
from ingest.field_decoding import parse_codepoint_range


@dataclass(frozen=True)
class RangeRow:
    """One decoded property row.

    Attributes:
        codepoints: Inclusive codepoint interval covered by the row.
        value: Raw second field, untrimmed.
        line_number: One-based source line number.
    """

    codepoints: range
    value: str
    line_number: int


def read_range_rows(file_path: Path) -> Iterator[RangeRow]:
    """Yield decoded rows of a range property file.

    Args:
        file_path: Path to Blocks.txt, DerivedAge.txt, or a similar file.

    Yields:
        Range rows in file order.

    Raises:
        UnidataRecordError: If the file is unreadable or a range is not hex.
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as error:
        raise UnidataRecordError(
            f"Failed to read {file_path}: {error}. "
            "Delete the cached file and rerun the build to download it again."
        ) from error
    yield from parse_range_lines(content.splitlines(), file_path.name)


def parse_range_lines(lines: list[str], source_name: str) -> Iterator[RangeRow]:
    """Yield decoded rows from raw range file lines."""
    for line_number, line in enumerate(lines, 1):
        fields = line.split(";")
        if len(fields) != 2:
            continue
        range_text = fields[0].strip()
        if range_text.startswith(COMMENT_PREFIX):
            continue
        try:
            codepoints = parse_codepoint_range(range_text)
        except ValueError as error:
            raise UnidataRecordError(
                f"Malformed range at {source_name}:{line_number}: {error}. "
                "Delete the cached file and rerun the build."
            ) from error
        yield RangeRow(codepoints=codepoints, value=fields[1], line_number=line_number)
