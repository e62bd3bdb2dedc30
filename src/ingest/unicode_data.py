"""UnicodeData.txt parser.

This module turns the primary 15-field UCD file into the record map
that every later build stage annotates. ``First>``/``Last>`` row pairs
are expanded into one record per codepoint of the range.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator

from core.constants import UNICODE_DATA_FIELD_COUNT, UNICODE_DATA_FILE_NAME
from core.errors import UnidataRecordError
from core.logging_config import get_logger
from core.types import RecordMap, UnicodeCharRecord
from core.ucd_codes import BidiClass, GeneralCategory
from ingest.field_decoding import (
    classify_numeric,
    parse_bidi_mirrored,
    parse_case_mapping,
    parse_code,
    parse_decomposition,
    parse_hex,
    parse_optional_int,
)

_LOGGER = get_logger(__name__)

_RANGE_FIRST_TAG = "First>"
_RANGE_LAST_TAG = "Last>"


@dataclass(frozen=True)
class UnicodeDataRow:
    """One raw row of UnicodeData.txt with its location."""

    line_number: int
    fields: tuple[str, ...]

    @property
    def hexcode(self) -> str:
        return self.fields[0]

    @property
    def name(self) -> str:
        return self.fields[1]


class PeekableRows:
    """Row iterator with one-row lookahead."""

    def __init__(self, rows: Iterable[UnicodeDataRow]) -> None:
        self._rows = iter(rows)
        self._buffered: UnicodeDataRow | None = None

    def __iter__(self) -> Iterator[UnicodeDataRow]:
        return self

    def __next__(self) -> UnicodeDataRow:
        if self._buffered is not None:
            row, self._buffered = self._buffered, None
            return row
        return next(self._rows)

    def peek(self) -> UnicodeDataRow | None:
        """Return the next row without consuming it, or None at the end."""
        if self._buffered is None:
            self._buffered = next(self._rows, None)
        return self._buffered


def parse_unicode_data_file(file_path: Path) -> RecordMap:
    """Parse UnicodeData.txt into a codepoint-keyed record map.

    Args:
        file_path: Path to the cached UnicodeData.txt.

    Returns:
        Records keyed by codepoint in ascending file order.

    Raises:
        UnidataRecordError: If the file is unreadable or any row is malformed.
    """
    try:
        with file_path.open(encoding="utf-8", newline="") as handle:
            records = parse_unicode_data_lines(handle, source_name=file_path.name)
    except OSError as error:
        raise UnidataRecordError(
            f"Failed to read {file_path}: {error}. "
            "Delete the cached file and rerun the build to download it again."
        ) from error
    _LOGGER.info("unicode_data_parsed", path=str(file_path), record_count=len(records))
    return records


def parse_unicode_data_lines(
    lines: Iterable[str],
    source_name: str = UNICODE_DATA_FILE_NAME,
) -> RecordMap:
    """Parse UnicodeData.txt content into a record map.

    Args:
        lines: Raw file lines.
        source_name: File name used in error messages.

    Returns:
        Records keyed by codepoint.

    Raises:
        UnidataRecordError: If any row is malformed or a range pair is broken.
    """
    records: RecordMap = {}
    rows = PeekableRows(_read_rows(lines, source_name))
    for row in rows:
        record = _build_record(row, source_name)
        if not row.name.endswith(_RANGE_FIRST_TAG):
            records[record.codepoint] = record
            continue
        last_codepoint = _consume_range_end(rows, row, record.codepoint, source_name)
        for codepoint in range(record.codepoint, last_codepoint + 1):
            records[codepoint] = replace(record, codepoint=codepoint)
    return records


def range_label(name: str) -> str:
    """Return the shared label of a range row, e.g. ``CJK Ideograph``."""
    return name.split(",", 1)[0].lstrip("<").strip()


def _read_rows(lines: Iterable[str], source_name: str) -> Iterator[UnicodeDataRow]:
    reader = csv.reader(lines, delimiter=";", quoting=csv.QUOTE_NONE)
    for fields in reader:
        if not fields:
            continue
        if len(fields) != UNICODE_DATA_FIELD_COUNT:
            raise UnidataRecordError(
                f"Malformed row at {source_name}:{reader.line_num}: "
                f"expected {UNICODE_DATA_FIELD_COUNT} fields, got {len(fields)}. "
                "Delete the cached file and rerun the build."
            )
        yield UnicodeDataRow(line_number=reader.line_num, fields=tuple(fields))


def _consume_range_end(
    rows: PeekableRows,
    first_row: UnicodeDataRow,
    first_codepoint: int,
    source_name: str,
) -> int:
    """Consume the ``Last>`` row that closes a range and return its codepoint."""
    last_row = rows.peek()
    label = range_label(first_row.name)
    if (
        last_row is None
        or not last_row.name.endswith(_RANGE_LAST_TAG)
        or range_label(last_row.name) != label
    ):
        raise UnidataRecordError(
            f"Unterminated range at {source_name}:{first_row.line_number}: "
            f"'{first_row.name}' must be followed by a matching Last> row."
        )
    next(rows)
    last_codepoint = _decode_codepoint(last_row, source_name)
    if last_codepoint < first_codepoint:
        raise UnidataRecordError(
            f"Reversed range at {source_name}:{last_row.line_number}: "
            f"{last_row.hexcode} precedes {first_row.hexcode}."
        )
    return last_codepoint


def _build_record(row: UnicodeDataRow, source_name: str) -> UnicodeCharRecord:
    """Decode one row into a record at the row's own codepoint."""
    try:
        return _decode_fields(row)
    except ValueError as error:
        raise UnidataRecordError(
            f"Malformed row at {source_name}:{row.line_number}: {error}. "
            "Delete the cached file and rerun the build."
        ) from error


def _decode_fields(row: UnicodeDataRow) -> UnicodeCharRecord:
    (
        hexcode,
        name,
        category,
        combining_class,
        bidi_class,
        decomposition,
        decimal_value,
        digit_value,
        numeric_value,
        bidi_mirrored,
        _unicode_1_name,
        _iso_comment,
        uppercase,
        lowercase,
        titlecase,
    ) = row.fields
    canonical_combining_class = parse_optional_int(combining_class)
    if canonical_combining_class is None:
        raise ValueError("canonical combining class is empty")
    decomposition_type, decomposition_mapping = parse_decomposition(decomposition)
    numeric_type, numeric_text = classify_numeric(
        parse_optional_int(decimal_value),
        parse_optional_int(digit_value),
        numeric_value or None,
    )
    return UnicodeCharRecord(
        codepoint=parse_hex(hexcode),
        name=range_label(name) if name.endswith(_RANGE_FIRST_TAG) else name,
        category=parse_code(GeneralCategory, category),
        canonical_combining_class=canonical_combining_class,
        bidi_class=parse_code(BidiClass, bidi_class),
        bidi_mirrored=parse_bidi_mirrored(bidi_mirrored),
        decomposition_type=decomposition_type,
        decomposition_mapping=decomposition_mapping,
        numeric_type=numeric_type,
        numeric_value=numeric_text,
        lowercase_mapping=parse_case_mapping(lowercase),
        uppercase_mapping=parse_case_mapping(uppercase),
        titlecase_mapping=parse_case_mapping(titlecase),
    )


def _decode_codepoint(row: UnicodeDataRow, source_name: str) -> int:
    try:
        return parse_hex(row.hexcode)
    except ValueError as error:
        raise UnidataRecordError(
            f"Malformed row at {source_name}:{row.line_number}: {error}."
        ) from error
