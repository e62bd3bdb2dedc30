"""Unit tests for the UnicodeData.txt parser."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.errors import UnidataRecordError
from core.ucd_codes import BidiClass, DecompositionType, GeneralCategory, NumericType
from ingest.unicode_data import (
    PeekableRows,
    UnicodeDataRow,
    parse_unicode_data_file,
    parse_unicode_data_lines,
)
from tests.fixture_paths import fixture_path

_RANGE_LINES = [
    "3400;<CJK Ideograph Extension A, First>;Lo;0;L;;;;;N;;;;;",
    "4DBF;<CJK Ideograph Extension A, Last>;Lo;0;L;;;;;N;;;;;",
]


def test_parse_plain_row() -> None:
    """A plain row should decode into one record at its codepoint."""
    records = parse_unicode_data_lines(["0021;EXCLAMATION MARK;Po;0;ON;;;;;N;;;;;"])
    record = records[33]

    assert (
        record.category is GeneralCategory.OTHER_PUNCTUATION
        and record.bidi_class is BidiClass.OTHER_NEUTRAL
        and record.bidi_mirrored is False
        and record.decomposition_type is None
        and record.decomposition_mapping is None
        and record.numeric_type is None
        and record.numeric_value is None
    )


def test_parse_row_decodes_case_mappings() -> None:
    """Case mapping columns should map upper, lower, and title in order."""
    records = parse_unicode_data_lines(["0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041"])
    record = records[0x61]

    assert (record.uppercase_mapping, record.lowercase_mapping, record.titlecase_mapping) == (
        0x41,
        None,
        0x41,
    )


def test_parse_row_decodes_decimal_digit() -> None:
    """A digit row should be classified as decimal."""
    records = parse_unicode_data_lines(["0031;DIGIT ONE;Nd;0;EN;;1;1;1;N;;;;;"])

    assert (records[0x31].numeric_type, records[0x31].numeric_value) == (NumericType.DECIMAL, "1")


def test_parse_range_expands_every_codepoint() -> None:
    """A First/Last pair should produce one record per codepoint."""
    records = parse_unicode_data_lines(_RANGE_LINES)

    assert len(records) == 0x4DBF - 0x3400 + 1 and list(records) == list(range(0x3400, 0x4DC0))


def test_range_records_match_first_row_except_codepoint() -> None:
    """Expanded records should equal the First row apart from the codepoint."""
    records = parse_unicode_data_lines(_RANGE_LINES)
    first = records[0x3400]

    assert all(replace(record, codepoint=0x3400) == first for record in records.values())


def test_range_name_uses_stripped_label() -> None:
    """Range records should carry the label without brackets or First tag."""
    records = parse_unicode_data_lines(_RANGE_LINES)

    assert records[0x4000].name == "CJK Ideograph Extension A"


def test_unterminated_range_raises() -> None:
    """A First row without a matching Last row should fail."""
    lines = [_RANGE_LINES[0], "4DC0;HEXAGRAM FOR THE CREATIVE HEAVEN;So;0;ON;;;;;N;;;;;"]

    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(lines)


def test_range_at_end_of_file_raises() -> None:
    """A First row on the last line should fail."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(_RANGE_LINES[:1])


def test_malformed_hex_raises() -> None:
    """Unparseable codepoints should fail the parse."""
    with pytest.raises(UnidataRecordError, match=r"UnicodeData.txt:1"):
        parse_unicode_data_lines(["00ZZ;BROKEN;Po;0;ON;;;;;N;;;;;"])


def test_unknown_category_raises() -> None:
    """Unknown general categories should be rejected."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(["0021;EXCLAMATION MARK;Qq;0;ON;;;;;N;;;;;"])


def test_wrong_field_count_raises() -> None:
    """Rows without fifteen fields should fail."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(["0021;EXCLAMATION MARK;Po;0;ON"])


def test_parse_fixture_file() -> None:
    """The fixture file should parse into plain and range-expanded records."""
    records = parse_unicode_data_file(fixture_path("ucd/UnicodeData.txt"))
    umlaut = records[0xC4]

    assert len(records) == 17 + 0x4DBF - 0x3400 + 1 and (
        umlaut.decomposition_type,
        umlaut.decomposition_mapping,
    ) == (DecompositionType.CANONICAL, "65 776")


def test_parse_missing_file_raises(tmp_path) -> None:
    """A missing source file should fail with a record error."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_file(tmp_path / "UnicodeData.txt")


def test_peekable_rows_peek_does_not_consume() -> None:
    """Peeking should return the next row while leaving it in the stream."""
    rows = PeekableRows(UnicodeDataRow(line_number=n, fields=(str(n),)) for n in (1, 2))

    peeked = rows.peek()
    consumed = [row.line_number for row in rows]

    assert peeked is not None and peeked.line_number == 1 and consumed == [1, 2]


def test_peekable_rows_peek_at_end_returns_none() -> None:
    """Peeking past the last row should return None."""
    rows = PeekableRows([])

    assert rows.peek() is None


def test_prefixed_hex_codepoint_raises() -> None:
    """Codepoints written with a base prefix should be rejected."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(["0x21;EXCLAMATION MARK;Po;0;ON;;;;;N;;;;;"])


def test_non_ascii_combining_class_raises() -> None:
    """Combining classes in non-ASCII digits should be rejected."""
    with pytest.raises(UnidataRecordError):
        parse_unicode_data_lines(
            ["0300;COMBINING GRAVE ACCENT;Mn;\u0662\u0663\u0660;NSM;;;;;N;;;;;"]
        )


def test_reversed_range_bound_raises() -> None:
    """A Last row below its First row should fail."""
    lines = [
        "4DBF;<CJK Ideograph Extension A, First>;Lo;0;L;;;;;N;;;;;",
        "3400;<CJK Ideograph Extension A, Last>;Lo;0;L;;;;;N;;;;;",
    ]

    with pytest.raises(UnidataRecordError, match="Reversed range"):
        parse_unicode_data_lines(lines)
