"""Shared typed models.

This module defines the per-codepoint record and the request/result
models passed between acquisition, parsing, store, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.ucd_codes import BidiClass, DecompositionType, GeneralCategory, NumericType


@dataclass(frozen=True)
class UnicodeCharRecord:
    """Unified character properties for one codepoint.

    Attributes:
        codepoint: Unique key in 0..0x10FFFF.
        name: Character name, or the shared label of a range pair.
        category: General category code.
        block: Block name, empty until a block range covers the codepoint.
        age: Unicode version of first assignment, empty until annotated.
        canonical_combining_class: Canonical ordering class.
        bidi_class: Bidirectional class code.
        bidi_mirrored: Whether the glyph is mirrored in right-to-left text.
        decomposition_type: Canonical or compatibility tag, if decomposable.
        decomposition_mapping: Space-joined decimal codepoints, if decomposable.
        numeric_type: Derived numeric classification.
        numeric_value: Derived numeric value as text.
        lowercase_mapping: Simple lowercase codepoint.
        uppercase_mapping: Simple uppercase codepoint.
        titlecase_mapping: Simple titlecase codepoint.
        html_entity: HTML entity name mapping to this single codepoint.
    """

    codepoint: int
    name: str
    category: GeneralCategory
    canonical_combining_class: int
    bidi_class: BidiClass
    bidi_mirrored: bool
    block: str = ""
    age: str = ""
    decomposition_type: DecompositionType | None = None
    decomposition_mapping: str | None = None
    numeric_type: NumericType | None = None
    numeric_value: str | None = None
    lowercase_mapping: int | None = None
    uppercase_mapping: int | None = None
    titlecase_mapping: int | None = None
    html_entity: str | None = None


RecordMap = dict[int, UnicodeCharRecord]


@dataclass(frozen=True)
class SourceFile:
    """One remote source file and its cache name.

    Attributes:
        file_name: File name inside the cache directory.
        url: Fully-qualified download URL.
    """

    file_name: str
    url: str


@dataclass(frozen=True)
class BuildOptions:
    """Build command options.

    Attributes:
        output_uri: Optional ``s3://`` destination for the finished archive.
    """

    output_uri: str | None = None


@dataclass(frozen=True)
class StoreWriteResult:
    """Outcome of one store population attempt.

    Attributes:
        database_path: SQLite database file path.
        rows_inserted: Number of rows inserted by this call.
        already_populated: Whether the table held rows before the call.
    """

    database_path: Path
    rows_inserted: int
    already_populated: bool


@dataclass(frozen=True)
class BuildResult:
    """Build command output artifacts.

    Attributes:
        database_path: SQLite database file path.
        archive_path: Compressed archive path.
        record_count: Number of records produced by parsing.
        rows_inserted: Rows inserted during this build.
        published_uri: Upload destination when publishing was requested.
    """

    database_path: Path
    archive_path: Path
    record_count: int
    rows_inserted: int
    published_uri: str | None = None
