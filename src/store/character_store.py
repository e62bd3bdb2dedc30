"""SQLite character database.

This module owns the ``UnicodeData`` table schema, the idempotent bulk
population step, and the two read queries the lookup client relies on:
exact codepoint match and name substring match.
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path
import sqlite3
from typing import Iterable

from core.constants import TABLE_NAME
from core.errors import UnidataStoreError
from core.logging_config import get_logger
from core.types import RecordMap, StoreWriteResult, UnicodeCharRecord
from core.ucd_codes import BidiClass, DecompositionType, GeneralCategory, NumericType

_LOGGER = get_logger(__name__)

COLUMN_NAMES = (
    "codepoint",
    "name",
    "category",
    "block",
    "age",
    "canonical_combining_class",
    "bidi_class",
    "bidi_mirrored",
    "decomposition_type",
    "decomposition_mapping",
    "numeric_type",
    "numeric_value",
    "lowercase_mapping",
    "uppercase_mapping",
    "titlecase_mapping",
    "html_entity",
)

CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    codepoint INTEGER NOT NULL PRIMARY KEY,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    block TEXT NOT NULL,
    age TEXT NOT NULL,
    canonical_combining_class INTEGER NOT NULL,
    bidi_class TEXT NOT NULL,
    bidi_mirrored INTEGER NOT NULL,
    decomposition_type TEXT,
    decomposition_mapping TEXT,
    numeric_type TEXT,
    numeric_value TEXT,
    lowercase_mapping INTEGER,
    uppercase_mapping INTEGER,
    titlecase_mapping INTEGER,
    html_entity TEXT
) WITHOUT ROWID
"""

_INSERT_SQL = (
    f"INSERT INTO {TABLE_NAME} ({', '.join(COLUMN_NAMES)}) "
    f"VALUES ({', '.join('?' for _ in COLUMN_NAMES)})"
)
_SELECT_COLUMNS = ", ".join(COLUMN_NAMES)


def write_records(database_path: Path, records: RecordMap) -> StoreWriteResult:
    """Create the character table if needed and populate it once.

    A table that already holds rows is left untouched, so repeated builds
    against the same database never duplicate or rewrite data.

    Args:
        database_path: SQLite database file path.
        records: Finished record map.

    Returns:
        Insert count and whether the table was already populated.

    Raises:
        UnidataStoreError: If the database cannot be created or written.
    """
    try:
        with closing(sqlite3.connect(database_path)) as connection:
            with connection:
                connection.execute(CREATE_TABLE_SQL)
                existing_rows = count_rows(connection)
                if existing_rows > 0:
                    _LOGGER.info(
                        "store_already_populated",
                        database_path=str(database_path),
                        row_count=existing_rows,
                    )
                    return StoreWriteResult(database_path, 0, already_populated=True)
                rows = [record_to_row(records[codepoint]) for codepoint in sorted(records)]
                connection.executemany(_INSERT_SQL, rows)
    except sqlite3.Error as error:
        raise UnidataStoreError(
            f"Failed to write character database at {database_path}: {error}. "
            "Delete the database file and rerun the build."
        ) from error
    _LOGGER.info("store_populated", database_path=str(database_path), row_count=len(rows))
    return StoreWriteResult(database_path, len(rows), already_populated=False)


def count_rows(connection: sqlite3.Connection) -> int:
    """Return the number of rows in the character table."""
    (row_count,) = connection.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
    return int(row_count)


def lookup_codepoints(database_path: Path, codepoints: Iterable[int]) -> list[UnicodeCharRecord]:
    """Return records whose codepoint is in the given list.

    Args:
        database_path: Finished database file.
        codepoints: Codepoints to look up.

    Returns:
        Matching records ordered by codepoint; unknown codepoints are absent.

    Raises:
        UnidataStoreError: If the database is missing or unreadable.
    """
    wanted = sorted(set(codepoints))
    if not wanted:
        return []
    placeholders = ", ".join("?" for _ in wanted)
    query = (
        f"SELECT {_SELECT_COLUMNS} FROM {TABLE_NAME} "
        f"WHERE codepoint IN ({placeholders}) ORDER BY codepoint"
    )
    return _query_records(database_path, query, wanted)


def search_names(database_path: Path, fragment: str) -> list[UnicodeCharRecord]:
    """Return records whose name contains the fragment, case-insensitively.

    Args:
        database_path: Finished database file.
        fragment: Name substring.

    Returns:
        Matching records ordered by codepoint.

    Raises:
        UnidataStoreError: If the database is missing or unreadable.
    """
    query = (
        f"SELECT {_SELECT_COLUMNS} FROM {TABLE_NAME} "
        "WHERE name LIKE ? ORDER BY codepoint"
    )
    return _query_records(database_path, query, [f"%{fragment}%"])


def record_to_row(record: UnicodeCharRecord) -> tuple[object, ...]:
    """Flatten a record into column order for insertion."""
    return (
        record.codepoint,
        record.name,
        record.category.value,
        record.block,
        record.age,
        record.canonical_combining_class,
        record.bidi_class.value,
        int(record.bidi_mirrored),
        _enum_value(record.decomposition_type),
        record.decomposition_mapping,
        _enum_value(record.numeric_type),
        record.numeric_value,
        record.lowercase_mapping,
        record.uppercase_mapping,
        record.titlecase_mapping,
        record.html_entity,
    )


def record_from_row(row: tuple[object, ...]) -> UnicodeCharRecord:
    """Rebuild a record from a row in column order."""
    values = dict(zip(COLUMN_NAMES, row))
    return UnicodeCharRecord(
        codepoint=int(values["codepoint"]),
        name=str(values["name"]),
        category=GeneralCategory(values["category"]),
        block=str(values["block"]),
        age=str(values["age"]),
        canonical_combining_class=int(values["canonical_combining_class"]),
        bidi_class=BidiClass(values["bidi_class"]),
        bidi_mirrored=bool(values["bidi_mirrored"]),
        decomposition_type=(
            DecompositionType(values["decomposition_type"])
            if values["decomposition_type"] is not None
            else None
        ),
        decomposition_mapping=_optional_text(values["decomposition_mapping"]),
        numeric_type=(
            NumericType(values["numeric_type"]) if values["numeric_type"] is not None else None
        ),
        numeric_value=_optional_text(values["numeric_value"]),
        lowercase_mapping=_optional_int(values["lowercase_mapping"]),
        uppercase_mapping=_optional_int(values["uppercase_mapping"]),
        titlecase_mapping=_optional_int(values["titlecase_mapping"]),
        html_entity=_optional_text(values["html_entity"]),
    )


def _query_records(
    database_path: Path,
    query: str,
    parameters: list[object],
) -> list[UnicodeCharRecord]:
    if not database_path.is_file():
        raise UnidataStoreError(
            f"Character database not found at {database_path}. "
            "Run 'unidata build' or 'unidata unpack' first."
        )
    try:
        with closing(sqlite3.connect(database_path)) as connection:
            rows = connection.execute(query, parameters).fetchall()
    except sqlite3.Error as error:
        raise UnidataStoreError(
            f"Failed to query character database at {database_path}: {error}."
        ) from error
    return [record_from_row(row) for row in rows]


def _enum_value(value: DecompositionType | NumericType | None) -> str | None:
    return value.value if value is not None else None


def _optional_text(value: object) -> str | None:
    return str(value) if value is not None else None


def _optional_int(value: object) -> int | None:
    return int(value) if value is not None else None
