"""Integration tests for the full character database build."""

from __future__ import annotations

from contextlib import closing
from dataclasses import replace
import sqlite3
import zipfile

import pytest

from core.config import UnidataConfig
from core.errors import UnidataRecordError
from core.types import BuildOptions
from core.ucd_codes import DecompositionType, NumericType
from ingest.pipeline import build_database
from store.character_sdk import UnidataClient
from store.character_store import count_rows


def test_build_populates_every_record(seeded_cache) -> None:
    """A build from cached sources should store every parsed record."""
    config = UnidataConfig.from_env()

    result = build_database(BuildOptions(), config)
    with closing(sqlite3.connect(result.database_path)) as connection:
        row_count = count_rows(connection)

    assert result.record_count == 6609 and result.rows_inserted == 6609 and row_count == 6609


def test_rebuild_does_not_duplicate_rows(seeded_cache) -> None:
    """A second build should insert nothing and keep the row count."""
    config = UnidataConfig.from_env()
    build_database(BuildOptions(), config)

    result = build_database(BuildOptions(), config)
    with closing(sqlite3.connect(result.database_path)) as connection:
        row_count = count_rows(connection)

    assert result.rows_inserted == 0 and row_count == 6609


def test_build_writes_single_entry_archive(seeded_cache) -> None:
    """The archive should contain the database file as its only entry."""
    result = build_database(BuildOptions(), UnidataConfig.from_env())

    with zipfile.ZipFile(result.archive_path) as archive:
        entries = archive.namelist()
        payload = archive.read("chr.db")

    assert entries == ["chr.db"] and payload == result.database_path.read_bytes()


def test_build_annotates_records(seeded_cache) -> None:
    """Stored records should carry block, age, and entity annotations."""
    client = UnidataClient(UnidataConfig.from_env())
    client.build()

    half, honey_pot = client.lookup(["\U0001F36F", "\u00bd"])

    assert (honey_pot.block, honey_pot.age, honey_pot.html_entity) == (
        "Miscellaneous Symbols and Pictographs",
        "6.0",
        None,
    ) and (half.block, half.age, half.html_entity) == ("Latin-1 Supplement", "1.1", "&half;")


def test_build_keeps_last_entity_and_fraction_fields(seeded_cache) -> None:
    """Entity ties resolve to the last entry and numeric fields survive storage."""
    client = UnidataClient(UnidataConfig.from_env())
    client.build()

    ampersand, half = client.lookup(["&", "\u00bd"])

    assert ampersand.html_entity == "&amp;" and (
        half.decomposition_type,
        half.decomposition_mapping,
        half.numeric_type,
        half.numeric_value,
    ) == (DecompositionType.FRACTION, "49 8260 50", NumericType.NUMERIC, "1/2")


def test_range_records_share_properties(seeded_cache) -> None:
    """Range endpoints should share properties apart from codepoint and age."""
    client = UnidataClient(UnidataConfig.from_env())
    client.build()

    first, last = client.lookup(["\u3400", "\u4dbf"])

    assert replace(last, codepoint=first.codepoint, age=first.age) == first and (
        first.age,
        last.age,
    ) == ("3.0", "13.0")


def test_unpacked_database_answers_queries(seeded_cache) -> None:
    """A database installed from the archive should serve lookups."""
    client = UnidataClient(UnidataConfig.from_env())
    client.build()
    install_dir = seeded_cache.parent / "installed"
    client.unpack(str(install_dir))

    installed_client = client.with_cache_dir(str(install_dir))
    (record,) = installed_client.lookup(["\U0001F41D"])

    assert record.name == "HONEYBEE"


def _append_line(file_path, line: str) -> None:
    with file_path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")


def test_unterminated_range_stops_build(seeded_cache) -> None:
    """A broken range pair should abort before any output is written."""
    _append_line(
        seeded_cache / "UnicodeData.txt",
        "AC00;<Hangul Syllable, First>;Lo;0;L;;;;;N;;;;;",
    )

    with pytest.raises(UnidataRecordError, match="Unterminated range"):
        build_database(BuildOptions(), UnidataConfig.from_env())
    assert not (seeded_cache / "chr.db").exists() and not (seeded_cache / "chr.db.zip").exists()


def test_malformed_block_range_stops_build(seeded_cache) -> None:
    """An unparseable block range should abort before any output is written."""
    _append_line(seeded_cache / "Blocks.txt", "ZZZZ..0041; Broken Block")

    with pytest.raises(UnidataRecordError, match="Blocks.txt"):
        build_database(BuildOptions(), UnidataConfig.from_env())
    assert not (seeded_cache / "chr.db").exists() and not (seeded_cache / "chr.db.zip").exists()
