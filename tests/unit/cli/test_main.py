"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.lookup_command import format_record
from cli.main import main
from core.types import UnicodeCharRecord
from core.ucd_codes import BidiClass, GeneralCategory


def _build(cache_dir) -> int:
    return main(["--cache-dir", str(cache_dir), "build"])


def test_cli_build_prints_archive_summary(seeded_cache, capsys) -> None:
    """CLI build should report the archive path and record counts."""
    exit_code = _build(seeded_cache)
    output = capsys.readouterr().out

    assert exit_code == 0 and f"archive_path={seeded_cache / 'chr.db.zip'}" in output and (
        "record_count=6609" in output
    )


def test_cli_build_keeps_stdout_free_of_log_events(seeded_cache, capsys) -> None:
    """Structured log events should go to stderr, not command output."""
    _build(seeded_cache)
    captured = capsys.readouterr()

    assert "build_completed" in captured.err and "build_completed" not in captured.out


def test_cli_lookup_prints_record_line(seeded_cache, capsys) -> None:
    """CLI lookup should print one summary line per character."""
    _build(seeded_cache)
    capsys.readouterr()

    exit_code = main(["--cache-dir", str(seeded_cache), "lookup", "!", "\U0001F36F"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and [line.split("\t")[0] for line in lines] == ["U+0021", "U+1F36F"]


def test_cli_search_matches_name_fragment(seeded_cache, capsys) -> None:
    """CLI search should list characters whose name contains the fragment."""
    _build(seeded_cache)
    capsys.readouterr()

    exit_code = main(["--cache-dir", str(seeded_cache), "search", "honey"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and len(lines) == 2


def test_cli_unpack_installs_database(seeded_cache, tmp_path, capsys) -> None:
    """CLI unpack should install the database and print its path."""
    install_dir = tmp_path / "installed"
    _build(seeded_cache)
    capsys.readouterr()

    exit_code = main(["--cache-dir", str(seeded_cache), "unpack", str(install_dir)])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == str(install_dir / "chr.db")


def test_cli_lookup_rejects_multi_character_argument(tmp_path) -> None:
    """Lookup arguments longer than one character should be rejected."""
    with pytest.raises(SystemExit):
        main(["--cache-dir", str(tmp_path), "lookup", "ab"])


def test_cli_lookup_without_database_returns_error(tmp_path, capsys) -> None:
    """Lookup before any build should fail with a readable error."""
    exit_code = main(["--cache-dir", str(tmp_path), "lookup", "A"])
    error_output = capsys.readouterr().err

    assert exit_code == 1 and error_output.startswith("error: ")


def test_format_record_uses_placeholders_for_missing_annotations() -> None:
    """Missing block and age should render as dashes."""
    record = UnicodeCharRecord(
        codepoint=0x41,
        name="LATIN CAPITAL LETTER A",
        category=GeneralCategory.UPPERCASE_LETTER,
        canonical_combining_class=0,
        bidi_class=BidiClass.LEFT_TO_RIGHT,
        bidi_mirrored=False,
    )

    assert format_record(record) == "U+0041\tA\tLATIN CAPITAL LETTER A\t-\tUppercase Letter\t-"
