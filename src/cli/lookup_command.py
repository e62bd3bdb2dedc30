"""Lookup and search commands for the character database."""

from __future__ import annotations

import argparse
from typing import Any

from core.types import UnicodeCharRecord
from store.character_sdk import UnidataClient


def single_character(value: str) -> str:
    """Argparse type accepting exactly one character."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(
            f"too many characters in string '{value}'" if value else "empty string"
        )
    return value


def add_lookup_command(subparsers: Any) -> None:
    """Register lookup subcommand."""
    parser = subparsers.add_parser("lookup", help="Show properties of individual characters")
    parser.add_argument("chars", nargs="+", type=single_character, help="Characters to look up")


def add_search_command(subparsers: Any) -> None:
    """Register search subcommand."""
    parser = subparsers.add_parser("search", help="Find characters by name substring")
    parser.add_argument("fragment", help="Name fragment, matched case-insensitively")


def run_lookup_command(client: UnidataClient, args: argparse.Namespace) -> int:
    """Print one line per character found in the database."""
    _print_records(client.lookup(args.chars))
    return 0


def run_search_command(client: UnidataClient, args: argparse.Namespace) -> int:
    """Print one line per character whose name matches."""
    _print_records(client.search(args.fragment))
    return 0


def format_record(record: UnicodeCharRecord) -> str:
    """Render a record as a tab-separated summary line.

    Args:
        record: Character record.

    Returns:
        Line with codepoint, glyph, name, block, category, and age.
    """
    char = chr(record.codepoint)
    glyph = char if char.isprintable() else ""
    return "\t".join(
        (
            f"U+{record.codepoint:04X}",
            glyph,
            record.name,
            record.block or "-",
            record.category.description,
            f"since {record.age}" if record.age else "-",
        )
    )


def _print_records(records: list[UnicodeCharRecord]) -> None:
    for record in records:
        print(format_record(record))
