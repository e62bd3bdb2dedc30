"""Unidata CLI entry points.
This module exposes build, lookup, and archive commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from cli.lookup_command import (
    add_lookup_command,
    add_search_command,
    run_lookup_command,
    run_search_command,
)
from core.config import UnidataConfig
from core.errors import UnidataError
from core.types import BuildOptions
from store.character_sdk import UnidataClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="unidata", description="Unicode character database CLI")
    parser.add_argument("--cache-dir", help="Override UNIDATA_CACHE_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_build_command(subparsers)
    add_lookup_command(subparsers)
    add_search_command(subparsers)
    _add_unpack_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Unidata CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.cache_dir)
        if args.command == "build":
            return _run_build_command(client, args)
        if args.command == "lookup":
            return run_lookup_command(client, args)
        if args.command == "search":
            return run_search_command(client, args)
        if args.command == "unpack":
            return _run_unpack_command(client, args)
    except UnidataError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(cache_dir: str | None) -> UnidataClient:
    """Build SDK client with optional cache-dir override.

    Args:
        cache_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = UnidataConfig.from_env()
    if cache_dir:
        config = replace(config, cache_dir=Path(cache_dir).expanduser().resolve())
    return UnidataClient(config)


def _run_build_command(client: UnidataClient, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = client.build(BuildOptions(output_uri=args.output_uri))
    print(f"archive_path={result.archive_path}")
    print(f"record_count={result.record_count}")
    print(f"rows_inserted={result.rows_inserted}")
    if result.published_uri:
        print(f"published_uri={result.published_uri}")
    return 0


def _run_unpack_command(client: UnidataClient, args: argparse.Namespace) -> int:
    """Handle unpack command."""
    database_path = client.unpack(args.target_dir)
    print(database_path)
    return 0


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser(
        "build",
        help="Fetch UCD sources and build the database archive",
    )
    parser.add_argument("--output-uri", help="Optional s3:// destination for the archive")


def _add_unpack_command(subparsers: Any) -> None:
    """Register unpack subcommand."""
    parser = subparsers.add_parser("unpack", help="Install the database from the built archive")
    parser.add_argument("target_dir", help="Directory receiving the database file")
