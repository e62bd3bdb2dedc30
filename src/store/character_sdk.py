"""Python SDK for building and querying the character database.

This module exposes high-level APIs for the build pipeline, archive
installation, and the lookup queries backed by the SQLite store.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable

from core.config import UnidataConfig
from core.constants import ARCHIVE_FILE_NAME, DATABASE_FILE_NAME
from core.errors import UnidataQueryError
from core.types import BuildOptions, BuildResult, UnicodeCharRecord
from ingest.pipeline import build_database
from store.archive_packager import unpack_archive
from store.character_store import lookup_codepoints, search_names


class UnidataClient:
    """Primary SDK entry point for build and lookup workflows."""

    def __init__(self, config: UnidataConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or UnidataConfig.from_env()

    @property
    def database_path(self) -> Path:
        """Database file produced by builds in the cache directory."""
        return self._config.cache_dir / DATABASE_FILE_NAME

    @property
    def archive_path(self) -> Path:
        """Archive file produced by builds in the cache directory."""
        return self._config.cache_dir / ARCHIVE_FILE_NAME

    def build(self, options: BuildOptions | None = None) -> BuildResult:
        """Fetch sources and build the packaged character database.

        Args:
            options: Optional build options.

        Returns:
            Build artifact summary.

        Raises:
            UnidataError: If any build stage fails.
        """
        return build_database(options or BuildOptions(), self._config)

    def lookup(self, characters: Iterable[str]) -> list[UnicodeCharRecord]:
        """Return records for single characters, ordered by codepoint.

        Args:
            characters: Single-character strings.

        Returns:
            Records of the characters present in the database.

        Raises:
            UnidataQueryError: If an entry is not exactly one character.
        """
        return lookup_codepoints(self.database_path, [_codepoint(char) for char in characters])

    def search(self, fragment: str) -> list[UnicodeCharRecord]:
        """Return records whose name contains the fragment."""
        return search_names(self.database_path, fragment)

    def unpack(self, target_dir: str) -> Path:
        """Install the database from the cached archive into a directory.

        Args:
            target_dir: Destination directory.

        Returns:
            Installed database path.
        """
        target_path = Path(target_dir).expanduser().resolve()
        return unpack_archive(self.archive_path, target_path, DATABASE_FILE_NAME)

    def with_cache_dir(self, cache_dir: str) -> "UnidataClient":
        """Clone the client with a different cache directory.

        Args:
            cache_dir: New cache directory path.

        Returns:
            New SDK client instance.
        """
        resolved_dir = Path(cache_dir).expanduser().resolve()
        return UnidataClient(replace(self._config, cache_dir=resolved_dir))


def _codepoint(char: str) -> int:
    if not isinstance(char, str) or len(char) != 1:
        raise UnidataQueryError(
            f"Invalid lookup input {char!r}: expected exactly one character. "
            "Use search for name fragments."
        )
    return ord(char)
