"""Database archive packaging.

This module writes the finished database as the single entry of a ZIP
archive and restores it from such an archive on the consumer side.
"""

from __future__ import annotations

from pathlib import Path
import zipfile

from core.errors import UnidataPackagingError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def package_database(database_path: Path, archive_path: Path) -> Path:
    """Compress the database into a new single-entry archive.

    The entry is named after the database file. An existing archive at
    the same path is replaced.

    Args:
        database_path: Finished SQLite database file.
        archive_path: Output ZIP path.

    Returns:
        The archive path.

    Raises:
        UnidataPackagingError: If the database cannot be read or the archive written.
    """
    try:
        database_bytes = database_path.read_bytes()
    except OSError as error:
        raise UnidataPackagingError(
            f"Failed to read database {database_path} for packaging: {error}. "
            "Rerun the build to recreate the database."
        ) from error
    try:
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr(database_path.name, database_bytes)
    except OSError as error:
        raise UnidataPackagingError(
            f"Failed to write archive {archive_path}: {error}. "
            "Check output directory permissions and retry."
        ) from error
    _LOGGER.info(
        "archive_written",
        archive_path=str(archive_path),
        entry_name=database_path.name,
        database_bytes=len(database_bytes),
        archive_bytes=archive_path.stat().st_size,
    )
    return archive_path


def unpack_archive(archive_path: Path, target_dir: Path, file_name: str) -> Path:
    """Extract the database entry of an archive unless already installed.

    Args:
        archive_path: Packaged ZIP archive.
        target_dir: Directory receiving the database, created if missing.
        file_name: Name of the extracted database file.

    Returns:
        Path of the installed database file.

    Raises:
        UnidataPackagingError: If the archive is unreadable, empty, or the
            database cannot be written.
    """
    database_path = target_dir / file_name
    if database_path.is_file():
        return database_path
    try:
        with zipfile.ZipFile(archive_path) as archive:
            entries = archive.namelist()
            if not entries:
                raise UnidataPackagingError(
                    f"Archive {archive_path} has no entries. Rebuild the archive."
                )
            database_bytes = archive.read(entries[0])
        target_dir.mkdir(parents=True, exist_ok=True)
        database_path.write_bytes(database_bytes)
    except (OSError, zipfile.BadZipFile) as error:
        raise UnidataPackagingError(
            f"Failed to unpack {archive_path} into {target_dir}: {error}. "
            "Rebuild the archive or choose a writable target directory."
        ) from error
    _LOGGER.info("archive_unpacked", archive_path=str(archive_path), path=str(database_path))
    return database_path
