"""Source file acquisition.

This module downloads the UCD text files and the HTML entity mapping
into the cache directory. Files already present are never fetched again.
"""

from __future__ import annotations

from pathlib import Path

import requests

from core.config import UnidataConfig
from core.constants import HTML_ENTITIES_FILE_NAME, UCD_FILE_NAMES
from core.errors import UnidataSourceError
from core.logging_config import get_logger
from core.types import SourceFile

_LOGGER = get_logger(__name__)


def build_source_files(config: UnidataConfig) -> tuple[SourceFile, ...]:
    """Resolve the four required source files against configured base URLs.

    Args:
        config: Runtime configuration with base URLs.

    Returns:
        Source files in download order.
    """
    ucd_sources = tuple(
        SourceFile(file_name=file_name, url=f"{config.ucd_url}/{file_name}")
        for file_name in UCD_FILE_NAMES
    )
    entity_source = SourceFile(
        file_name=HTML_ENTITIES_FILE_NAME,
        url=f"{config.whatwg_url}/{HTML_ENTITIES_FILE_NAME}",
    )
    return ucd_sources + (entity_source,)


def fetch_sources(
    config: UnidataConfig,
    session: requests.Session | None = None,
) -> list[Path]:
    """Download every missing source file into the cache directory.

    Args:
        config: Runtime configuration.
        session: Optional HTTP session, created when omitted.

    Returns:
        Cache paths of all source files.

    Raises:
        UnidataSourceError: If a download or file write fails.
    """
    _ensure_cache_dir(config.cache_dir)
    http = session or requests.Session()
    try:
        return [
            fetch_source(source, config.cache_dir, http, config.http_timeout)
            for source in build_source_files(config)
        ]
    finally:
        if session is None:
            http.close()


def fetch_source(
    source: SourceFile,
    cache_dir: Path,
    session: requests.Session,
    timeout: float,
) -> Path:
    """Download one source file unless it is already cached.

    Args:
        source: Source file to fetch.
        cache_dir: Target cache directory.
        session: HTTP session used for the request.
        timeout: Request timeout in seconds.

    Returns:
        Cache path of the source file.

    Raises:
        UnidataSourceError: If the request fails or the body cannot be written.
    """
    file_path = cache_dir / source.file_name
    if file_path.exists():
        _LOGGER.info("source_cached", file_name=source.file_name, path=str(file_path))
        return file_path
    body = _download(source, session, timeout)
    try:
        file_path.write_bytes(body)
    except OSError as error:
        raise UnidataSourceError(
            f"Failed to write {source.file_name} to {file_path}: {error}. "
            "Check cache directory permissions and retry the build."
        ) from error
    _LOGGER.info(
        "source_fetched",
        file_name=source.file_name,
        url=source.url,
        size_bytes=len(body),
    )
    return file_path


def _download(source: SourceFile, session: requests.Session, timeout: float) -> bytes:
    try:
        response = session.get(source.url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        raise UnidataSourceError(
            f"Failed to download {source.file_name} from {source.url}: {error}. "
            "Check network access or place the file in the cache directory manually."
        ) from error
    return response.content


def _ensure_cache_dir(cache_dir: Path) -> None:
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise UnidataSourceError(
            f"Failed to create cache directory {cache_dir}: {error}. "
            "Set UNIDATA_CACHE_DIR to a writable location."
        ) from error
