"""Build orchestration for the character database.

This module runs acquisition, parsing, annotation, persistence, and
packaging in strict order. The record map is owned by the runner and
handed explicitly to each stage; the first stage error stops the build.
"""

from __future__ import annotations

from pathlib import Path

import requests

from core.config import UnidataConfig
from core.constants import (
    ARCHIVE_FILE_NAME,
    BLOCKS_FILE_NAME,
    DATABASE_FILE_NAME,
    DERIVED_AGE_FILE_NAME,
    HTML_ENTITIES_FILE_NAME,
    UNICODE_DATA_FILE_NAME,
)
from core.logging_config import get_logger
from core.types import BuildOptions, BuildResult, RecordMap, StoreWriteResult
from ingest.range_file import read_range_rows
from ingest.source_fetch import fetch_sources
from ingest.unicode_data import parse_unicode_data_file
from store.archive_packager import package_database
from store.character_store import write_records
from store.s3_export import publish_archive
from transforms.age_annotation import annotate_ages
from transforms.block_annotation import annotate_blocks
from transforms.entity_annotation import annotate_entities, read_entity_file

_LOGGER = get_logger(__name__)


class BuildPipelineRunner:
    """Single-use runner for one full database build."""

    def __init__(
        self,
        options: BuildOptions,
        config: UnidataConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._session = session
        self._cache_dir = config.cache_dir

    def run(self) -> BuildResult:
        """Execute every build stage and return the produced artifacts."""
        fetch_sources(self._config, self._session)
        records = self._parse_records()
        self._annotate(records)
        write_result = self._write_store(records)
        archive_path = package_database(
            write_result.database_path,
            self._cache_dir / ARCHIVE_FILE_NAME,
        )
        published_uri = self._publish_if_requested(archive_path)
        result = BuildResult(
            database_path=write_result.database_path,
            archive_path=archive_path,
            record_count=len(records),
            rows_inserted=write_result.rows_inserted,
            published_uri=published_uri,
        )
        _LOGGER.info(
            "build_completed",
            record_count=result.record_count,
            rows_inserted=result.rows_inserted,
            archive_path=str(result.archive_path),
            published_uri=result.published_uri,
        )
        return result

    def _parse_records(self) -> RecordMap:
        return parse_unicode_data_file(self._source_path(UNICODE_DATA_FILE_NAME))

    def _annotate(self, records: RecordMap) -> None:
        annotate_blocks(records, read_range_rows(self._source_path(BLOCKS_FILE_NAME)))
        annotate_ages(records, read_range_rows(self._source_path(DERIVED_AGE_FILE_NAME)))
        entities = read_entity_file(self._source_path(HTML_ENTITIES_FILE_NAME))
        annotate_entities(records, entities)

    def _write_store(self, records: RecordMap) -> StoreWriteResult:
        return write_records(self._cache_dir / DATABASE_FILE_NAME, records)

    def _publish_if_requested(self, archive_path: Path) -> str | None:
        if not self._options.output_uri:
            return None
        return publish_archive(archive_path, self._options.output_uri, self._config)

    def _source_path(self, file_name: str) -> Path:
        return self._cache_dir / file_name


def build_database(
    options: BuildOptions,
    config: UnidataConfig,
    session: requests.Session | None = None,
) -> BuildResult:
    """Run the full build and package the character database.

    Args:
        options: Build request options.
        config: Runtime configuration.
        session: Optional HTTP session for source downloads.

    Returns:
        Paths and counts of the finished build.

    Raises:
        UnidataSourceError: If a source file cannot be fetched.
        UnidataRecordError: If any source file is malformed.
        UnidataStoreError: If persistence or publishing fails.
        UnidataPackagingError: If the archive cannot be written.
    """
    runner = BuildPipelineRunner(options, config, session)
    return runner.run()
