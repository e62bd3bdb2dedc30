"""HTML entity annotation transform.

This module loads the WHATWG ``entities.json`` mapping and stamps
records that are the sole codepoint of an entity with its name.
Entities composed of several codepoints cannot belong to one record
and are dropped.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from core.errors import UnidataRecordError
from core.logging_config import get_logger
from core.types import RecordMap
from transforms.record_stamping import stamp_records

_LOGGER = get_logger(__name__)


def read_entity_file(file_path: Path) -> dict[str, Any]:
    """Read and validate the entity mapping file.

    Args:
        file_path: Path to entities.json.

    Returns:
        Mapping of entity name to entity metadata.

    Raises:
        UnidataRecordError: If the file is unreadable or not a JSON object.
    """
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise UnidataRecordError(
            f"Failed to read {file_path}: {error}. "
            "Delete the cached file and rerun the build to download it again."
        ) from error
    except json.JSONDecodeError as error:
        raise UnidataRecordError(
            f"Failed to parse {file_path}: {error.msg}. "
            "Delete the cached file and rerun the build to download it again."
        ) from error
    if not isinstance(payload, dict):
        raise UnidataRecordError(
            f"Failed to parse {file_path}: expected JSON object at top level."
        )
    return payload


def annotate_entities(records: RecordMap, entities: Mapping[str, Any]) -> int:
    """Set ``html_entity`` on records named by single-codepoint entities.

    Args:
        records: Record map mutated in place.
        entities: Entity name to metadata with a ``codepoints`` list.

    Returns:
        Number of record updates applied.

    Raises:
        UnidataRecordError: If an entry lacks an integer ``codepoints`` list.
    """
    updated = 0
    for entity_name, metadata in entities.items():
        codepoints = _entity_codepoints(entity_name, metadata)
        if len(codepoints) != 1:
            continue
        updated += stamp_records(records, codepoints, "html_entity", entity_name)
    _LOGGER.info("entities_annotated", entity_count=len(entities), records_updated=updated)
    return updated


def _entity_codepoints(entity_name: str, metadata: object) -> list[int]:
    codepoints = metadata.get("codepoints") if isinstance(metadata, Mapping) else None
    if not isinstance(codepoints, list) or not all(
        isinstance(codepoint, int) and not isinstance(codepoint, bool) for codepoint in codepoints
    ):
        raise UnidataRecordError(
            f"Invalid entity '{entity_name}': expected integer list field 'codepoints'."
        )
    return codepoints
