"""Public SDK surface for Unidata.

This module provides a stable import path for library users.
It re-exports the primary client, typed models, and code sets.
"""

from __future__ import annotations

from core.config import UnidataConfig
from core.errors import UnidataError
from core.types import BuildOptions, BuildResult, UnicodeCharRecord
from core.ucd_codes import BidiClass, DecompositionType, GeneralCategory, NumericType
from ingest.pipeline import build_database
from store.character_sdk import UnidataClient

__all__ = [
    "BidiClass",
    "BuildOptions",
    "BuildResult",
    "DecompositionType",
    "GeneralCategory",
    "NumericType",
    "UnicodeCharRecord",
    "UnidataClient",
    "UnidataConfig",
    "UnidataError",
    "build_database",
]
