"""Core constants used across Unidata modules.

This module centralizes source locations, file names, and store names.
Keeping values here avoids magic literals in parsing and store logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_CACHE_DIR = Path(".unidata")
DEFAULT_UCD_URL = "http://ftp.unicode.org/Public/13.0.0/ucd"
DEFAULT_WHATWG_URL = "http://html.spec.whatwg.org"
DEFAULT_HTTP_TIMEOUT_SECONDS = 60.0
BLOCKS_FILE_NAME = "Blocks.txt"
DERIVED_AGE_FILE_NAME = "DerivedAge.txt"
UNICODE_DATA_FILE_NAME = "UnicodeData.txt"
HTML_ENTITIES_FILE_NAME = "entities.json"
UCD_FILE_NAMES = (BLOCKS_FILE_NAME, DERIVED_AGE_FILE_NAME, UNICODE_DATA_FILE_NAME)
DATABASE_FILE_NAME = "chr.db"
ARCHIVE_FILE_NAME = "chr.db.zip"
TABLE_NAME = "UnicodeData"
UNICODE_DATA_FIELD_COUNT = 15
MAX_CODEPOINT = 0x10FFFF
RANGE_SEPARATOR = ".."
COMMENT_PREFIX = "#"
