"""Unidata exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each build stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class UnidataError(Exception):
    """Base exception for all Unidata failures."""


class UnidataConfigError(UnidataError):
    """Raised for invalid runtime configuration."""


class UnidataSourceError(UnidataError):
    """Raised when a source file cannot be fetched or cached."""


class UnidataRecordError(UnidataError):
    """Raised for malformed rows in any source file."""


class UnidataStoreError(UnidataError):
    """Raised for character database and publish failures."""


class UnidataPackagingError(UnidataError):
    """Raised when the database archive cannot be written or read."""


class UnidataDependencyError(UnidataError):
    """Raised when an optional runtime dependency is missing."""


class UnidataQueryError(UnidataError):
    """Raised for invalid lookup input."""
