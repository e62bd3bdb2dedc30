"""Runtime configuration model for Unidata.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_CACHE_DIR,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_UCD_URL,
    DEFAULT_WHATWG_URL,
)
from core.errors import UnidataConfigError


@dataclass(frozen=True)
class UnidataConfig:
    """Validated runtime configuration.

    Attributes:
        cache_dir: Directory holding downloaded sources and build outputs.
        ucd_url: Base URL of the Unicode Character Database files.
        whatwg_url: Base URL of the HTML entity mapping.
        http_timeout: Timeout in seconds for each source download.
        s3_region: Optional default AWS region for archive publishing.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    cache_dir: Path
    ucd_url: str
    whatwg_url: str
    http_timeout: float
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "UnidataConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            UnidataConfigError: If environment values are invalid.
        """
        cache_dir_value = os.getenv("UNIDATA_CACHE_DIR", str(DEFAULT_CACHE_DIR))
        ucd_url = _parse_base_url("UNIDATA_UCD_URL", os.getenv("UNIDATA_UCD_URL", DEFAULT_UCD_URL))
        whatwg_url = _parse_base_url(
            "UNIDATA_WHATWG_URL", os.getenv("UNIDATA_WHATWG_URL", DEFAULT_WHATWG_URL)
        )
        timeout_value = os.getenv("UNIDATA_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        return cls(
            cache_dir=Path(cache_dir_value).expanduser().resolve(),
            ucd_url=ucd_url,
            whatwg_url=whatwg_url,
            http_timeout=_parse_http_timeout(timeout_value),
            s3_region=os.getenv("UNIDATA_S3_REGION"),
            s3_profile=os.getenv("UNIDATA_S3_PROFILE"),
        )


def _parse_base_url(variable: str, raw_value: str) -> str:
    """Validate a source base URL.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        URL without trailing slash.

    Raises:
        UnidataConfigError: If the value is not an http(s) URL.
    """
    value = raw_value.strip().rstrip("/")
    if not value.startswith(("http://", "https://")):
        raise UnidataConfigError(
            f"Invalid {variable} value: expected http:// or https:// URL, got '{raw_value}'. "
            f"Set {variable} to the base URL serving the source files."
        )
    return value


def _parse_http_timeout(raw_value: str) -> float:
    """Parse the download timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        UnidataConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise UnidataConfigError(
            "Invalid UNIDATA_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set UNIDATA_HTTP_TIMEOUT to a numeric value."
        ) from error
    if timeout <= 0:
        raise UnidataConfigError(
            f"Invalid UNIDATA_HTTP_TIMEOUT value: expected positive seconds, got '{raw_value}'."
        )
    return timeout
