"""S3 publishing for the packaged archive.

This module encapsulates boto3 client creation and archive upload.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import UnidataConfig
from core.errors import UnidataDependencyError, UnidataStoreError
from core.logging_config import get_logger
from core.s3_uri import parse_s3_uri

_LOGGER = get_logger(__name__)


def create_s3_client(config: UnidataConfig) -> Any:
    """Create boto3 S3 client for publishing.

    Args:
        config: Runtime config with optional session settings.

    Returns:
        Boto3 S3 client.

    Raises:
        UnidataDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise UnidataDependencyError(
            "Publishing requires boto3, but it is not installed. "
            "Install boto3 to publish archives to s3:// destinations."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def publish_archive(
    archive_path: Path,
    output_uri: str,
    config: UnidataConfig,
    s3_client: Any | None = None,
) -> str:
    """Upload the archive under an S3 prefix.

    Args:
        archive_path: Local archive file.
        output_uri: Destination ``s3://bucket/prefix``.
        config: Runtime config for client creation.
        s3_client: Optional preconfigured client.

    Returns:
        Fully-qualified URI of the uploaded object.

    Raises:
        UnidataStoreError: If the URI is invalid or the upload fails.
    """
    location = parse_s3_uri(output_uri)
    client = s3_client or create_s3_client(config)
    object_key = location.object_key(archive_path.name)
    object_uri = f"s3://{location.bucket}/{object_key}"
    try:
        client.upload_file(str(archive_path), location.bucket, object_key)
    except Exception as error:
        raise UnidataStoreError(
            f"Failed to publish {archive_path} to {object_uri}: {error}. "
            "Check AWS credentials and retry the build."
        ) from error
    _LOGGER.info("archive_published", archive_path=str(archive_path), output_uri=object_uri)
    return object_uri
