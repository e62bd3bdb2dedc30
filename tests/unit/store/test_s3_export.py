"""Unit tests for S3 archive publishing."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.config import UnidataConfig
from core.errors import UnidataStoreError
from store.s3_export import publish_archive


class _FakeS3Client:
    def __init__(self, error: Exception | None = None) -> None:
        self.uploads: list[tuple[str, str, str]] = []
        self._error = error

    def upload_file(self, file_name: str, bucket: str, key: str) -> None:
        if self._error is not None:
            raise self._error
        self.uploads.append((file_name, bucket, key))


def _config(tmp_path) -> UnidataConfig:
    return replace(UnidataConfig.from_env(), cache_dir=tmp_path)


def test_publish_archive_uploads_under_prefix(tmp_path) -> None:
    """Archive should be uploaded under the requested prefix."""
    archive_path = tmp_path / "chr.db.zip"
    archive_path.write_bytes(b"zip")
    client = _FakeS3Client()

    object_uri = publish_archive(
        archive_path, "s3://releases/unidata/13.0/", _config(tmp_path), s3_client=client
    )

    assert client.uploads == [(str(archive_path), "releases", "unidata/13.0/chr.db.zip")] and (
        object_uri == "s3://releases/unidata/13.0/chr.db.zip"
    )


def test_publish_archive_rejects_invalid_uri(tmp_path) -> None:
    """Destinations without a prefix should fail before uploading."""
    client = _FakeS3Client()

    with pytest.raises(UnidataStoreError):
        publish_archive(tmp_path / "chr.db.zip", "s3://releases", _config(tmp_path), client)
    assert client.uploads == []


def test_publish_archive_wraps_upload_failure(tmp_path) -> None:
    """Client failures should surface as store errors."""
    client = _FakeS3Client(error=RuntimeError("access denied"))

    with pytest.raises(UnidataStoreError, match="access denied"):
        publish_archive(
            tmp_path / "chr.db.zip", "s3://releases/unidata", _config(tmp_path), client
        )
