"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixture_paths import seed_ucd_cache

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = _PROJECT_ROOT / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def seeded_cache(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Cache directory pre-filled with fixture sources so builds stay offline."""
    for variable in ("UNIDATA_UCD_URL", "UNIDATA_WHATWG_URL", "UNIDATA_HTTP_TIMEOUT"):
        monkeypatch.delenv(variable, raising=False)
    cache_dir = seed_ucd_cache(tmp_path / "cache")
    monkeypatch.setenv("UNIDATA_CACHE_DIR", str(cache_dir))
    return cache_dir
