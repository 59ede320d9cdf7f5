from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from siteformats.media.types import DEFAULT_MEDIA_TYPES, MediaTypes, decode_media_types


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings read SITEFORMATS_* variables; keep the developer's shell out of the tests.
    for key in list(os.environ):
        if key.upper().startswith("SITEFORMATS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def media_types() -> MediaTypes:
    return DEFAULT_MEDIA_TYPES


@pytest.fixture
def enriched_media_types() -> MediaTypes:
    """Default media types plus ``text/enriched`` (suffix ``enr``)."""
    return decode_media_types({"text/enriched": {"suffix": "enr"}})


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a site configuration file and return its path."""

    def _write(content: str, filename: str = "config.toml") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
