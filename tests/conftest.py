"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a .env file into tmp_path and returns its path."""

    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def _clear_envload_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ENVLOAD_* settings from the developer's shell out of the tests."""
    for key in ("ENVLOAD_ENV_FILE", "ENVLOAD_LOG_LEVEL", "ENVLOAD_FAIL_ON_MISSING_FILE"):
        monkeypatch.delenv(key, raising=False)
