"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Reset the configuration singleton around each test."""

    from rexp.config.config import Config

    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config directory at a temporary location."""

    directory = tmp_path / "config-home"
    monkeypatch.setenv("REXP_CONFIG_DIR", str(directory))
    return directory
