"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def config_file(isolated_config: Path) -> Path:
    """Return the isolated config path with its parent directory created."""

    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    return isolated_config
