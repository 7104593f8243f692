"""Shared pytest fixtures for headr tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from headr.config import ENV_CONFIG_FILE, Config
from headr.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary, initially absent file."""

    config_path = tmp_path / "headr-config" / "config.toml"
    monkeypatch.setenv(ENV_CONFIG_FILE, str(config_path))
    Config.reset()
    yield config_path
    Config.reset()
    _ = setup_logger()


@pytest.fixture
def stdin_bytes(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], None]:
    """Replace standard input with an in-memory stream holding the given bytes."""

    def _install(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    return _install


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Create a source file under ``tmp_path`` and return its path."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        _ = path.write_bytes(content)
        return path

    return _write
