"""Tests for configuration path resolution."""

from pathlib import Path

import pytest

from headr.config import ENV_CONFIG_FILE, default_config_path, resolve_overridable_path


def test_env_override_wins(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path({ENV_CONFIG_FILE: str(target)}) == target.resolve()


def test_xdg_config_home(tmp_path: Path) -> None:
    resolved = default_config_path({"XDG_CONFIG_HOME": str(tmp_path)})

    assert resolved == (tmp_path / "headr" / "config.toml").resolve()


def test_home_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    resolved = default_config_path({})

    assert resolved == (tmp_path / ".config" / "headr" / "config.toml").resolve()


def test_blank_env_value_is_ignored(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"SOME_VAR": "   "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "fallback",
    )

    assert resolved == (tmp_path / "fallback").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=str(tmp_path / "explicit"),
        env={"SOME_VAR": str(tmp_path / "env")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "fallback",
    )

    assert resolved == (tmp_path / "explicit").resolve()
