"""Shared path utilities for configuration locations.

Policy:
- Config: ``$HEADR_CONFIG`` when set, else ``$XDG_CONFIG_HOME/headr/config.toml``,
  else ``~/.config/headr/config.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

ENV_CONFIG_FILE: Final[str] = "HEADR_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_config_home(env: Mapping[str, str] | None = None) -> Path:
    mapping = env if env is not None else os.environ
    candidate = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    if candidate:
        return Path(candidate)
    return Path.home() / ".config"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Environment mapping to consult instead of ``os.environ``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: _xdg_config_home(env) / "headr" / "config.toml",
    )


__all__ = [
    "ENV_CONFIG_FILE",
    "default_config_path",
    "resolve_overridable_path",
]
