"""Configuration loading for headr."""

from .config import Config
from .paths import ENV_CONFIG_FILE, default_config_path, resolve_overridable_path

__all__ = ["Config", "ENV_CONFIG_FILE", "default_config_path", "resolve_overridable_path"]
