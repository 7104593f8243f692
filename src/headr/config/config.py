"""Configuration management for headr."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from headr.config.paths import default_config_path
from headr.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration.

    Selection mode and limits are never read from here; they only come
    from the command line.
    """

    # Rotating log file; console-only logging when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields defaults and is not created.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        target = config_file if config_file is not None else default_config_path()

        if not target.is_file():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.debug("Ignoring unknown configuration key: %s", key)
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
