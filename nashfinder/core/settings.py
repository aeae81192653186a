"""NashFinder configuration management.

Configuration is loaded from multiple sources with the following priority
(highest to lowest):
1. Explicit overrides (CLI options, keyword arguments)
2. Environment variables (with NASHFINDER_ prefix)
3. Configuration file (nashfinder.config.yaml)
4. Default values

Example usage:
    from nashfinder.core.settings import get_settings

    settings = get_settings()
    print(settings.logging.level)

Environment variable support:
    NASHFINDER_MAX_ENUMERATION_SIZE=4096
    NASHFINDER_LOGGING__LEVEL=DEBUG
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ["nashfinder.config.yaml", "nashfinder.config.yml"]

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_MAX_ENUMERATION_SIZE = 2**16


def _find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file by searching current directory and parents.

    Args:
        start_dir: Directory to start search from.
            Defaults to current working directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()

    # Limit search depth to prevent infinite loops
    for _ in range(10):
        for filename in CONFIG_FILE_NAMES:
            config_path = search_dir / filename
            if config_path.exists():
                return config_path

        parent = search_dir.parent
        if parent == search_dir:
            break
        search_dir = parent

    return None


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Unreadable or malformed files are logged and treated as empty.
    """
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
            return config if isinstance(config, dict) else {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except OSError as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="NASHFINDER_LOGGING__")

    level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_output: bool | None = Field(
        default=None,
        description="Output logs in JSON format. None auto-detects from the TTY",
    )
    file: str | None = Field(
        default=None,
        description="Log file path (optional)",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        upper_v = v.upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}"
            )
        return upper_v


class NashFinderSettings(BaseSettings):
    """Main NashFinder configuration settings.

    Example:
        settings = NashFinderSettings(max_enumeration_size=1024)
        print(settings.logging.level)
    """

    model_config = SettingsConfigDict(
        env_prefix="NASHFINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    max_enumeration_size: int = Field(
        default=DEFAULT_MAX_ENUMERATION_SIZE,
        ge=1,
        description=(
            "Number of combinations above which power sets and cartesian "
            "products log a large_enumeration warning"
        ),
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @model_validator(mode="before")
    @classmethod
    def load_from_config_file(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Merge values from nashfinder.config.yaml beneath explicit data."""
        if data.get("_skip_file_loading"):
            data.pop("_skip_file_loading", None)
            return data

        config_path = _find_config_file()
        if config_path:
            file_config = _load_yaml_config(config_path)
            if file_config:
                logger.debug("Loaded configuration from %s", config_path)
                merged = {**file_config, **data}
                if isinstance(file_config.get("logging"), dict):
                    merged["logging"] = {
                        **file_config["logging"],
                        **(
                            data["logging"]
                            if isinstance(data.get("logging"), dict)
                            else {}
                        ),
                    }
                return merged

        return data


def get_settings(
    config_file: Path | None = None,
    **overrides: Any,
) -> NashFinderSettings:
    """Get NashFinder settings instance.

    Args:
        config_file: Optional explicit path to configuration file.
        **overrides: Explicit configuration overrides.

    Returns:
        Configured NashFinderSettings instance.
    """
    if config_file and config_file.exists():
        file_config = _load_yaml_config(config_file)
        merged = {**file_config, **overrides, "_skip_file_loading": True}
        return NashFinderSettings(**merged)

    return NashFinderSettings(**overrides)


_active_settings: NashFinderSettings | None = None


@lru_cache
def _load_cached_settings() -> NashFinderSettings:
    return get_settings()


def get_cached_settings() -> NashFinderSettings:
    """Get the settings shared by the library.

    Returns the settings installed with use_settings, or else a cached
    instance loaded from the environment and nashfinder.config.yaml.
    """
    if _active_settings is not None:
        return _active_settings
    return _load_cached_settings()


def use_settings(settings: NashFinderSettings | None) -> None:
    """Install the settings returned by get_cached_settings.

    Args:
        settings: Settings to share, or None to go back to loading them.
    """
    global _active_settings
    _active_settings = settings


def reset_settings() -> None:
    """Drop installed and cached settings. Primarily useful for testing."""
    use_settings(None)
    _load_cached_settings.cache_clear()
