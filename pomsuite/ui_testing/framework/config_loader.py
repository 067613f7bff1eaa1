"""
================================================================================
Configuration Loader
================================================================================

Flat YAML key/value configuration with environment variable override support.

Features:
    - Single load at construction, read-only afterwards
    - Environment variable override (UI_URL overrides url)
    - Default value support with type conversion for env strings
    - Missing file degrades to an empty mapping (getters return None)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "resources" / "config.yaml"

ENV_PREFIX = "UI_"


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""
    pass


class ConfigLoader:
    """
    UI test configuration.

    Lookup order (highest to lowest priority):
        1. Environment variables (UI_BROWSER, UI_URL, ...)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get_browser()
        'chrome'
        >>> config.get("headless", True)
        True

    Environment Variable Mapping:
        - browser -> UI_BROWSER
        - url -> UI_URL
        - screenshot_dir -> UI_SCREENSHOT_DIR
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = self._load_config()

    @property
    def path(self) -> Path:
        return self._config_path

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e
        except OSError as e:
            logger.warning(f"Configuration file unreadable: {self._config_path} ({e})")
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a key/value mapping: {self._config_path}"
            )

        logger.debug(f"Loaded configuration from: {self._config_path}")
        return data

    @staticmethod
    def env_key(key: str) -> str:
        return ENV_PREFIX + key.upper().replace(".", "_").replace("-", "_")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key (e.g., "browser")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_value = os.environ.get(self.env_key(key))
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config.get(key)
        if value is None:
            return default
        return value

    def get_browser(self) -> Optional[str]:
        return self.get("browser")

    def get_url(self) -> Optional[str]:
        return self.get("url")

    def get_username(self) -> Optional[str]:
        return self.get("username")

    def get_password(self) -> Optional[str]:
        return self.get("password")

    def is_headless(self) -> bool:
        return bool(self.get("headless", True))

    def as_dict(self) -> Dict[str, Any]:
        """Copy of the file-backed values (without env overrides)."""
        return dict(self._config)

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
]
