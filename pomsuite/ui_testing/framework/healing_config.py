"""
Self-healing on/off switch stored in `resources/healing.yaml`.

The flag is read once when the test session starts and handed to
`DriverManager(healing_enabled=...)`; changing it mid-run only affects
the next session.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger


DEFAULT_HEALING_FILE = Path(__file__).parent.parent.parent / "resources" / "healing.yaml"

HEAL_ENABLED_KEY = "heal-enabled"


class HealingConfig:
    """Read and toggle the `heal-enabled` flag."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_HEALING_FILE

    def _read(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"expected a key/value mapping in {self.path}")
        return data

    def is_healing_enabled(self) -> bool:
        """Current flag value; unreadable file or missing key means enabled."""
        try:
            data = self._read()
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            return True

        value = data.get(HEAL_ENABLED_KEY, True)
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)

    def enable_healing(self) -> None:
        self._set_healing_enabled(True)

    def disable_healing(self) -> None:
        self._set_healing_enabled(False)

    def _set_healing_enabled(self, enabled: bool) -> None:
        try:
            data = self._read()
            data[HEAL_ENABLED_KEY] = enabled
            with open(self.path, "w", encoding="utf-8") as f:
                f.write("# Self-healing locator configuration\n")
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.error(f"Error updating {self.path}: {e}")
            return

        logger.info(f"Self-healing {'ENABLED' if enabled else 'DISABLED'}")


__all__ = [
    "HealingConfig",
    "DEFAULT_HEALING_FILE",
    "HEAL_ENABLED_KEY",
]
