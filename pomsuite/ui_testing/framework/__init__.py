"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework with self-healing locators.

Components:
    - locators: Strategy + value element locators
    - driver: Driver capability interface and the direct Playwright driver
    - self_healing: Self-healing driver decorator and its learning store
    - browser_manager: Driver lifecycle and screenshots
    - wait_helper: Explicit waits
    - page_base: Base page object and presence checks
    - config_loader / healing_config: YAML-backed settings

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import DriverManager
from .config_loader import ConfigLoader, ConfigurationError
from .driver import DirectDriver, Driver, ElementNotFoundError
from .healing_config import HealingConfig
from .locators import By, Locator
from .page_base import BasePage, PresenceCheck, PresenceState
from .self_healing import HealingStore, SelfHealingDriver
from .wait_helper import WaitHelper, WaitTimeoutError

__all__ = [
    "BasePage",
    "By",
    "ConfigLoader",
    "ConfigurationError",
    "DirectDriver",
    "Driver",
    "DriverManager",
    "ElementNotFoundError",
    "HealingConfig",
    "HealingStore",
    "Locator",
    "PresenceCheck",
    "PresenceState",
    "SelfHealingDriver",
    "WaitHelper",
    "WaitTimeoutError",
]
