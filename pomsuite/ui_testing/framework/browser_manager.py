"""
================================================================================
Driver Manager
================================================================================

Browser session lifecycle management for UI automation.

Features:
    - One live driver per manager, created lazily and reused until quit
    - Case-insensitive browser resolution (chrome, firefox, edge)
    - Browser-specific launch presets
    - Optional self-healing wrapper chosen at construction
    - Timestamped failure screenshots

The manager is an ordinary object: pytest fixtures own it and hand the
driver to page objects, so no module-level driver state exists.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .driver import DirectDriver, Driver
from .self_healing import HEALING_STORE_FILE, HealingStore, SelfHealingDriver


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

DEFAULT_BROWSER = "chrome"
SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")


class DriverManager:
    """
    Creates, shares and tears down the browser driver.

    Usage:
        manager = DriverManager(headless=True, healing_enabled=True)
        driver = manager.get_driver("Chrome")
        driver.get("https://example.com")
        manager.take_screenshot("test_example")
        manager.quit_driver()
    """

    # Browser launch presets: (launcher attribute, launch options, context options, maximize after launch)
    BROWSER_PRESETS: Dict[str, Dict[str, Any]] = {
        "chrome": {
            "launcher": "chromium",
            "launch": {
                "args": ["--start-maximized", "--disable-notifications"],
            },
            "context": {"no_viewport": True},
            "maximize": False,
        },
        "firefox": {
            "launcher": "firefox",
            "launch": {},
            "context": {},
            "maximize": True,
        },
        "edge": {
            "launcher": "chromium",
            "launch": {"channel": "msedge"},
            "context": {},
            "maximize": True,
        },
    }

    def __init__(
        self,
        headless: bool = True,
        healing_enabled: bool = True,
        screenshot_dir: Union[str, Path] = SCREENSHOT_DIR,
        store_path: Union[str, Path] = HEALING_STORE_FILE,
    ):
        """
        Initialize driver manager.

        Args:
            headless: Run browser in headless mode
            healing_enabled: Wrap new drivers with SelfHealingDriver
            screenshot_dir: Directory receiving screenshots
            store_path: Healing store file used by the self-healing wrapper
        """
        self.headless = headless
        self.healing_enabled = healing_enabled
        self.screenshot_dir = Path(screenshot_dir)
        self.store_path = Path(store_path)

        self._driver: Optional[Driver] = None

    @property
    def has_driver(self) -> bool:
        return self._driver is not None

    @property
    def browser_name(self) -> Optional[str]:
        """Resolved browser name of the live driver."""
        return self._driver.browser_name if self._driver else None

    @staticmethod
    def resolve_browser(browser_name: Optional[str]) -> str:
        """
        Map a configured browser name onto a supported browser.

        Unknown or empty names fall back to chrome with a warning.
        """
        name = (browser_name or "").strip().lower()
        if name in SUPPORTED_BROWSERS:
            return name
        logger.warning(
            f"Browser '{browser_name}' not supported. Launching {DEFAULT_BROWSER}..."
        )
        return DEFAULT_BROWSER

    def get_driver(self, browser_name: Optional[str] = None) -> Driver:
        """
        Return the live driver, creating it on first call.

        Later calls return the same driver regardless of `browser_name`.
        Launch failures (missing browser binary, bad channel) propagate.

        Args:
            browser_name: chrome, firefox or edge (case-insensitive)

        Returns:
            Driver, self-healing wrapped when healing is enabled
        """
        if self._driver is None:
            self._driver = self._create_driver(self.resolve_browser(browser_name))
        return self._driver

    def _create_driver(self, browser: str) -> Driver:
        preset = self.BROWSER_PRESETS[browser]

        playwright = sync_playwright().start()
        try:
            launcher = getattr(playwright, preset["launcher"])
            launched = launcher.launch(headless=self.headless, **preset["launch"])
            context = launched.new_context(**preset["context"])
            page = context.new_page()
        except Exception:
            playwright.stop()
            raise

        driver: Driver = DirectDriver(
            page,
            context=context,
            browser=launched,
            playwright=playwright,
            browser_name=browser,
        )
        if preset["maximize"]:
            try:
                driver.maximize_window()
            except Exception:
                driver.quit()
                raise

        logger.debug(f"Browser started: {browser} (headless={self.headless})")

        if self.healing_enabled:
            driver = SelfHealingDriver(driver, HealingStore(self.store_path))
            logger.debug(f"Self-healing enabled (store: {self.store_path})")

        return driver

    def quit_driver(self) -> None:
        """Quit the live driver, if any, so the next request starts fresh."""
        if self._driver is None:
            return
        try:
            self._driver.quit()
        finally:
            self._driver = None

    def _screenshot_path(self, test_name: str) -> Path:
        # Parametrized ids contain brackets and separators
        safe_name = re.sub(r"[^\w.-]+", "_", test_name).strip("_") or "screenshot"
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.screenshot_dir / f"{safe_name}_{timestamp}.png"

        # Same test captured twice within one second
        counter = 1
        while filepath.exists():
            filepath = self.screenshot_dir / f"{safe_name}_{timestamp}_{counter}.png"
            counter += 1
        return filepath

    def take_screenshot(self, test_name: str, attach_to_allure: bool = True) -> Path:
        """
        Capture the current page to `<test_name>_<YYYYMMDD_HHMMSS>.png`.

        Write failures are logged, not raised; the intended path is
        returned either way.

        Args:
            test_name: Test name used as filename prefix
            attach_to_allure: Whether to attach the image to the Allure report

        Returns:
            Path of the screenshot
        """
        filepath = self._screenshot_path(test_name)

        if self._driver is None:
            logger.warning(f"No live driver, screenshot skipped: {filepath}")
            return filepath

        driver = self._driver
        if isinstance(driver, SelfHealingDriver):
            driver = driver.delegate

        try:
            self.screenshot_dir.mkdir(parents=True, exist_ok=True)
            image = driver.screenshot(filepath)
        except (OSError, PlaywrightError) as e:
            logger.error(f"Failed to save screenshot: {e}")
            return filepath

        if attach_to_allure:
            allure.attach(
                image,
                name=test_name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.info(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "DriverManager",
    "SCREENSHOT_DIR",
    "SUPPORTED_BROWSERS",
]
