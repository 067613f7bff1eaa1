"""
================================================================================
Driver Capability Interface
================================================================================

The capability set page objects and waits consume from the browser:

    navigate, find element(s) by locator, read title/URL, manage window,
    manage timeouts, capture screenshot, quit

`DirectDriver` talks to Playwright directly. `SelfHealingDriver`
(see `self_healing.py`) implements the same interface on top of another
driver, so callers never need to know which variant they hold.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Locator as PlaywrightLocator,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
)

from .locators import Locator
from .timeouts import PAGE_LOAD_TIMEOUT, to_ms


class ElementNotFoundError(Exception):
    """Raised when a locator (and every healing candidate) matches nothing."""
    pass


class Driver(ABC):
    """Browser session capability interface."""

    browser_name: str = ""

    @property
    @abstractmethod
    def page(self) -> Page:
        """Underlying Playwright page."""

    @abstractmethod
    def get(self, url: str) -> None:
        """Navigate to URL."""

    @abstractmethod
    def find_element(self, locator: Locator) -> PlaywrightLocator:
        """
        Resolve a single element.

        Raises:
            ElementNotFoundError: When nothing matches within the implicit wait
        """

    @abstractmethod
    def find_elements(self, locator: Locator) -> List[PlaywrightLocator]:
        """Resolve all matching elements (empty list when none)."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Current document title."""

    @property
    @abstractmethod
    def current_url(self) -> str:
        """Current page URL."""

    @abstractmethod
    def maximize_window(self) -> None:
        """Resize the viewport to the available screen size."""

    @abstractmethod
    def set_implicit_wait(self, seconds: float) -> None:
        """Set the polling window applied to every subsequent lookup."""

    @property
    @abstractmethod
    def implicit_wait(self) -> float:
        """Current implicit wait in seconds."""

    @abstractmethod
    def screenshot(self, path: Union[str, Path]) -> bytes:
        """Capture the current viewport to `path` and return the PNG bytes."""

    @abstractmethod
    def quit(self) -> None:
        """Close every window and release the browser."""


class DirectDriver(Driver):
    """
    Driver backed directly by a Playwright page.

    Owns the Playwright instance, browser and context it was created with
    and releases all of them on `quit()`.

    Implicit wait defaults to 0: a lookup checks the DOM once and fails
    immediately when nothing matches. Explicit waits in `WaitHelper` are
    independent of this setting; mixing both multiplies waiting time.
    """

    def __init__(
        self,
        page: Page,
        context: Optional[BrowserContext] = None,
        browser: Optional[Browser] = None,
        playwright: Optional[Playwright] = None,
        browser_name: str = "chrome",
    ):
        self._page = page
        self._context = context
        self._browser = browser
        self._playwright = playwright
        self.browser_name = browser_name
        self._implicit_wait_ms = 0

    @property
    def page(self) -> Page:
        return self._page

    def get(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        self._page.goto(url)

    def find_element(self, locator: Locator) -> PlaywrightLocator:
        element = self._page.locator(locator.selector).first
        try:
            if self._implicit_wait_ms > 0:
                element.wait_for(state="attached", timeout=self._implicit_wait_ms)
            elif element.count() == 0:
                raise ElementNotFoundError(f"No element matches {locator}")
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"No element matches {locator} after {self._implicit_wait_ms}ms"
            ) from e
        return element

    def find_elements(self, locator: Locator) -> List[PlaywrightLocator]:
        elements = self._page.locator(locator.selector)
        if self._implicit_wait_ms > 0:
            try:
                elements.first.wait_for(state="attached", timeout=self._implicit_wait_ms)
            except PlaywrightTimeoutError:
                return []
        return elements.all()

    @property
    def title(self) -> str:
        return self._page.title()

    @property
    def current_url(self) -> str:
        return self._page.url

    def maximize_window(self) -> None:
        screen = self._page.evaluate(
            "() => ({width: window.screen.availWidth, height: window.screen.availHeight})"
        )
        self._page.set_viewport_size(screen)
        logger.debug(f"Viewport maximized to {screen['width']}x{screen['height']}")

    def set_implicit_wait(self, seconds: float) -> None:
        self._implicit_wait_ms = to_ms(seconds)
        # Playwright treats 0 as "no timeout"; 0 restores its 30s default
        self._page.set_default_timeout(self._implicit_wait_ms or to_ms(PAGE_LOAD_TIMEOUT))
        logger.debug(f"Implicit wait set to {seconds}s")

    @property
    def implicit_wait(self) -> float:
        return self._implicit_wait_ms / 1000

    def screenshot(self, path: Union[str, Path]) -> bytes:
        return self._page.screenshot(path=str(path))

    def quit(self) -> None:
        if self._context:
            try:
                self._context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
            self._context = None

        if self._browser:
            self._browser.close()
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug(f"Browser closed: {self.browser_name}")


__all__ = [
    "Driver",
    "DirectDriver",
    "ElementNotFoundError",
]
