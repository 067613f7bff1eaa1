"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Driver-backed element interactions with Allure steps
    - Presence checks that tell "absent" apart from "timed out" and errors
    - Title/URL accessors
    - A WaitHelper bound to the same driver

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .driver import Driver, ElementNotFoundError
from .locators import Locator
from .timeouts import PAGE_LOAD_TIMEOUT, to_ms
from .wait_helper import WaitHelper


class PresenceState(str, Enum):
    """Outcome of an element presence check."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    ABSENT = "absent"
    TIMED_OUT = "timed_out"
    ERROR = "error"


@dataclass(frozen=True)
class PresenceCheck:
    """
    Result of `BasePage.check_presence`.

    Truthy only when the element is visible, so boolean callers keep the
    "missing element means False" behaviour while others can inspect
    `state` and `error`.
    """

    state: PresenceState
    locator: Locator
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.state is PresenceState.VISIBLE

    @property
    def is_failure(self) -> bool:
        """True for outcomes that are not a confirmed answer."""
        return self.state in (PresenceState.TIMED_OUT, PresenceState.ERROR)


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            USERNAME = Locator(By.ID, "username", name="login.username")

            def login(self, username: str, password: str) -> None:
                self.type_text(self.USERNAME, username)
                ...
    """

    def __init__(self, driver: Driver, wait: Optional[WaitHelper] = None):
        """
        Initialize page object.

        Args:
            driver: Shared driver (direct or self-healing)
            wait: Wait helper; a default one is created when omitted
        """
        self.driver = driver
        self.wait = wait or WaitHelper(driver)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    def find(self, locator: Locator) -> PlaywrightLocator:
        return self.driver.find_element(locator)

    def click(self, locator: Locator) -> None:
        with allure.step(f"Click: {locator.key}"):
            self.find(locator).click()

    def type_text(self, locator: Locator, value: str) -> None:
        """Clear the input and type `value`."""
        shown = "*" * len(value) if "password" in locator.key.lower() else value
        with allure.step(f"Fill {locator.key}: {shown}"):
            element = self.find(locator)
            element.clear()
            element.fill(value)

    def text_of(self, locator: Locator) -> str:
        return self.find(locator).inner_text()

    def attribute_of(self, locator: Locator, name: str) -> Optional[str]:
        return self.find(locator).get_attribute(name)

    # =========================================================================
    # Presence Checks
    # =========================================================================

    def check_presence(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> PresenceCheck:
        """
        Check whether an element is displayed.

        Args:
            locator: Element locator
            timeout: Seconds to wait for visibility once found. None checks once.

        Returns:
            PresenceCheck with state VISIBLE, HIDDEN, ABSENT, TIMED_OUT or ERROR
        """
        try:
            element = self.find(locator)
            if timeout:
                element.wait_for(state="visible", timeout=to_ms(timeout))
                state = PresenceState.VISIBLE
            else:
                state = PresenceState.VISIBLE if element.is_visible() else PresenceState.HIDDEN
        except ElementNotFoundError:
            return PresenceCheck(PresenceState.ABSENT, locator)
        except PlaywrightTimeoutError as e:
            return PresenceCheck(PresenceState.TIMED_OUT, locator, str(e))
        except PlaywrightError as e:
            logger.warning(f"Presence check for '{locator.key}' failed: {e}")
            return PresenceCheck(PresenceState.ERROR, locator, str(e))

        return PresenceCheck(state, locator)

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return bool(self.check_presence(locator, timeout))

    # =========================================================================
    # Page State
    # =========================================================================

    @property
    def title(self) -> str:
        return self.driver.title

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def wait_for_page_load(
        self,
        state: str = "load",
        timeout: float = PAGE_LOAD_TIMEOUT,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in seconds
        """
        self.driver.page.wait_for_load_state(state, timeout=to_ms(timeout))


__all__ = [
    "BasePage",
    "PresenceCheck",
    "PresenceState",
]
