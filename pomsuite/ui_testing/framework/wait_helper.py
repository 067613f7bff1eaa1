# ================================================================================
# Wait Helper Module
# ================================================================================
#
# Explicit wait utilities for UI synchronization.
#
# Each wait polls a condition until it holds or the timeout elapses, then
# raises WaitTimeoutError. Conditions that raise while polling (element
# detached mid-render, navigation in progress) are retried and the last
# error is reported in the timeout message.
#
# Usage:
#   wait = WaitHelper(driver)
#   wait.wait_for_visible(login_page.find(LoginPage.USERNAME))
#   wait.wait_for_title_contains("Secure Area")
#   wait.wait_for_element(element, timeout_seconds=20)
#
# ================================================================================

import time
from typing import Callable, Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator

from .driver import Driver
from .timeouts import MEDIUM_WAIT


DEFAULT_POLL_INTERVAL = 0.5


class WaitTimeoutError(Exception):
    """Raised when a wait operation times out."""
    pass


def wait_until(
    condition: Callable[[], bool],
    timeout: float,
    description: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
) -> None:
    """
    Poll `condition` until it returns True.

    Args:
        condition: Zero-argument callable
        timeout: Timeout in seconds
        description: Human-readable condition for logs and errors
        poll_interval: Seconds between polls

    Raises:
        WaitTimeoutError: If timeout is reached without success
    """
    deadline = time.monotonic() + timeout
    attempt = 0
    last_error: Optional[str] = None

    while True:
        attempt += 1
        try:
            if condition():
                logger.debug(f"Wait satisfied after {attempt} attempts: {description}")
                return
        except PlaywrightError as e:
            last_error = str(e)

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            error_msg = (
                f"Timeout after {timeout}s waiting for: {description}. "
                f"Last error: {last_error}"
            )
            logger.error(error_msg)
            raise WaitTimeoutError(error_msg)

        time.sleep(min(poll_interval, remaining))


class WaitHelper:
    """
    Explicit waits bound to a driver and a default timeout.

    Implicit wait (`set_implicit_wait`) is a separate, session-wide setting
    applied to every element lookup; combining a long implicit wait with
    explicit waits multiplies waiting time.
    """

    def __init__(
        self,
        driver: Driver,
        timeout: float = MEDIUM_WAIT,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Args:
            driver: Driver whose page is being synchronized
            timeout: Default timeout in seconds
            poll_interval: Seconds between polls
        """
        self.driver = driver
        self.timeout = timeout
        self.poll_interval = poll_interval

    def _until(self, condition: Callable[[], bool], description: str, timeout: Optional[float] = None) -> None:
        wait_until(
            condition,
            timeout=self.timeout if timeout is None else timeout,
            description=description,
            poll_interval=self.poll_interval,
        )

    def wait_for_visible(self, element: PlaywrightLocator) -> None:
        """Wait for element to become visible."""
        with allure.step("Wait for element visible"):
            self._until(element.is_visible, "element visible")

    def wait_for_clickable(self, element: PlaywrightLocator) -> None:
        """Wait for element to be visible and enabled."""
        with allure.step("Wait for element clickable"):
            self._until(
                lambda: element.is_visible() and element.is_enabled(),
                "element clickable",
            )

    def wait_for_title_contains(self, text: str) -> None:
        """Wait for the page title to contain `text`."""
        with allure.step(f"Wait for title containing: {text}"):
            self._until(lambda: text in self.driver.title, f"title contains '{text}'")

    def wait_for_element(self, element: PlaywrightLocator, timeout_seconds: float) -> None:
        """Wait for element visibility with a one-off timeout."""
        with allure.step(f"Wait {timeout_seconds}s for element visible"):
            self._until(element.is_visible, "element visible", timeout=timeout_seconds)

    def set_implicit_wait(self, timeout_seconds: float) -> None:
        """Set the driver-wide implicit wait applied to every lookup."""
        self.driver.set_implicit_wait(timeout_seconds)


__all__ = [
    "WaitHelper",
    "WaitTimeoutError",
    "wait_until",
]
