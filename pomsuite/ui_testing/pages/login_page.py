"""
================================================================================
Login Page Object
================================================================================

Login form: username, password, submit, and the error banner shown after a
rejected attempt.

Primary locators match the configured application, so a run with
self-healing disabled passes. Fallbacks cover older markup (the
`.error-message` banner, a bare submit button) and are only tried by the
self-healing driver.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure

from pomsuite.ui_testing.framework.locators import By, Locator
from pomsuite.ui_testing.framework.page_base import BasePage, PresenceCheck


class LoginPage(BasePage):
    """Login page object."""

    USERNAME = Locator(By.ID, "username", name="login.username")
    PASSWORD = Locator(By.ID, "password", name="login.password")
    SUBMIT = Locator(
        By.CSS,
        "#login button[type='submit']",
        name="login.submit",
        fallbacks=(
            Locator(By.CSS, "button[type='submit']"),
            Locator(By.ID, "login"),
        ),
    )
    # <div id="flash" class="flash error">
    ERROR_MESSAGE = Locator(
        By.CSS,
        "#flash.error",
        name="login.error_message",
        fallbacks=(
            Locator(By.CLASS_NAME, "error-message"),
            Locator(By.CSS, "[role='alert']"),
        ),
    )

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        """Clear and fill both fields, then submit."""
        self.type_text(self.USERNAME, username)
        self.type_text(self.PASSWORD, password)
        self.click(self.SUBMIT)
        self.wait_for_page_load()

    def error_message_presence(self, timeout: Optional[float] = None) -> PresenceCheck:
        return self.check_presence(self.ERROR_MESSAGE, timeout)

    @allure.step("Check login error is displayed")
    def is_error_message_displayed(self) -> bool:
        """True when the error banner is visible; a missing banner is False."""
        return bool(self.error_message_presence())

    def get_error_message(self) -> str:
        return self.text_of(self.ERROR_MESSAGE).strip()

    def is_form_displayed(self) -> bool:
        return all(
            self.is_displayed(locator)
            for locator in (self.USERNAME, self.PASSWORD, self.SUBMIT)
        )
