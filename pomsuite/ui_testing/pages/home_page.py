"""
================================================================================
Home Page Object (Secure Area)
================================================================================

Page shown after a successful login.

================================================================================
"""

from __future__ import annotations

import allure

from pomsuite.ui_testing.framework.locators import By, Locator
from pomsuite.ui_testing.framework.page_base import BasePage


class HomePage(BasePage):
    """Secure-area page object."""

    SECURE_PATH_MARKER = "secure"

    LOGOUT = Locator(
        By.LINK_TEXT,
        "Logout",
        name="home.logout",
        fallbacks=(Locator(By.CSS, "a[href='/logout']"),),
    )

    @allure.step("Logout")
    def click_logout(self) -> None:
        self.click(self.LOGOUT)
        self.wait_for_page_load()

    def get_page_title(self) -> str:
        return self.title

    def get_current_url(self) -> str:
        return self.current_url

    def is_secure_area(self) -> bool:
        return self.SECURE_PATH_MARKER in self.current_url
