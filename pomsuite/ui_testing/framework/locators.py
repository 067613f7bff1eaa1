"""
================================================================================
Locators
================================================================================

Strategy + value pairs identifying UI elements, rendered to Playwright
selector strings.

Usage:
    >>> USERNAME = Locator(By.ID, "username", name="login.username")
    >>> USERNAME.selector
    '[id="username"]'

    >>> SUBMIT = Locator(
    ...     By.ID, "login", name="login.submit",
    ...     fallbacks=(Locator(By.CSS, "button[type='submit']"),),
    ... )

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class By(str, Enum):
    """Supported locator strategies."""

    ID = "id"
    NAME = "name"
    CLASS_NAME = "class name"
    CSS = "css selector"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TEXT = "text"
    TEST_ID = "test id"
    SELECTOR = "selector"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class Locator:
    """
    Immutable locator definition.

    Attributes:
        by: Locator strategy
        value: Strategy-specific value (id, class, xpath expression, ...)
        name: Logical element name, used as the self-healing key
        fallbacks: Alternate locators tried when this one fails and healing is on
    """

    by: By
    value: str
    name: Optional[str] = None
    fallbacks: Tuple["Locator", ...] = ()

    @property
    def selector(self) -> str:
        """Playwright selector for this locator."""
        if self.by is By.ID:
            return f"[id={_quote(self.value)}]"
        if self.by is By.NAME:
            return f"[name={_quote(self.value)}]"
        if self.by is By.CLASS_NAME:
            # "flash error" style compound class names
            return "".join(f".{cls}" for cls in self.value.split())
        if self.by is By.XPATH:
            return f"xpath={self.value}"
        if self.by is By.LINK_TEXT:
            return f"a:text-is({_quote(self.value)})"
        if self.by is By.PARTIAL_LINK_TEXT:
            return f"a:has-text({_quote(self.value)})"
        if self.by is By.TEXT:
            return f"text={self.value}"
        if self.by is By.TEST_ID:
            return f"[data-testid={_quote(self.value)}]"
        # CSS and raw Playwright selectors pass through unchanged
        return self.value

    @property
    def key(self) -> str:
        """Stable key identifying the logical element."""
        return self.name or f"{self.by.value}={self.value}"

    def describe(self) -> str:
        return f"{self.key} ({self.by.value}: {self.value})"

    def __str__(self) -> str:
        return self.describe()


__all__ = [
    "By",
    "Locator",
]
