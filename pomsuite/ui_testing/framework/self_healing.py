"""
================================================================================
Self-Healing Driver
================================================================================

Driver decorator that substitutes learned alternate locators when the
original locator stops matching.

How healing works:
    1. Every successful lookup records an element fingerprint
       (tag, id, name, data-testid, text, classes) under the locator key.
    2. When a lookup fails, candidates are tried in order:
         - selectors that healed this element before
         - selectors derived from the recorded fingerprint
         - fallbacks declared on the Locator
    3. The first candidate that matches is returned, logged as a warning
       and persisted so later runs try it first.

Usage:
    >>> healing = SelfHealingDriver(direct_driver, HealingStore(path))
    >>> healing.find_element(LOGIN_BUTTON).click()
    >>> print(healing.get_health_report())

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page

from .driver import Driver, ElementNotFoundError
from .locators import By, Locator


# Learned fingerprints and healed selectors
HEALING_STORE_FILE = Path(__file__).parent.parent / ".healing_store.json"

FINGERPRINT_SCRIPT = """
e => ({
    tag: e.tagName.toLowerCase(),
    id: e.id || null,
    name: e.getAttribute('name'),
    testid: e.getAttribute('data-testid'),
    text: ((e.innerText || '').trim().slice(0, 80)) || null,
    classes: (e.getAttribute('class') || '').trim().split(/\\s+/).filter(Boolean),
})
"""


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class LocatorHealth:
    """
    Records one healed lookup.

    Attributes:
        element_name: Locator key
        primary_selector: The selector that failed
        strategy: Which candidate source healed it ("healed", "fingerprint", "fallback_N")
        healed_selector: The selector that matched instead
    """
    element_name: str
    primary_selector: str
    strategy: str
    healed_selector: str


class HealingStore:
    """
    JSON-backed memory of element fingerprints and healed selectors.

    File layout:
        {
            "login.submit": {
                "fingerprint": {"tag": "button", "id": "login", ...},
                "healed": ["button[type='submit']"]
            }
        }
    """

    def __init__(self, path: Union[str, Path] = HEALING_STORE_FILE):
        self._path = Path(path)
        self._entries: Dict[str, Dict[str, Any]] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load healing store {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed healing store: {self._path}")
            return {}
        return data

    def save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._entries, f, indent=2, sort_keys=True)
        except OSError as e:
            logger.error(f"Failed to save healing store {self._path}: {e}")

    def fingerprint(self, key: str) -> Optional[Dict[str, Any]]:
        return self._entries.get(key, {}).get("fingerprint")

    def healed_selectors(self, key: str) -> List[str]:
        return list(self._entries.get(key, {}).get("healed", []))

    def remember(self, key: str, fingerprint: Dict[str, Any]) -> None:
        """Store the latest fingerprint for `key` (writes only on change)."""
        entry = self._entries.setdefault(key, {})
        if entry.get("fingerprint") == fingerprint:
            return
        entry["fingerprint"] = fingerprint
        self.save()

    def record_healed(self, key: str, selector: str) -> None:
        """Put `selector` first in the healed list for `key`."""
        entry = self._entries.setdefault(key, {})
        healed = [s for s in entry.get("healed", []) if s != selector]
        entry["healed"] = [selector] + healed
        self.save()

    def keys(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = {}
        self.save()


def fingerprint_selectors(fingerprint: Dict[str, Any]) -> List[str]:
    """
    Derive candidate selectors from a recorded fingerprint.

    Ordered from most to least stable: data-testid, id, name, exact text,
    tag + classes.
    """
    tag = fingerprint.get("tag") or "*"
    candidates: List[str] = []

    if fingerprint.get("testid"):
        candidates.append(f"[data-testid={_quote(fingerprint['testid'])}]")
    if fingerprint.get("id"):
        candidates.append(f"{tag}[id={_quote(fingerprint['id'])}]")
    if fingerprint.get("name"):
        candidates.append(f"{tag}[name={_quote(fingerprint['name'])}]")
    if fingerprint.get("text"):
        candidates.append(f"{tag}:text-is({_quote(fingerprint['text'])})")
    classes = fingerprint.get("classes") or []
    if classes:
        candidates.append(tag + "".join(f".{cls}" for cls in classes))

    return candidates


class SelfHealingDriver(Driver):
    """
    Self-healing decorator over another `Driver`.

    Every capability except element lookup is delegated unchanged.
    """

    def __init__(self, delegate: Driver, store: Optional[HealingStore] = None):
        self._delegate = delegate
        self._store = store or HealingStore()
        self._health_records: List[LocatorHealth] = []
        self.browser_name = delegate.browser_name

    @property
    def delegate(self) -> Driver:
        """The wrapped (unhealed) driver."""
        return self._delegate

    @property
    def store(self) -> HealingStore:
        return self._store

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    # =========================================================================
    # Element lookup
    # =========================================================================

    def find_element(self, locator: Locator) -> PlaywrightLocator:
        try:
            element = self._delegate.find_element(locator)
        except ElementNotFoundError as original_error:
            return self._heal(locator, original_error)

        self._learn(locator, element)
        return element

    def find_elements(self, locator: Locator) -> List[PlaywrightLocator]:
        elements = self._delegate.find_elements(locator)
        if elements:
            return elements

        for strategy, candidate in self._candidates(locator):
            elements = self._delegate.find_elements(candidate)
            if elements:
                self._record_heal(locator, strategy, candidate)
                return elements
        return []

    def _learn(self, locator: Locator, element: PlaywrightLocator) -> None:
        try:
            fingerprint = element.evaluate(FINGERPRINT_SCRIPT)
        except PlaywrightError as e:
            logger.debug(f"Could not fingerprint '{locator.key}': {e}")
            return
        self._store.remember(locator.key, fingerprint)

    def _candidates(self, locator: Locator) -> List[Tuple[str, Locator]]:
        seen = {locator.selector}
        candidates: List[Tuple[str, Locator]] = []

        def add(strategy: str, candidate: Locator) -> None:
            if candidate.selector in seen:
                return
            seen.add(candidate.selector)
            candidates.append((strategy, candidate))

        for selector in self._store.healed_selectors(locator.key):
            add("healed", Locator(By.SELECTOR, selector, name=locator.key))

        fingerprint = self._store.fingerprint(locator.key)
        if fingerprint:
            for selector in fingerprint_selectors(fingerprint):
                add("fingerprint", Locator(By.SELECTOR, selector, name=locator.key))

        for i, fallback in enumerate(locator.fallbacks, start=1):
            add(f"fallback_{i}", fallback)

        return candidates

    def _heal(
        self,
        locator: Locator,
        original_error: ElementNotFoundError,
    ) -> PlaywrightLocator:
        errors = [f"original: {locator.selector} -> {str(original_error)[:80]}"]

        for strategy, candidate in self._candidates(locator):
            try:
                element = self._delegate.find_element(candidate)
            except ElementNotFoundError as e:
                errors.append(f"{strategy}: {candidate.selector} -> {str(e)[:80]}")
                continue

            self._record_heal(locator, strategy, candidate)
            self._learn(locator, element)
            return element

        error_msg = (
            f"❌ All locators failed for '{locator.key}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg) from original_error

    def _record_heal(self, locator: Locator, strategy: str, candidate: Locator) -> None:
        health = LocatorHealth(
            element_name=locator.key,
            primary_selector=locator.selector,
            strategy=strategy,
            healed_selector=candidate.selector,
        )
        self._health_records.append(health)
        self._store.record_healed(locator.key, candidate.selector)
        logger.warning(
            f"⚠️ Element '{locator.key}' healed via {strategy}: "
            f"{locator.selector} -> {candidate.selector}"
        )

    def get_health_report(self) -> str:
        """
        Summarize healed lookups.

        Elements listed here are candidates for updating their primary locator.
        """
        if not self._health_records:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Locator Health Report - Healed Elements:",
            "",
            "Consider updating the primary locators below:",
            "",
        ]
        for health in self._health_records:
            report_lines.extend([
                f"  [{health.element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Healed ({health.strategy}): {health.healed_selector}",
                "",
            ])
        return "\n".join(report_lines)

    # =========================================================================
    # Delegated capabilities
    # =========================================================================

    @property
    def page(self) -> Page:
        return self._delegate.page

    def get(self, url: str) -> None:
        self._delegate.get(url)

    @property
    def title(self) -> str:
        return self._delegate.title

    @property
    def current_url(self) -> str:
        return self._delegate.current_url

    def maximize_window(self) -> None:
        self._delegate.maximize_window()

    def set_implicit_wait(self, seconds: float) -> None:
        self._delegate.set_implicit_wait(seconds)

    @property
    def implicit_wait(self) -> float:
        return self._delegate.implicit_wait

    def screenshot(self, path: Union[str, Path]) -> bytes:
        return self._delegate.screenshot(path)

    def quit(self) -> None:
        self._delegate.quit()


__all__ = [
    "SelfHealingDriver",
    "HealingStore",
    "LocatorHealth",
    "HEALING_STORE_FILE",
    "fingerprint_selectors",
]
