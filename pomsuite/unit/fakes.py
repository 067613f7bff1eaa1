"""
In-memory stand-ins for the Playwright sync objects the framework touches.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeElement:
    """Playwright Locator stand-in resolved against a FakePage."""

    def __init__(
        self,
        selector: str = "",
        count: int = 1,
        visible: Any = True,
        enabled: bool = True,
        text: str = "",
        attributes: Optional[Dict[str, str]] = None,
        fingerprint: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ):
        self.selector = selector
        self._count = count
        # bool, or an iterable consumed one poll at a time
        self._visible = iter(visible) if isinstance(visible, (list, tuple)) else visible
        self._last_visible = False
        self.enabled = enabled
        self.text = text
        self.attributes = attributes or {}
        self.fingerprint = fingerprint
        self.error = error
        self.value = ""
        self.clicks = 0
        self.cleared = 0
        self.wait_calls: List[Dict[str, Any]] = []

    @property
    def first(self) -> "FakeElement":
        return self

    def count(self) -> int:
        return self._count

    def all(self) -> List["FakeElement"]:
        return [self] * self._count

    def is_visible(self) -> bool:
        if self.error:
            raise self.error
        if isinstance(self._visible, bool):
            return self._count > 0 and self._visible
        self._last_visible = next(self._visible, self._last_visible)
        return self._last_visible

    def is_enabled(self) -> bool:
        return self.enabled

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.wait_calls.append({"state": state, "timeout": timeout})
        if self.error:
            raise self.error
        if self._count == 0:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")
        if state == "visible" and not self.is_visible():
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded: {self.selector} not visible")

    def click(self) -> None:
        self.clicks += 1

    def clear(self) -> None:
        self.cleared += 1
        self.value = ""

    def fill(self, value: str) -> None:
        self.value = value

    def inner_text(self) -> str:
        return self.text

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def evaluate(self, script: str) -> Dict[str, Any]:
        if self.fingerprint is None:
            raise PlaywrightError("Element is not attached to the DOM")
        return dict(self.fingerprint)


class FakePage:
    """Playwright Page stand-in keyed by selector string."""

    def __init__(
        self,
        elements: Optional[Dict[str, FakeElement]] = None,
        title: str = "The Internet",
        url: str = "about:blank",
        screenshot_error: Optional[Exception] = None,
    ):
        self.elements: Dict[str, FakeElement] = dict(elements or {})
        self._title = title
        self.url = url
        self.screenshot_error = screenshot_error
        self.default_timeout: Optional[float] = None
        self.viewport: Optional[Dict[str, int]] = None
        self.load_states: List[str] = []
        self.lookups: List[str] = []

    def add(self, selector: str, **kwargs: Any) -> FakeElement:
        element = FakeElement(selector, **kwargs)
        self.elements[selector] = element
        return element

    def locator(self, selector: str) -> FakeElement:
        self.lookups.append(selector)
        return self.elements.get(selector) or FakeElement(selector, count=0)

    def goto(self, url: str) -> None:
        self.url = url

    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def evaluate(self, script: str) -> Dict[str, int]:
        return {"width": 1920, "height": 1080}

    def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.viewport = dict(size)

    def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.load_states.append(state)

    def screenshot(self, path: Optional[str] = None) -> bytes:
        if self.screenshot_error:
            raise self.screenshot_error
        if path:
            Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


class FakeContext:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.page = FakePage()
        self.closed = False

    def new_page(self) -> FakePage:
        return self.page

    def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self, launcher: str, options: Dict[str, Any]):
        self.launcher = launcher
        self.options = options
        self.contexts: List[FakeContext] = []
        self.closed = False

    def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.closed = True


class FakeBrowserType:
    def __init__(self, name: str, launch_error: Optional[Exception] = None):
        self.name = name
        self.launch_error = launch_error
        self.browsers: List[FakeBrowser] = []

    def launch(self, **options: Any) -> FakeBrowser:
        if self.launch_error:
            raise self.launch_error
        browser = FakeBrowser(self.name, options)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, launch_error: Optional[Exception] = None):
        self.chromium = FakeBrowserType("chromium", launch_error)
        self.firefox = FakeBrowserType("firefox", launch_error)
        self.webkit = FakeBrowserType("webkit", launch_error)
        self.stopped = False

    @property
    def browsers(self) -> List[FakeBrowser]:
        return self.chromium.browsers + self.firefox.browsers + self.webkit.browsers

    def stop(self) -> None:
        self.stopped = True


class FakePlaywrightFactory:
    """Replaces `sync_playwright`; every `start()` returns a new FakePlaywright."""

    def __init__(self, launch_error: Optional[Exception] = None):
        self.launch_error = launch_error
        self.started: List[FakePlaywright] = []

    def __call__(self) -> "FakePlaywrightFactory":
        return self

    def start(self) -> FakePlaywright:
        playwright = FakePlaywright(self.launch_error)
        self.started.append(playwright)
        return playwright

    def launches(self) -> Iterable[FakeBrowser]:
        for playwright in self.started:
            yield from playwright.browsers
