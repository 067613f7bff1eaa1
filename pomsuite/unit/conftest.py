"""
Fixtures for offline framework tests.
"""

from typing import Generator, List

import pytest
from loguru import logger

from pomsuite.ui_testing.framework.driver import DirectDriver
from pomsuite.ui_testing.framework.self_healing import HealingStore
from pomsuite.unit.fakes import FakePage, FakePlaywrightFactory


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fake_playwright(monkeypatch) -> FakePlaywrightFactory:
    """Patch `sync_playwright` in the driver manager with in-memory fakes."""
    factory = FakePlaywrightFactory()
    monkeypatch.setattr(
        "pomsuite.ui_testing.framework.browser_manager.sync_playwright",
        factory,
    )
    return factory


@pytest.fixture
def page() -> FakePage:
    return FakePage(url="https://example.test/login")


@pytest.fixture
def direct_driver(page: FakePage) -> DirectDriver:
    return DirectDriver(page, browser_name="chrome")


@pytest.fixture
def store(tmp_path) -> HealingStore:
    return HealingStore(tmp_path / "healing_store.json")
