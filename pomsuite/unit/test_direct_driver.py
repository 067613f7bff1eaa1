import pytest

from pomsuite.ui_testing.framework.driver import DirectDriver, ElementNotFoundError
from pomsuite.ui_testing.framework.locators import By, Locator
from pomsuite.unit.fakes import FakeBrowser, FakeContext, FakePage, FakePlaywright


USERNAME = Locator(By.ID, "username", name="login.username")


def test_find_element_returns_first_match(direct_driver, page):
    element = page.add('[id="username"]')

    assert direct_driver.find_element(USERNAME) is element


def test_missing_element_fails_immediately_without_implicit_wait(direct_driver, page):
    with pytest.raises(ElementNotFoundError, match="login.username"):
        direct_driver.find_element(USERNAME)


def test_implicit_wait_applies_to_lookups(direct_driver, page):
    element = page.add('[id="username"]')

    direct_driver.set_implicit_wait(3)
    direct_driver.find_element(USERNAME)

    assert direct_driver.implicit_wait == 3
    assert page.default_timeout == 3000
    assert element.wait_calls == [{"state": "attached", "timeout": 3000}]


def test_implicit_wait_timeout_becomes_not_found(direct_driver):
    direct_driver.set_implicit_wait(1)

    with pytest.raises(ElementNotFoundError, match="after 1000ms"):
        direct_driver.find_element(USERNAME)


def test_zero_implicit_wait_restores_default_page_timeout(direct_driver, page):
    direct_driver.set_implicit_wait(0)

    assert page.default_timeout == 30000


def test_resetting_implicit_wait_restores_default_page_timeout(direct_driver, page):
    direct_driver.set_implicit_wait(5)
    assert page.default_timeout == 5000

    direct_driver.set_implicit_wait(0)

    assert direct_driver.implicit_wait == 0
    assert page.default_timeout == 30000


def test_find_elements(direct_driver, page):
    page.add(".row", count=3)

    assert len(direct_driver.find_elements(Locator(By.CLASS_NAME, "row"))) == 3
    assert direct_driver.find_elements(Locator(By.CLASS_NAME, "missing")) == []

    direct_driver.set_implicit_wait(1)
    assert direct_driver.find_elements(Locator(By.CLASS_NAME, "missing")) == []


def test_navigation_title_and_url(direct_driver, page):
    direct_driver.get("https://example.test/secure")

    assert direct_driver.current_url == "https://example.test/secure"
    assert direct_driver.title == "The Internet"


def test_quit_releases_everything():
    playwright = FakePlaywright()
    browser = FakeBrowser("chromium", {})
    context = FakeContext({})
    driver = DirectDriver(FakePage(), context=context, browser=browser, playwright=playwright)

    driver.quit()
    driver.quit()

    assert context.closed
    assert browser.closed
    assert playwright.stopped
