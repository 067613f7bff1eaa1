"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for browser scenarios, providing fixtures for
configuration, driver lifecycle, and page objects.

Lifecycle per test:
    setup    -> read config -> get driver -> open configured URL
    test     -> page objects drive the scenario
    teardown -> screenshot on failure -> quit driver

================================================================================
"""

from pathlib import Path
from typing import Dict, Generator

import allure
import pytest
from loguru import logger

from pomsuite.ui_testing.framework.browser_manager import SCREENSHOT_DIR, DriverManager
from pomsuite.ui_testing.framework.config_loader import ConfigLoader
from pomsuite.ui_testing.framework.driver import Driver
from pomsuite.ui_testing.framework.healing_config import HealingConfig
from pomsuite.ui_testing.framework.self_healing import SelfHealingDriver
from pomsuite.ui_testing.pages.home_page import HomePage
from pomsuite.ui_testing.pages.login_page import LoginPage
from pomsuite.ui_testing.pages.product_page import ProductPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def config() -> ConfigLoader:
    """Session-wide UI configuration (loaded once)."""
    return ConfigLoader()


@pytest.fixture(scope="session")
def healing_enabled(request) -> bool:
    """
    Self-healing flag for this session.

    Read once from healing.yaml; `--no-heal` forces it off.
    """
    if request.config.getoption("--no-heal"):
        return False
    return HealingConfig().is_healing_enabled()


@pytest.fixture(scope="session")
def credentials(config: ConfigLoader) -> Dict[str, str]:
    """Valid credentials from configuration."""
    return {
        "username": config.get_username(),
        "password": config.get_password(),
    }


# ================================================================================
# Driver Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def driver_manager(
    request,
    config: ConfigLoader,
    healing_enabled: bool,
) -> Generator[DriverManager, None, None]:
    """
    Session-scoped driver manager.

    Owns the browser driver; each test gets and releases it through the
    `driver` fixture.
    """
    manager = DriverManager(
        headless=config.is_headless() and not request.config.getoption("--headed"),
        healing_enabled=healing_enabled,
        screenshot_dir=Path(config.get("screenshot_dir", str(SCREENSHOT_DIR))),
    )
    yield manager
    manager.quit_driver()


@pytest.fixture(scope="function")
def driver(
    request,
    config: ConfigLoader,
    driver_manager: DriverManager,
) -> Generator[Driver, None, None]:
    """
    Function-scoped driver opened on the configured URL.

    Takes a screenshot when the test body or a later fixture setup fails
    and always quits the browser afterwards.
    """
    driver_manager.screenshot_dir.mkdir(parents=True, exist_ok=True)

    browser = request.config.getoption("--ui-browser") or config.get_browser()
    driver = driver_manager.get_driver(browser)
    driver.get(config.get_url())
    logger.info(f"Test Started - Browser: {driver.browser_name}")

    yield driver

    test_name = request.node.name
    setup_report = getattr(request.node, "rep_setup", None)
    report = getattr(request.node, "rep_call", None)
    if setup_report is not None and setup_report.failed:
        driver_manager.take_screenshot(test_name)
        logger.error(f"Test Setup Failed: {test_name}")
    elif report is not None and report.failed:
        driver_manager.take_screenshot(test_name)
        logger.error(f"Test Failed: {test_name}")
    elif report is not None and report.passed:
        logger.info(f"Test Passed: {test_name}")

    if isinstance(driver, SelfHealingDriver) and driver.health_records:
        allure.attach(
            driver.get_health_report(),
            name="Locator Health Report",
            attachment_type=allure.attachment_type.TEXT,
        )

    driver_manager.quit_driver()
    logger.info("Browser Closed")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(driver: Driver) -> LoginPage:
    """Provides LoginPage bound to the test's driver."""
    return LoginPage(driver)


@pytest.fixture
def home_page(driver: Driver) -> HomePage:
    """Provides HomePage bound to the test's driver."""
    return HomePage(driver)


@pytest.fixture
def product_page(driver: Driver) -> ProductPage:
    """Provides ProductPage bound to the test's driver."""
    return ProductPage(driver)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store each phase report on the item (`rep_setup`, `rep_call`,
    `rep_teardown`) so fixtures can react to the test outcome.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
