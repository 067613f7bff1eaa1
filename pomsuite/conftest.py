"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers common markers, configures logging and gates browser scenarios
behind `--run-ui`.

================================================================================
"""

import pytest

from pomsuite.common.log_config import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "data_driven: Parametrized credential sweeps"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser scenarios (run with --run-ui)"
    )
    config.addinivalue_line(
        "markers", "unit: Offline framework tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "navigation: Tests related to post-login navigation"
    )


def pytest_collection_modifyitems(config, items):
    """
    Tag tests by directory and skip browser scenarios unless requested.
    """
    skip_ui = pytest.mark.skip(reason="browser scenario: pass --run-ui to execute")
    run_ui = config.getoption("--run-ui")

    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Self-Healing Page Object UI Suite",
        "=" * 60,
        "",
    ]
