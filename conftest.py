"""
Repository-level pytest configuration.

Why this exists:
  - Register the command-line options UI scenarios read (browser, headed, healing)
  - Keep browser scenarios opt-in so offline runs only execute unit tests

Important:
  Credentials in `pomsuite/resources/config.yaml` are public demo values.
  Real projects should inject secrets through UI_* environment variables in CI/CD.
"""


def pytest_addoption(parser):
    group = parser.getgroup("ui", "UI scenario options")
    group.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run browser scenarios (needs Playwright browsers and network access)",
    )
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        help="Browser override: chrome, firefox or edge (default: config value)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )
    group.addoption(
        "--no-heal",
        action="store_true",
        default=False,
        help="Disable self-healing locators for this run",
    )
