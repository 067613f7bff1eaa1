"""
Self-healing Page Object UI suite.

The `pomsuite` package is importable so that:
  - IDEs can navigate page objects and framework helpers
  - `run_tests.py` can build pytest commands against known paths
  - unit tests can import the framework without a browser
"""

__version__ = "1.0.0"
