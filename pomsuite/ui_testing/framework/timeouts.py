"""
Timeout constants (seconds) shared by waits, page objects and fixtures.
"""

# Quick operations
SHORT_WAIT = 5

# Standard explicit waits
MEDIUM_WAIT = 10

# Slow-loading operations
LONG_WAIT = 20

PAGE_LOAD_TIMEOUT = 30

# Default session-wide lookup polling window
IMPLICIT_WAIT = 10


def to_ms(seconds: float) -> int:
    """Convert seconds to the millisecond values Playwright expects."""
    return int(seconds * 1000)


__all__ = [
    "SHORT_WAIT",
    "MEDIUM_WAIT",
    "LONG_WAIT",
    "PAGE_LOAD_TIMEOUT",
    "IMPLICIT_WAIT",
    "to_ms",
]
