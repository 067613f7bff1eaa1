"""Shared helpers for the suite (logging setup)."""

from .log_config import init_logger

__all__ = [
    "init_logger",
]
