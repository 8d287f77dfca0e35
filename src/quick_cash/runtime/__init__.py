"""Runtime helpers for Quick Cash."""

from .helpers import configure_logging

__all__ = [
    "configure_logging",
]
