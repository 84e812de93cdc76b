"""Clock capability used to read the current instant.

The formatter reads "now" exactly once per call through a Clock, which lets
tests pin the current time without patching the datetime module.
"""

from collections.abc import Callable
from datetime import datetime

__all__ = ["Clock", "system_clock"]

Clock = Callable[[], datetime]
"""Zero-argument callable returning the current naive local datetime."""


def system_clock() -> datetime:
    """Return the current local time as a naive datetime."""
    return datetime.now()
