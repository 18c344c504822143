"""Port providing the current time to adapters."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port returning the current moment."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""


__all__ = ["ClockPort"]
