"""Clock adapters."""

from datetime import datetime, timezone

from cost_ledger.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the system time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


__all__ = ["SystemClock"]
