"""Domain helpers for calendar periods."""

from collections.abc import Iterable
from datetime import datetime

from cost_ledger.domain.models import ExpenseRecord


def validate_month(month: int) -> None:
    """Raise ValueError when month is outside 1..12."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")


def to_local_time(moment: datetime) -> datetime:
    """Return the moment in the local timezone.

    Naive datetimes are treated as local time already.
    """
    return moment.astimezone()


def in_year(record: ExpenseRecord, year: int) -> bool:
    return to_local_time(record.recorded_at).year == year


def in_month(record: ExpenseRecord, year: int, month: int) -> bool:
    local = to_local_time(record.recorded_at)
    return local.year == year and local.month == month


def filter_by_year(
    records: Iterable[ExpenseRecord],
    year: int,
) -> list[ExpenseRecord]:
    """Keep the records stamped during the given year.

    Args:
        records: Records to filter.
        year: Calendar year in local time.

    Returns:
        list[ExpenseRecord]: Matching records in input order.
    """
    return [record for record in records if in_year(record, year)]


def filter_by_month(
    records: Iterable[ExpenseRecord],
    year: int,
    month: int,
) -> list[ExpenseRecord]:
    """Keep the records stamped during the given month.

    Args:
        records: Records to filter.
        year: Calendar year in local time.
        month: Calendar month (1-12) in local time.

    Returns:
        list[ExpenseRecord]: Matching records in input order.

    Raises:
        ValueError: If month is outside 1..12.
    """
    validate_month(month)
    return [record for record in records if in_month(record, year, month)]


__all__ = [
    "validate_month",
    "to_local_time",
    "in_year",
    "in_month",
    "filter_by_year",
    "filter_by_month",
]
