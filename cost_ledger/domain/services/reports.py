"""Domain services folding expense records into report shapes."""

from collections.abc import Iterable, Mapping
from logging import Logger

from cost_ledger.domain.models import (
    CategoryAmount,
    ConvertedExpense,
    ExpenseRecord,
    LineItem,
    MonthAmount,
    MonthlyReport,
    ReportTotal,
)
from cost_ledger.domain.services.fx import Unconverted, try_convert
from cost_ledger.domain.services.periods import to_local_time
from cost_ledger.utils.decimal_utils import round_money


def build_line_items(records: Iterable[ExpenseRecord]) -> list[LineItem]:
    """Return report lines keeping each record's original currency.

    Args:
        records: Records of the reported month.

    Returns:
        list[LineItem]: One line per record with the day of month only.
    """
    return [
        LineItem(
            amount=record.amount,
            currency=record.currency,
            category=record.category,
            description=record.description,
            day=to_local_time(record.recorded_at).day,
        )
        for record in records
    ]


def convert_records(
    records: Iterable[ExpenseRecord],
    target_currency: str,
    rates: Mapping[str, float],
    logger: Logger,
) -> list[tuple[ExpenseRecord, float]]:
    """Convert every record amount into the target currency.

    Conversion problems are absorbed per record and logged as warnings.

    Args:
        records: Records to convert.
        target_currency: Requested currency code.
        rates: Rate table against the base currency.
        logger: Logger used for warnings.

    Returns:
        list[tuple[ExpenseRecord, float]]: Records paired with their
        converted amounts.
    """
    converted: list[tuple[ExpenseRecord, float]] = []
    for record in records:
        outcome = try_convert(
            record.amount,
            record.currency,
            target_currency,
            rates,
        )
        if isinstance(outcome, Unconverted):
            logger.warning(
                f"Expense {record.id} left unconverted: {outcome.reason}"
            )
        converted.append((record, outcome.value))
    return converted


def compute_monthly_report(
    year: int,
    month: int,
    records: list[ExpenseRecord],
    converted: list[tuple[ExpenseRecord, float]],
    target_currency: str,
) -> MonthlyReport:
    """Assemble the detailed monthly report.

    Args:
        year: Requested year.
        month: Requested month.
        records: Records of the month, in report order.
        converted: Same records paired with converted amounts.
        target_currency: Currency of the grand total.

    Returns:
        MonthlyReport: Line items plus the rounded converted total.
    """
    total = sum(amount for _, amount in converted)
    return MonthlyReport(
        year=year,
        month=month,
        costs=build_line_items(records),
        total=ReportTotal(currency=target_currency, total=round_money(total)),
    )


def compute_category_breakdown(
    converted: list[tuple[ExpenseRecord, float]],
    target_currency: str,
) -> list[CategoryAmount]:
    """Sum converted amounts per category, in order of first appearance.

    Args:
        converted: Records paired with converted amounts.
        target_currency: Currency of the totals.

    Returns:
        list[CategoryAmount]: One entry per category present.
    """
    totals: dict[str, float] = {}
    for record, amount in converted:
        totals[record.category] = totals.get(record.category, 0.0) + amount
    return [
        CategoryAmount(
            category=category,
            amount=round_money(amount),
            currency=target_currency,
        )
        for category, amount in totals.items()
    ]


def compute_yearly_breakdown(
    converted: list[tuple[ExpenseRecord, float]],
    target_currency: str,
) -> list[MonthAmount]:
    """Sum converted amounts into twelve monthly buckets.

    Args:
        converted: Records of one year paired with converted amounts.
        target_currency: Currency of the totals.

    Returns:
        list[MonthAmount]: Exactly twelve entries, zero-filled.
    """
    totals = {month: 0.0 for month in range(1, 13)}
    for record, amount in converted:
        totals[to_local_time(record.recorded_at).month] += amount
    return [
        MonthAmount(
            month=month,
            amount=round_money(amount),
            currency=target_currency,
        )
        for month, amount in totals.items()
    ]


def compute_converted_expenses(
    converted: list[tuple[ExpenseRecord, float]],
    target_currency: str,
) -> list[ConvertedExpense]:
    return [
        ConvertedExpense(
            expense=record,
            converted_amount=amount,
            currency=target_currency,
        )
        for record, amount in converted
    ]


__all__ = [
    "build_line_items",
    "convert_records",
    "compute_monthly_report",
    "compute_category_breakdown",
    "compute_yearly_breakdown",
    "compute_converted_expenses",
]
