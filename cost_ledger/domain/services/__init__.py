"""Domain services package."""

from .fx import (
    Converted,
    Unconverted,
    convert_amount,
    is_finite_number,
    normalize_rates,
    try_convert,
    validate_rate_table,
)
from .periods import filter_by_month, filter_by_year, validate_month
from .rate_sources import (
    choose_source_address,
    find_missing_currencies,
    validate_source_address,
)
from .reports import (
    build_line_items,
    compute_category_breakdown,
    compute_converted_expenses,
    compute_monthly_report,
    compute_yearly_breakdown,
    convert_records,
)

__all__ = [
    "Converted",
    "Unconverted",
    "convert_amount",
    "is_finite_number",
    "normalize_rates",
    "try_convert",
    "validate_rate_table",
    "filter_by_month",
    "filter_by_year",
    "validate_month",
    "choose_source_address",
    "find_missing_currencies",
    "validate_source_address",
    "build_line_items",
    "compute_category_breakdown",
    "compute_converted_expenses",
    "compute_monthly_report",
    "compute_yearly_breakdown",
    "convert_records",
]
