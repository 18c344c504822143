"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .expense_store import ExpenseStorePort, SettingsStorePort
from .rate_source import RateSourcePort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "ExpenseStorePort",
    "SettingsStorePort",
    "RateSourcePort",
]
