"""Domain models and types for tally.

This package contains the functional core:
- Pure functions and immutable value types
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from tally.domain.aggregate import Aggregate
from tally.domain.calendar import EMPTY, MAX, MAX_INTERVAL, MIN, Date, Datepart, Interval
from tally.domain.category import Category
from tally.domain.errors import (
    CategoryNotFoundError,
    CategoryParseError,
    ConfigError,
    DateParseError,
    IntervalParseError,
    LedgerError,
    LimitNotFoundError,
    MoneyParseError,
    NotARepositoryError,
    OutOfRangeError,
    ParseError,
    RecordNotFoundError,
    RecordParseError,
)
from tally.domain.limits import Limitkind, Limits
from tally.domain.money import ZERO, Cents
from tally.domain.records import Record, Recordlist, TemplateEntry, filter_records

__all__ = [
    # Values
    "Aggregate",
    "Category",
    "Cents",
    "Date",
    "Datepart",
    "Interval",
    "Limitkind",
    "Limits",
    "Record",
    "Recordlist",
    "TemplateEntry",
    "filter_records",
    # Constants
    "EMPTY",
    "MAX",
    "MAX_INTERVAL",
    "MIN",
    "ZERO",
    # Errors
    "CategoryNotFoundError",
    "CategoryParseError",
    "ConfigError",
    "DateParseError",
    "IntervalParseError",
    "LedgerError",
    "LimitNotFoundError",
    "MoneyParseError",
    "NotARepositoryError",
    "OutOfRangeError",
    "ParseError",
    "RecordNotFoundError",
    "RecordParseError",
]
