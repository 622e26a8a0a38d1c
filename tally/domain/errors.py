"""Error types raised by the ledger core.

Every failure in the functional core is a value-level exception derived from
LedgerError, so callers can catch one type and turn it into a message.
"""


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ParseError(LedgerError, ValueError):
    """Malformed textual input.

    Attributes:
        field: Name of the sub-field that failed to parse.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DateParseError(ParseError):
    """Malformed date or relative-date token."""


class IntervalParseError(ParseError):
    """Malformed interval; `field` is "start" or "end" when one side failed."""


class CategoryParseError(ParseError):
    """Malformed category path."""


class MoneyParseError(ParseError):
    """Malformed monetary amount."""


class RecordParseError(ParseError):
    """Malformed persisted record.

    Attributes:
        line: 1-based line number of the bad record, if known.
    """

    def __init__(self, message: str, line: int | None = None, field: str | None = None) -> None:
        super().__init__(message, field)
        self.line = line


class OutOfRangeError(LedgerError, ValueError):
    """A calendar or monetary value outside its representable bounds."""


class RecordNotFoundError(LedgerError, LookupError):
    """No record exists at the requested (date, index-in-date)."""


class LimitNotFoundError(LedgerError, LookupError):
    """No contribution limit is configured for the requested year."""


class CategoryNotFoundError(LedgerError, LookupError):
    """The category has never been used and creating it was not requested."""


class ConfigError(LedgerError):
    """Invalid or missing configuration."""


class NotARepositoryError(LedgerError):
    """The working directory has not been initialized."""

    def __init__(self, message: str = "not a repository") -> None:
        super().__init__(message)
