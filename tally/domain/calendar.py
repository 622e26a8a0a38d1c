"""Calendar dates, date parts and inclusive date intervals.

Dates are bounded to [0000-01-01, 9999-12-31]. Python's datetime.date starts
at year 1, so day arithmetic goes through proleptic Gregorian ordinals and
borrows one 400-year cycle for year 0.
"""

import calendar
import re
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date as _date
from enum import Enum

from tally.domain.errors import DateParseError, IntervalParseError, OutOfRangeError

MIN_YEAR = 0
MAX_YEAR = 9999

# Days in a 400-year Gregorian cycle
_CYCLE_DAYS = 146097

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_ISO_DATE = re.compile(r"([0-9]+)-([0-9]{1,2})-([0-9]{1,2})")
_OFFSET = re.compile(r"[+-]?[0-9]+")


class Datepart(str, Enum):
    """Granularity used for truncation, shifting and interval subdivision."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"

    @classmethod
    def parse(cls, text: str) -> "Datepart":
        """Parse a date part name, case-insensitively."""
        try:
            return cls(text.lower())
        except ValueError:
            raise DateParseError(f"unknown date part '{text}'", field="part") from None

    def __str__(self) -> str:
        return self.value


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, honouring the Gregorian leap-year rule."""
    if month == 2 and calendar.isleap(year):
        return 29
    return _DAYS_IN_MONTH[month]


@dataclass(frozen=True, order=True)
class Date:
    """A date without time or timezone information."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise OutOfRangeError(f"year {self.year} is outside {MIN_YEAR:04d}-{MAX_YEAR:04d}")
        if not 1 <= self.month <= 12:
            raise OutOfRangeError(f"month {self.month} is outside 1-12")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise OutOfRangeError(f"day {self.day} is outside month {self.year:04d}-{self.month:02d}")

    @classmethod
    def from_pydate(cls, value: _date) -> "Date":
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Date":
        """Build a date from a proleptic Gregorian ordinal (0001-01-01 is 1).

        Raises:
            OutOfRangeError: If the ordinal falls outside the supported range.
        """
        if not MIN.toordinal() <= ordinal <= MAX.toordinal():
            raise OutOfRangeError("date is before 0000-01-01 or after 9999-12-31")
        if ordinal >= 1:
            return cls.from_pydate(_date.fromordinal(ordinal))
        shifted = _date.fromordinal(ordinal + _CYCLE_DAYS)
        return cls(shifted.year - 400, shifted.month, shifted.day)

    def toordinal(self) -> int:
        if self.year >= 1:
            return _date(self.year, self.month, self.day).toordinal()
        return _date(self.year + 400, self.month, self.day).toordinal() - _CYCLE_DAYS

    def first_of(self, part: Datepart) -> "Date":
        """First day of the year or month containing this date."""
        if part is Datepart.YEAR:
            return Date(self.year, 1, 1)
        if part is Datepart.MONTH:
            return Date(self.year, self.month, 1)
        return self

    def last_of(self, part: Datepart) -> "Date":
        """Last day of the year or month containing this date."""
        if part is Datepart.YEAR:
            return Date(self.year, 12, 31)
        if part is Datepart.MONTH:
            return Date(self.year, self.month, days_in_month(self.year, self.month))
        return self

    def shift(self, part: Datepart, offset: int) -> "Date":
        """Offset this date by whole years, months or days.

        When shifting by years or months the day is clamped to the last day of
        the resulting month, so Feb 29 shifted by one year lands on Feb 28.

        Args:
            part: Unit of the offset.
            offset: Signed number of units.

        Returns:
            The shifted date.

        Raises:
            OutOfRangeError: If the result is outside 0000-01-01..9999-12-31.
        """
        if part is Datepart.DAY:
            return Date.from_ordinal(self.toordinal() + offset)
        if part is Datepart.YEAR:
            year, month = self.year + offset, self.month
        else:
            year, month0 = divmod(self.year * 12 + self.month - 1 + offset, 12)
            month = month0 + 1
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise OutOfRangeError("date is before 0000-01-01 or after 9999-12-31")
        return Date(year, month, min(self.day, days_in_month(year, month)))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def fromisoformat(cls, text: str) -> "Date":
        """Parse an absolute yyyy-mm-dd date. Leading zeros are optional.

        Raises:
            DateParseError: If the text is not in yyyy-mm-dd form or names a
                non-existent day.
            OutOfRangeError: If the year is beyond 9999.
        """
        match = _ISO_DATE.fullmatch(text)
        if not match:
            raise DateParseError(f"invalid date '{text}', expected yyyy-mm-dd", field="date")
        year, month, day = (int(g) for g in match.groups())
        if year > MAX_YEAR:
            raise OutOfRangeError("date is before 0000-01-01 or after 9999-12-31")
        if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
            raise DateParseError(f"invalid date '{text}', no such day", field="date")
        return cls(year, month, day)

    @classmethod
    def parse(cls, text: str, today: "Date") -> "Date":
        """Parse an absolute or relative date.

        Accepted forms:
            yyyy-mm-dd   an absolute date
            dN / DN      N days from today
            yN / YN      first / last day of the year N years from today
            mN / MN      first / last day of the month N months from today

        N is an optional signed integer defaulting to 0.

        Args:
            text: Token to parse.
            today: Anchor for relative tokens.

        Raises:
            DateParseError: If the text is empty, starts with an unknown
                anchor or has a malformed offset.
            OutOfRangeError: If the resulting date is out of range.
        """
        if not text:
            raise DateParseError("date is empty", field="date")
        if text[0].isascii() and text[0].isdigit():
            return cls.fromisoformat(text)

        anchor, rest = text[0], text[1:]
        if anchor not in "dDyYmM":
            raise DateParseError(
                f"invalid date '{text}', first character is not one of y, Y, m, M, d, D", field="anchor"
            )
        if rest and not _OFFSET.fullmatch(rest):
            raise DateParseError(f"invalid offset '{rest}' in date '{text}'", field="offset")
        offset = int(rest) if rest else 0

        if anchor in "dD":
            return today.shift(Datepart.DAY, offset)
        if anchor == "y":
            return today.first_of(Datepart.YEAR).shift(Datepart.YEAR, offset)
        if anchor == "Y":
            return today.last_of(Datepart.YEAR).shift(Datepart.YEAR, offset)
        if anchor == "m":
            return today.first_of(Datepart.MONTH).shift(Datepart.MONTH, offset)
        return today.shift(Datepart.MONTH, offset).last_of(Datepart.MONTH)


MIN = Date(MIN_YEAR, 1, 1)
MAX = Date(MAX_YEAR, 12, 31)


@dataclass(frozen=True, eq=False)
class Interval:
    """Inclusive range of dates.

    An interval whose start is after its end is empty. All empty intervals
    compare and hash equal regardless of their bounds.
    """

    start: Date
    end: Date

    @classmethod
    def single(cls, day: Date) -> "Interval":
        return cls(day, day)

    def is_empty(self) -> bool:
        return self.start > self.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        if self.is_empty():
            return hash((EMPTY.start, EMPTY.end))
        return hash((self.start, self.end))

    def __contains__(self, day: Date) -> bool:
        return self.start <= day <= self.end

    def intersection(self, other: "Interval") -> "Interval":
        return Interval(max(self.start, other.start), min(self.end, other.end))

    def iter(self, part: Datepart) -> Iterator["Interval"]:
        """Yield consecutive subintervals aligned to calendar boundaries of `part`.

        Iterating by year over [2000-04-15, 2003-08-10] yields
        [2000-04-15, 2000-12-31], [2001-01-01, 2001-12-31], [2002-01-01,
        2002-12-31] and [2003-01-01, 2003-08-10].
        """
        if self.is_empty():
            return
        current = Interval(self.start, min(self.start.last_of(part), self.end))
        while True:
            yield current
            try:
                following = current.start.shift(part, 1)
            except OutOfRangeError:
                return
            start = following.first_of(part)
            end = min(following.last_of(part), self.end)
            if start > end:
                return
            current = Interval(start, end)

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    @classmethod
    def parse(cls, text: str, today: Date) -> "Interval":
        """Parse an interval.

        The general form is "A:B" where either side may be omitted, defaulting
        to 0000-01-01 and 9999-12-31. A bare token is shorthand for the whole
        period it names: "yN" spans that year, "mN" that month, and "dN" or an
        ISO date a single day.

        Raises:
            IntervalParseError: If either side is malformed.
        """
        if ":" in text:
            left, right = text.split(":", 1)
            start = cls._parse_side(left, today, "start", MIN)
            end = cls._parse_side(right, today, "end", MAX)
            return cls(start, end)

        try:
            day = Date.parse(text, today)
        except (DateParseError, OutOfRangeError) as e:
            raise IntervalParseError(f"invalid interval '{text}': {e}", field="start") from e
        if text[0] in "yY":
            part = Datepart.YEAR
        elif text[0] in "mM":
            part = Datepart.MONTH
        else:
            part = Datepart.DAY
        return cls(day.first_of(part), day.last_of(part))

    @staticmethod
    def _parse_side(text: str, today: Date, field: str, default: Date) -> Date:
        if not text:
            return default
        try:
            return Date.parse(text, today)
        except (DateParseError, OutOfRangeError) as e:
            side = "left" if field == "start" else "right"
            raise IntervalParseError(f"invalid {side} side of interval: {e}", field=field) from e


MAX_INTERVAL = Interval(MIN, MAX)
EMPTY = Interval(MAX, MIN)

_MONTH_ABBRS = ("", "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_abbr(month: int) -> str:
    """Three-letter English month name, independent of locale."""
    return _MONTH_ABBRS[month]


def ordinal_day(day: int) -> str:
    """Day of month as an English ordinal: 1st, 2nd, 3rd, 4th ... 31st."""
    if 11 <= day <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"
