"""Date utilities for tally.

The clock lives here so the rest of the code can take "today" as a plain
argument.
"""

import re
from datetime import date

from tally.domain.calendar import MAX_YEAR, MIN_YEAR, Date
from tally.domain.errors import DateParseError, OutOfRangeError

_YEAR_OFFSET = re.compile(r"[yY]([+-]?[0-9]+)?")


def today() -> Date:
    """Return the local date."""
    return Date.from_pydate(date.today())


def parse_year(text: str, today: Date) -> int:
    """Parse a year given as a number or relative to the current year.

    Args:
        text: "2015", "y" (this year), "y-1" (last year), "Y+2" and so on.
        today: Anchor for relative years.

    Returns:
        The year.

    Raises:
        DateParseError: If the text is not a year.
        OutOfRangeError: If the year is outside 0-9999.
    """
    match = _YEAR_OFFSET.fullmatch(text)
    if match:
        year = today.year + int(match.group(1) or 0)
    elif text.isascii() and text.isdigit():
        year = int(text)
    else:
        raise DateParseError(f"invalid year '{text}'", field="year")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(f"year {year} is out of range")
    return year
