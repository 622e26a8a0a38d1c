"""Yearly contribution limits and remaining-room accounting.

All monetary amounts are in cents (Cents type).
"""

import json
from collections.abc import Iterable, Iterator
from enum import Enum

from tally.domain.calendar import MAX_YEAR, MIN_YEAR
from tally.domain.errors import ConfigError, LimitNotFoundError, OutOfRangeError, ParseError
from tally.domain.money import ZERO, Cents
from tally.domain.records import Record


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise OutOfRangeError(f"year {year} is outside {MIN_YEAR:04d}-{MAX_YEAR:04d}")


class Limits:
    """Sparse map from year to that year's contribution limit."""

    def __init__(self, limits: dict[int, Cents] | None = None) -> None:
        self._limits: dict[int, Cents] = {}
        for year, limit in (limits or {}).items():
            self.set(year, limit)

    def __len__(self) -> int:
        return len(self._limits)

    def __bool__(self) -> bool:
        return bool(self._limits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Limits):
            return NotImplemented
        return self._limits == other._limits

    def __repr__(self) -> str:
        return f"Limits({dict(self.items())!r})"

    def set(self, year: int, limit: Cents) -> None:
        _check_year(year)
        self._limits[year] = limit

    def get(self, year: int) -> Cents | None:
        return self._limits.get(year)

    def remove(self, year: int) -> Cents:
        """Remove and return the limit for `year`.

        Raises:
            LimitNotFoundError: If the year has no limit.
        """
        try:
            return self._limits.pop(year)
        except KeyError:
            raise LimitNotFoundError(f"{year:04d} has no limit") from None

    def items(self) -> Iterator[tuple[int, Cents]]:
        """(year, limit) pairs in ascending year order."""
        return iter(sorted(self._limits.items()))

    def up_to(self, year: int) -> list[tuple[int, Cents]]:
        """(year, limit) pairs for every year up to and including `year`."""
        return [(y, limit) for y, limit in self.items() if y <= year]

    def inception_to_year(self, year: int) -> Cents:
        """Total accumulated room up to and including `year`."""
        return sum((limit for _, limit in self.up_to(year)), ZERO)

    def dumps(self) -> str:
        """Serialize as a pretty-printed JSON object with a trailing newline."""
        obj = {str(year): limit.value for year, limit in self.items()}
        return json.dumps(obj, indent=2) + "\n"

    @classmethod
    def loads(cls, text: str) -> "Limits":
        """Parse a JSON object mapping years to integer cents.

        Raises:
            ParseError: If the JSON is malformed or a year/amount is invalid.
        """
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid limits: {e.msg}", field="limits") from e
        if not isinstance(obj, dict):
            raise ParseError("invalid limits: not a JSON object", field="limits")

        limits = cls()
        for key, value in obj.items():
            if not key.isascii() or not key.isdigit():
                raise ParseError(f"invalid limits: year '{key}' is not a number", field="year")
            if not isinstance(value, int) or isinstance(value, bool):
                raise ParseError(f"invalid limits: amount for {key} is not an integer", field="amount")
            limits.set(int(key), Cents(value))
        return limits


class Limitkind(str, Enum):
    """Account type deciding how withdrawals affect remaining room."""

    RRSP = "rrsp"
    TFSA = "tfsa"

    @classmethod
    def parse(cls, text: str) -> "Limitkind":
        try:
            return cls(text.lower())
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ConfigError(f"invalid account type '{text}', expected one of {choices}") from None

    def __str__(self) -> str:
        return self.value

    def remaining(self, limits: Limits, records: Iterable[Record], year: int) -> Cents:
        """Contribution room left at the end of `year`.

        Room is every limit up to `year` minus every positive transaction
        dated in or before `year`. For a TFSA, withdrawals made before `year`
        are added back, since withdrawn room is restored the following year.
        Zero amounts never count.

        Args:
            limits: Yearly limits.
            records: Transactions against the account.
            year: Year of interest.

        Returns:
            Remaining room in cents, negative if over-contributed.
        """
        records = list(records)
        contributions = sum(
            (r.amount for r in records if r.date.year <= year and r.amount.value > 0),
            ZERO,
        )
        room = limits.inception_to_year(year) - contributions
        if self is Limitkind.TFSA:
            withdrawals = sum(
                (-r.amount for r in records if r.date.year < year and r.amount.value < 0),
                ZERO,
            )
            room = room + withdrawals
        return room
