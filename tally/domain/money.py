"""Exact monetary amounts stored as integer cents.

No floating point is involved anywhere: formatting and parsing work on the
integer value and its decimal digits.
"""

import re
from dataclasses import dataclass

from tally.domain.errors import MoneyParseError, OutOfRangeError

# Symmetric signed 64-bit range: every amount can be negated
MAX_CENTS = 2**63 - 1
MIN_CENTS = -MAX_CENTS

_INTEGER = re.compile(r"[+-]?[0-9]+")
_SIGN_OR_POINT_ONLY = {"", "+", "-", ".", "+.", "-."}


@dataclass(frozen=True, order=True)
class Cents:
    """Signed monetary quantity with two implied decimal places."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"cents must be an integer, not {type(self.value).__name__}")
        if not MIN_CENTS <= self.value <= MAX_CENTS:
            raise OutOfRangeError(f"amount {self.value} is out of range")

    @classmethod
    def parse(cls, text: str) -> "Cents":
        """Parse a human-readable amount.

        Commas are ignored wherever they appear. Any number of decimal places
        is accepted; digits beyond the second are truncated, not rounded. An
        unsigned amount wrapped in parentheses is negative, so every string
        produced by str() parses back to the same amount.

        Args:
            text: Amount such as "1,234.56", "-.1", "+12" or "(3.50)".

        Returns:
            The parsed amount.

        Raises:
            MoneyParseError: If the input is empty, only a sign and/or point,
                or contains anything other than digits, one point and a sign.
        """
        if len(text) > 2 and text[0] == "(" and text[-1] == ")" and text[1] not in "+-(":
            return -cls.parse(text[1:-1])
        s = text.replace(",", "")
        if s in _SIGN_OR_POINT_ONLY:
            raise MoneyParseError(f"invalid amount '{text}'", field="amount")
        s += "00"
        point = s.find(".")
        if point >= 0:
            s = s[:point] + s[point + 1 : point + 3]
        if not _INTEGER.fullmatch(s):
            raise MoneyParseError(f"invalid amount '{text}'", field="amount")
        return cls(int(s))

    def __str__(self) -> str:
        whole, frac = divmod(abs(self.value), 100)
        s = f"{whole:,}.{frac:02d}"
        if self.value < 0:
            return f"({s})"
        return s

    def charlen(self) -> int:
        """Length of the string representation."""
        return len(str(self))

    def charlen_for_alignment(self) -> int:
        """Length of the string representation, counting a trailing space for non-negative amounts.

        With that extra space every amount has three characters after its
        decimal point, so right-aligning a column aligns the decimal points.
        """
        return self.charlen() + (1 if self.value >= 0 else 0)

    def __add__(self, other: "Cents") -> "Cents":
        if not isinstance(other, Cents):
            return NotImplemented
        return Cents(self.value + other.value)

    def __sub__(self, other: "Cents") -> "Cents":
        if not isinstance(other, Cents):
            return NotImplemented
        return Cents(self.value - other.value)

    def __neg__(self) -> "Cents":
        return Cents(-self.value)

    def __abs__(self) -> "Cents":
        return Cents(abs(self.value))

    def __bool__(self) -> bool:
        return self.value != 0


ZERO = Cents(0)
