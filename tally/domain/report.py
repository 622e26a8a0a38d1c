"""Pure helpers shared by the report renderers.

This module contains the alignment math for dash-filled report rows:
- No I/O operations
- No side effects
- Easy to test

A row looks like `label ----- 1,234.56`. Every row of a report is padded to
one alignment width so that amounts line up on their decimal points.
"""

from collections.abc import Iterable

from tally.domain.money import Cents

# One space either side of the dash fill
BOUNDING_SPACES_COUNT = 2
MIN_DASHES_COUNT = 2
MIN_TERM_WIDTH = 60

NO_TRANSACTIONS = "No transactions.\n"


def count_digits(n: int) -> int:
    """Number of decimal digits in a non-negative integer."""
    return len(str(n))


def row_charlen(label_charlen: int, amount: Cents) -> int:
    """Minimum width needed to render one row.

    Args:
        label_charlen: Length of the text before the dash fill.
        amount: Amount rendered after the dash fill.

    Returns:
        Width including bounding spaces and the minimum dash fill.
    """
    return label_charlen + BOUNDING_SPACES_COUNT + MIN_DASHES_COUNT + amount.charlen_for_alignment()


def alignment_charlen(rows: Iterable[tuple[str, Cents]]) -> int:
    """Shared alignment width for (label, amount) rows, 0 if there are none."""
    return max((row_charlen(len(label), amount) for label, amount in rows), default=0)


def dash_count(alignment: int, label_charlen: int, amount: Cents) -> int:
    """Number of dashes needed to pad a row to the alignment width."""
    return alignment - label_charlen - BOUNDING_SPACES_COUNT - amount.charlen_for_alignment()


def dash_row(label: str, amount: Cents, alignment: int, dash: str = "-") -> str:
    """Render `label {dashes} amount` padded to the alignment width."""
    return f"{label} {dash * dash_count(alignment, len(label), amount)} {amount}"
