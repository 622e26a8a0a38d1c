"""Transactions and the date-ordered list that stores them.

Records sharing a date are addressed by their index-in-date (iid): the
zero-based position of a record among all records on that date, in stored
order.
"""

import json
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from operator import attrgetter
from typing import Any

from tally.domain.calendar import EMPTY, Date, Interval
from tally.domain.category import Category
from tally.domain.errors import LedgerError, RecordNotFoundError, RecordParseError
from tally.domain.money import Cents

_by_date = attrgetter("date")


@dataclass(frozen=True)
class Record:
    """Immutable transaction."""

    date: Date
    category: Category
    amount: Cents
    note: str = ""

    def to_json(self) -> str:
        """Serialize to a single-line JSON object with keys d, c, a and n."""
        obj: dict[str, Any] = {"d": str(self.date), "c": str(self.category), "a": self.amount.value}
        if self.note:
            obj["n"] = self.note
        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> "Record":
        """Deserialize a record written by to_json.

        Raises:
            RecordParseError: If the JSON is malformed or a field is invalid.
        """
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordParseError(f"invalid JSON: {e.msg}") from e
        if not isinstance(obj, dict):
            raise RecordParseError("record is not a JSON object")
        unknown = set(obj) - {"d", "c", "a", "n"}
        if unknown:
            raise RecordParseError(f"unknown field '{sorted(unknown)[0]}'", field=sorted(unknown)[0])

        for key, kind in (("d", str), ("c", str), ("a", int)):
            if key not in obj:
                raise RecordParseError(f"missing field '{key}'", field=key)
            if not isinstance(obj[key], kind) or isinstance(obj[key], bool):
                raise RecordParseError(f"field '{key}' has the wrong type", field=key)
        note = obj.get("n", "")
        if not isinstance(note, str):
            raise RecordParseError("field 'n' has the wrong type", field="n")

        try:
            date = Date.fromisoformat(obj["d"])
        except LedgerError as e:
            raise RecordParseError(str(e), field="d") from e
        try:
            category = Category(obj["c"])
        except LedgerError as e:
            raise RecordParseError(str(e), field="c") from e
        try:
            amount = Cents(obj["a"])
        except LedgerError as e:
            raise RecordParseError(str(e), field="a") from e
        return cls(date, category, amount, note)


class Recordlist:
    """Records kept sorted by date.

    Sorting is stable: records sharing a date keep the order in which they
    were given or inserted.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = sorted(records, key=_by_date)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recordlist):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"Recordlist({self._records!r})"

    def spanned_interval(self) -> Interval:
        """Interval from the earliest to the latest record date."""
        if not self._records:
            return EMPTY
        return Interval(self._records[0].date, self._records[-1].date)

    def _bounds(self, start: Date, end: Date) -> tuple[int, int]:
        lo = bisect_left(self._records, start, key=_by_date)
        hi = bisect_right(self._records, end, lo=lo, key=_by_date)
        return lo, hi

    def slice_spanning_interval(self, interval: Interval) -> Sequence[Record]:
        """Records dated within the interval, in stored order."""
        if interval.is_empty():
            return []
        lo, hi = self._bounds(interval.start, interval.end)
        return self._records[lo:hi]

    def spanning(self, interval: Interval) -> "Recordlist":
        """Like slice_spanning_interval, but as a new Recordlist."""
        return Recordlist(self.slice_spanning_interval(interval))

    def insert(self, record: Record) -> None:
        """Insert after every existing record on the same date."""
        i = bisect_right(self._records, record.date, key=_by_date)
        self._records.insert(i, record)

    def _index_of(self, date: Date, iid: int) -> int:
        lo, hi = self._bounds(date, date)
        if iid < 0 or lo + iid >= hi:
            raise RecordNotFoundError(f"no transaction #{iid} on {date}")
        return lo + iid

    def get(self, date: Date, iid: int) -> Record:
        """Return the record at (date, iid).

        Raises:
            RecordNotFoundError: If no such record exists.
        """
        return self._records[self._index_of(date, iid)]

    def remove(self, date: Date, iid: int) -> Record:
        """Remove and return the record at (date, iid).

        Raises:
            RecordNotFoundError: If no such record exists. The list is left
                unchanged.
        """
        return self._records.pop(self._index_of(date, iid))

    def iter_with_iid(self) -> Iterator[tuple[int, Record]]:
        """Yield (iid, record) pairs in date order."""
        iid = 0
        previous: Date | None = None
        for record in self._records:
            iid = iid + 1 if record.date == previous else 0
            previous = record.date
            yield iid, record

    def categories(self) -> list[Category]:
        """Sorted unique categories."""
        return sorted({r.category for r in self._records})

    def dumps(self) -> str:
        """Serialize as JSON lines, one record per line."""
        return "".join(r.to_json() + "\n" for r in self._records)

    @classmethod
    def loads(cls, text: str) -> "Recordlist":
        """Parse JSON lines. Blank lines are ignored.

        Raises:
            RecordParseError: With the 1-based line number of the first bad record.
        """
        records = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(Record.from_json(line))
            except RecordParseError as e:
                raise RecordParseError(f"invalid record at line {lineno}: {e}", line=lineno, field=e.field) from e
        return cls(records)


def filter_records(
    records: Recordlist,
    interval: Interval,
    include: Sequence[str] = ("*",),
    exclude: Sequence[str] = (),
) -> Recordlist:
    """Select records in an interval whose category matches the patterns.

    A record is kept if its category matches any shell-style wildcard in
    `include` and none in `exclude`. Matching is case-sensitive.

    Args:
        records: Records to filter.
        interval: Dates of interest.
        include: Wildcard patterns to keep.
        exclude: Wildcard patterns to drop; these take precedence.

    Returns:
        New Recordlist with the matching records.
    """
    return Recordlist(
        r
        for r in records.slice_spanning_interval(interval)
        if any(fnmatchcase(r.category.path, p) for p in include)
        and not any(fnmatchcase(r.category.path, p) for p in exclude)
    )


@dataclass(frozen=True)
class TemplateEntry:
    """One line of a transaction template: a category and an amount."""

    category: Category
    amount: Cents

    def to_record(self, date: Date) -> Record:
        return Record(date, self.category, self.amount)
