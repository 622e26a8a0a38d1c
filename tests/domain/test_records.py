"""Tests for tally.domain.records."""

import pytest

from tally.domain.calendar import EMPTY, MAX_INTERVAL, Date, Interval
from tally.domain.category import Category
from tally.domain.errors import RecordNotFoundError, RecordParseError
from tally.domain.money import Cents
from tally.domain.records import Record, Recordlist, TemplateEntry, filter_records


def rec(day: str, category: str, cents: int, note: str = "") -> Record:
    """Build a record from plain values."""
    return Record(Date.fromisoformat(day), Category(category), Cents(cents), note)


@pytest.fixture
def records() -> Recordlist:
    """Two records on 2015-03-30 and one on each side of it."""
    return Recordlist(
        [
            rec("2015-03-31", "rent", -100000),
            rec("2015-03-30", "food", -1234, "first"),
            rec("2015-03-29", "salary", 250000),
            rec("2015-03-30", "food/snacks", -500, "second"),
        ]
    )


class TestRecordJson:
    """Tests for Record.to_json and Record.from_json."""

    def test_compact_form(self) -> None:
        """Should write a single line with short keys."""
        record = rec("2015-03-30", "category", 123456, "note")

        assert record.to_json() == '{"d":"2015-03-30","c":"category","a":123456,"n":"note"}'

    def test_omits_empty_note(self) -> None:
        """Should leave out the note key when there is no note."""
        assert rec("2015-03-30", "category", -1).to_json() == '{"d":"2015-03-30","c":"category","a":-1}'

    def test_round_trip(self) -> None:
        """Should read back what it writes, including non-ASCII notes."""
        record = rec("0000-01-01", "a/b", -5, "café \"quoted\"")

        assert Record.from_json(record.to_json()) == record

    def test_note_defaults_to_empty(self) -> None:
        """Should treat a missing note as empty."""
        record = Record.from_json('{"d":"2015-03-30","c":"category","a":1}')

        assert record.note == ""

    def test_rejects_relative_date(self) -> None:
        """Should only accept absolute dates in stored records."""
        with pytest.raises(RecordParseError) as exc_info:
            Record.from_json('{"d":"m","c":"category","a":123456}')

        assert exc_info.value.field == "d"

    def test_rejects_bad_category(self) -> None:
        """Should reject empty or malformed categories."""
        for category in ("", "/category"):
            with pytest.raises(RecordParseError) as exc_info:
                Record.from_json(f'{{"d":"2015-03-30","c":"{category}","a":123456}}')
            assert exc_info.value.field == "c"

    def test_rejects_fractional_amount(self) -> None:
        """Should require the amount in whole cents."""
        with pytest.raises(RecordParseError) as exc_info:
            Record.from_json('{"d":"2015-03-30","c":"category","a":1234.56}')

        assert exc_info.value.field == "a"

    def test_rejects_unknown_and_missing_fields(self) -> None:
        """Should reject extra keys and require d, c and a."""
        with pytest.raises(RecordParseError):
            Record.from_json('{"d":"2015-03-30","c":"category","a":1,"x":0}')
        with pytest.raises(RecordParseError):
            Record.from_json('{"d":"2015-03-30","a":1}')
        with pytest.raises(RecordParseError):
            Record.from_json("not json")


class TestRecordlist:
    """Tests for Recordlist ordering and addressing."""

    def test_sorted_by_date_stably(self, records: Recordlist) -> None:
        """Should sort by date and keep given order within a date."""
        assert [(str(r.date), str(r.category)) for r in records] == [
            ("2015-03-29", "salary"),
            ("2015-03-30", "food"),
            ("2015-03-30", "food/snacks"),
            ("2015-03-31", "rent"),
        ]

    def test_insert_goes_after_same_date(self, records: Recordlist) -> None:
        """Should place a new record after existing records on its date."""
        new = rec("2015-03-30", "gift", 5000)
        records.insert(new)

        assert records.get(Date(2015, 3, 30), 2) == new
        assert len(records) == 5

    def test_get_by_index_in_date(self, records: Recordlist) -> None:
        """Should address records by date and position within the date."""
        assert records.get(Date(2015, 3, 30), 0).note == "first"
        assert records.get(Date(2015, 3, 30), 1).note == "second"
        assert records.get(Date(2015, 3, 29), 0).category == Category("salary")

    def test_get_missing(self, records: Recordlist) -> None:
        """Should raise for a date without records or an index past the end."""
        for day, iid in ((Date(2015, 3, 28), 0), (Date(2015, 3, 30), 2), (Date(2015, 3, 30), -1)):
            with pytest.raises(RecordNotFoundError):
                records.get(day, iid)

    def test_remove(self, records: Recordlist) -> None:
        """Should remove and return the addressed record, shifting later indexes down."""
        removed = records.remove(Date(2015, 3, 30), 0)

        assert removed.note == "first"
        assert records.get(Date(2015, 3, 30), 0).note == "second"
        assert len(records) == 3

    def test_remove_missing_leaves_list_unchanged(self, records: Recordlist) -> None:
        """Should not modify the list when the record does not exist."""
        before = Recordlist(records)

        with pytest.raises(RecordNotFoundError):
            records.remove(Date(2015, 3, 30), 5)

        assert records == before

    def test_iter_with_iid(self, records: Recordlist) -> None:
        """Should number records from zero within each date."""
        assert [iid for iid, _ in records.iter_with_iid()] == [0, 0, 1, 0]

    def test_spanned_interval(self, records: Recordlist) -> None:
        """Should span the earliest to the latest date, or be empty."""
        assert records.spanned_interval() == Interval(Date(2015, 3, 29), Date(2015, 3, 31))
        assert Recordlist().spanned_interval() == EMPTY

    def test_slice_spanning_interval(self, records: Recordlist) -> None:
        """Should return exactly the records within the interval."""
        interval = Interval.single(Date(2015, 3, 30))
        sliced = records.slice_spanning_interval(interval)

        assert [r.note for r in sliced] == ["first", "second"]
        assert all(r.date in interval for r in sliced)
        assert records.slice_spanning_interval(EMPTY) == []
        assert len(records.slice_spanning_interval(MAX_INTERVAL)) == len(records)

    def test_categories(self, records: Recordlist) -> None:
        """Should list distinct categories in order."""
        records.insert(rec("2015-04-01", "food", -1))

        assert records.categories() == [
            Category("food"),
            Category("food/snacks"),
            Category("rent"),
            Category("salary"),
        ]


class TestRecordlistFile:
    """Tests for Recordlist.dumps and Recordlist.loads."""

    def test_round_trip(self, records: Recordlist) -> None:
        """Should read back the same records in the same order."""
        assert Recordlist.loads(records.dumps()) == records

    def test_skips_blank_lines(self) -> None:
        """Should ignore blank and whitespace-only lines."""
        text = '\n  {"d":"2015-03-30","c":"a","a":1}\n\n   \n'

        assert len(Recordlist.loads(text)) == 1

    def test_reports_line_number(self) -> None:
        """Should name the line of the first bad record."""
        text = '{"d":"2015-03-30","c":"a","a":1}\n\n{"d":"2015-03-30","c":"","a":1}\n'

        with pytest.raises(RecordParseError) as exc_info:
            Recordlist.loads(text)

        assert exc_info.value.line == 3
        assert exc_info.value.field == "c"
        assert "line 3" in str(exc_info.value)


class TestFilterRecords:
    """Tests for filter_records."""

    def test_interval_only(self, records: Recordlist) -> None:
        """Should keep every category by default."""
        filtered = filter_records(records, Interval(Date(2015, 3, 30), Date(2015, 3, 31)))

        assert len(filtered) == 3

    def test_include_patterns(self, records: Recordlist) -> None:
        """Should keep categories matching any include pattern."""
        filtered = filter_records(records, MAX_INTERVAL, include=["food*", "rent"])

        assert [str(r.category) for r in filtered] == ["food", "food/snacks", "rent"]

    def test_exclude_wins(self, records: Recordlist) -> None:
        """Should drop categories matching an exclude pattern even when included."""
        filtered = filter_records(records, MAX_INTERVAL, include=["food*"], exclude=["*/snacks"])

        assert [str(r.category) for r in filtered] == ["food"]

    def test_case_sensitive(self, records: Recordlist) -> None:
        """Should match patterns case-sensitively."""
        assert not filter_records(records, MAX_INTERVAL, include=["FOOD"])


class TestTemplateEntry:
    """Tests for TemplateEntry.to_record."""

    def test_to_record(self) -> None:
        """Should build a record on the given date with no note."""
        entry = TemplateEntry(Category("housing/rent"), Cents(-120000))

        assert entry.to_record(Date(2015, 3, 1)) == rec("2015-03-01", "housing/rent", -120000)
