"""Tests for tally.domain.limits."""

import pytest

from tally.domain.errors import ConfigError, LimitNotFoundError, OutOfRangeError, ParseError
from tally.domain.limits import Limitkind, Limits
from tally.domain.money import Cents
from tally.domain.records import Recordlist

LIMITS = Limits({2015: Cents(5000), 2016: Cents(5000), 2017: Cents(5000)})

RECORDS = Recordlist.loads(
    """
    {"d":"2014-01-01","c":"aaa","a":1000}
    {"d":"2014-01-01","c":"aaa","a":500}
    {"d":"2015-01-01","c":"aaa","a":2000}
    {"d":"2015-01-01","c":"aaa","a":-10000}
    {"d":"2016-01-01","c":"aaa","a":3000}
    {"d":"2017-01-01","c":"aaa","a":10000}
    {"d":"2018-01-01","c":"aaa","a":4000}
    """
)


class TestLimits:
    """Tests for the Limits mapping."""

    def test_set_get_remove(self) -> None:
        """Should upsert, look up and remove limits by year."""
        limits = Limits()
        limits.set(2015, Cents(100))
        limits.set(2015, Cents(200))

        assert limits.get(2015) == Cents(200)
        assert limits.remove(2015) == Cents(200)
        assert limits.get(2015) is None
        assert not limits

    def test_remove_missing(self) -> None:
        """Should raise when the year has no limit."""
        with pytest.raises(LimitNotFoundError):
            Limits().remove(2015)

    def test_rejects_out_of_range_year(self) -> None:
        """Should only hold years 0 through 9999."""
        with pytest.raises(OutOfRangeError):
            Limits().set(10000, Cents(1))

    def test_items_sorted(self) -> None:
        """Should list years in ascending order."""
        limits = Limits({2016: Cents(2), 40: Cents(1), 2015: Cents(3)})

        assert [year for year, _ in limits.items()] == [40, 2015, 2016]
        assert [year for year, _ in limits.up_to(2015)] == [40, 2015]

    def test_inception_to_year(self) -> None:
        """Should total every limit up to and including the year."""
        assert LIMITS.inception_to_year(2014) == Cents(0)
        assert LIMITS.inception_to_year(2016) == Cents(10000)
        assert LIMITS.inception_to_year(9999) == Cents(15000)


class TestLimitsFile:
    """Tests for Limits.dumps and Limits.loads."""

    def test_round_trip(self) -> None:
        """Should read back what it writes."""
        assert Limits.loads(LIMITS.dumps()) == LIMITS

    def test_format(self) -> None:
        """Should write a pretty-printed object keyed by year."""
        assert Limits({2015: Cents(-123)}).dumps() == '{\n  "2015": -123\n}\n'

    def test_accepts_short_years(self) -> None:
        """Should accept years written without leading zeros."""
        assert Limits.loads('{"40": 100000}').get(40) == Cents(100000)

    def test_rejects_malformed(self) -> None:
        """Should reject bad JSON, non-numeric years and non-integer amounts."""
        for text in ("[", "[]", '{"abc": 1}', '{"2015": 1.5}', '{"2015": "1"}', '{"10000": 1}'):
            with pytest.raises((ParseError, OutOfRangeError)):
                Limits.loads(text)


class TestLimitkind:
    """Tests for Limitkind."""

    def test_parse(self) -> None:
        """Should parse account types case-insensitively."""
        assert Limitkind.parse("rrsp") is Limitkind.RRSP
        assert Limitkind.parse("TFSA") is Limitkind.TFSA

    def test_parse_rejects_unknown(self) -> None:
        """Should reject other account types."""
        with pytest.raises(ConfigError):
            Limitkind.parse("asdf")

    def test_nothing_logged(self) -> None:
        """Should have no room without limits or transactions."""
        assert Limitkind.RRSP.remaining(Limits(), Recordlist(), 2015) == Cents(0)
        assert Limitkind.TFSA.remaining(Limits(), Recordlist(), 2015) == Cents(0)

    def test_before_first_limit(self) -> None:
        """Should go negative when contributing before any limit exists."""
        assert Limitkind.RRSP.remaining(LIMITS, RECORDS, 2014) == Cents(-1500)
        assert Limitkind.TFSA.remaining(LIMITS, RECORDS, 2014) == Cents(-1500)

    def test_withdrawal_year(self) -> None:
        """Should not restore room in the year of a withdrawal."""
        assert Limitkind.RRSP.remaining(LIMITS, RECORDS, 2015) == Cents(1500)
        assert Limitkind.TFSA.remaining(LIMITS, RECORDS, 2015) == Cents(1500)

    def test_tfsa_restores_withdrawals_next_year(self) -> None:
        """Should add TFSA withdrawals back from the following year on."""
        assert Limitkind.RRSP.remaining(LIMITS, RECORDS, 2016) == Cents(3500)
        assert Limitkind.TFSA.remaining(LIMITS, RECORDS, 2016) == Cents(13500)
        assert Limitkind.RRSP.remaining(LIMITS, RECORDS, 2017) == Cents(-1500)
        assert Limitkind.TFSA.remaining(LIMITS, RECORDS, 2017) == Cents(8500)

    def test_later_years(self) -> None:
        """Should keep subtracting contributions after the last limit."""
        assert Limitkind.RRSP.remaining(LIMITS, RECORDS, 2018) == Cents(-5500)
        assert Limitkind.TFSA.remaining(LIMITS, RECORDS, 2018) == Cents(4500)
