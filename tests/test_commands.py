"""Tests for helpers shared by the command modules."""

import pytest

from tally.commands.limits import update_limit
from tally.commands.report import split_patterns
from tally.commands.transactions import signed_amount
from tally.domain.errors import MoneyParseError
from tally.domain.limits import Limits
from tally.domain.money import ZERO, Cents


class TestSignedAmount:
    """Tests for signed_amount."""

    def test_unsigned_follows_setting(self) -> None:
        """Should take the sign of an unsigned amount from the setting."""
        assert signed_amount("12.50", unsigned_is_negative=False) == Cents(1250)
        assert signed_amount("12.50", unsigned_is_negative=True) == Cents(-1250)

    def test_explicit_sign_wins(self) -> None:
        """Should keep an explicit sign whatever the setting."""
        assert signed_amount("+12.50", unsigned_is_negative=True) == Cents(1250)
        assert signed_amount("-12.50", unsigned_is_negative=False) == Cents(-1250)

    def test_parenthesized_is_negative(self) -> None:
        """Should keep a parenthesized amount negative whatever the setting."""
        assert signed_amount("(12.50)", unsigned_is_negative=False) == Cents(-1250)
        assert signed_amount("(1,234.00)", unsigned_is_negative=True) == Cents(-123400)

    def test_invalid(self) -> None:
        """Should reject malformed amounts."""
        with pytest.raises(MoneyParseError):
            signed_amount("12,5x", unsigned_is_negative=False)


class TestSplitPatterns:
    """Tests for split_patterns."""

    def test_default_when_missing(self) -> None:
        """Should use the default when no patterns were given."""
        assert split_patterns(None, ["*"]) == ["*"]

    def test_split(self) -> None:
        """Should split on commas and drop empty entries."""
        assert split_patterns("food/*,,rent,", ["*"]) == ["food/*", "rent"]

    def test_empty_text(self) -> None:
        """Should give no patterns for an empty string."""
        assert split_patterns("", ["*"]) == []


class TestUpdateLimit:
    """Tests for update_limit."""

    def test_set(self) -> None:
        """Should set the limit and report the formatted amount."""
        limits = Limits()

        assert update_limit(limits, 2015, Cents(550000)) == ("2015 limit set to 5,500.00", True)
        assert limits.get(2015) == Cents(550000)

    def test_remove(self) -> None:
        """Should remove an existing limit when set to zero."""
        limits = Limits({2015: Cents(550000)})

        assert update_limit(limits, 2015, ZERO) == ("2015 limit removed.", True)
        assert limits.get(2015) is None

    def test_remove_missing(self) -> None:
        """Should report a missing limit without changing anything."""
        limits = Limits({2014: Cents(100)})

        assert update_limit(limits, 2015, ZERO) == ("2015 has no limit.", False)
        assert limits == Limits({2014: Cents(100)})

    def test_zero_padded_year(self) -> None:
        """Should pad years to four digits."""
        assert update_limit(Limits(), 5, Cents(1))[0] == "0005 limit set to 0.01"
