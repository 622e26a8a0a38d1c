"""Tests for tally.domain.aggregate."""

from tally.domain.aggregate import Aggregate
from tally.domain.money import ZERO, Cents


class TestAggregate:
    """Tests for Aggregate."""

    def test_empty(self) -> None:
        """Should start empty with a zero total."""
        agg: Aggregate[str, int] = Aggregate(0)

        assert not agg
        assert len(agg) == 0
        assert agg.total == 0
        assert agg.get("a") is None

    def test_sums_per_key(self) -> None:
        """Should sum values per key and keep a grand total."""
        agg = Aggregate.from_pairs([("a", 1), ("b", 2), ("a", 3)], 0)

        assert agg.get("a") == 4
        assert agg.get("b") == 2
        assert agg.total == 6
        assert dict(agg.items()) == {"a": 4, "b": 2}

    def test_total_equals_sum_of_values(self) -> None:
        """Should keep the total equal to the sum of the per-key values."""
        agg = Aggregate.from_pairs([("x", Cents(-150)), ("y", Cents(300)), ("x", Cents(25))], ZERO)

        assert agg.total == sum((v for _, v in agg.items()), ZERO)
        assert agg.get("x") == Cents(-125)

    def test_equality(self) -> None:
        """Should compare equal when built from the same pairs."""
        pairs = [("a", 1), ("b", 2)]

        assert Aggregate.from_pairs(pairs, 0) == Aggregate.from_pairs(pairs, 0)
        assert Aggregate.from_pairs(pairs, 0) != Aggregate.from_pairs(pairs[:1], 0)
