"""Generic key to sum accumulator."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Aggregate(Generic[K, V]):
    """Sums values per key while keeping a running grand total.

    Args:
        zero: Additive identity for the value type, e.g. 0 or Cents(0).
    """

    def __init__(self, zero: V) -> None:
        self._zero = zero
        self._values: dict[K, V] = {}
        self._total = zero

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, V]], zero: V) -> "Aggregate[K, V]":
        agg: Aggregate[K, V] = cls(zero)
        for key, value in pairs:
            agg.add(key, value)
        return agg

    @property
    def total(self) -> V:
        return self._total

    def add(self, key: K, value: V) -> None:
        self._values[key] = self._values.get(key, self._zero) + value  # type: ignore[operator]
        self._total = self._total + value  # type: ignore[operator]

    def get(self, key: K) -> V | None:
        return self._values.get(key)

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._values.items())

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aggregate):
            return NotImplemented
        return self._values == other._values and self._total == other._total

    def __repr__(self) -> str:
        return f"Aggregate({self._values!r}, total={self._total!r})"
