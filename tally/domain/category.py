"""Hierarchical transaction categories such as "commute/car/gas"."""

from dataclasses import dataclass

from tally.domain.errors import CategoryParseError, OutOfRangeError

SEP = "/"
LEVEL0 = "All"


@dataclass(frozen=True, order=True)
class Category:
    """A non-empty, slash-separated category path."""

    path: str

    def __post_init__(self) -> None:
        if not self.path:
            raise CategoryParseError("category is empty", field="category")
        if self.path.startswith(SEP) or self.path.endswith(SEP):
            raise CategoryParseError(f"category '{self.path}' starts or ends with '{SEP}'", field="category")
        if SEP + SEP in self.path:
            raise CategoryParseError(
                f"category '{self.path}' contains consecutive occurrences of '{SEP}'", field="category"
            )

    def level(self, level: int) -> str:
        """Project the category onto a hierarchy level.

        Level 0 is the catch-all "All". Level n keeps the first n segments, or
        the whole path when it has fewer than n segments.

        Examples:
            >>> Category("commute/car/gas").level(2)
            'commute/car'
            >>> Category("commute").level(2)
            'commute'

        Raises:
            OutOfRangeError: If `level` is negative.
        """
        if level < 0:
            raise OutOfRangeError(f"category level {level} is negative")
        if level == 0:
            return LEVEL0
        return SEP.join(self.path.split(SEP)[:level])

    def __str__(self) -> str:
        return self.path
