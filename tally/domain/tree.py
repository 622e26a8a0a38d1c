"""Labelled trees and the reports rendered as trees.

Trees are immutable and built bottom-up from records that are already in
order, so no node ever needs a reference to its parent:
- ViewTreeConfig: year -> month -> day -> one leaf per transaction
- SumTreeConfig: In / Out / Net sections of per-category totals
- TemplateTreeConfig: template name -> one leaf per template entry
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from itertools import groupby
from typing import Protocol

from tally.domain.aggregate import Aggregate
from tally.domain.calendar import Date, month_abbr, ordinal_day
from tally.domain.charset import Charset
from tally.domain.money import ZERO, Cents
from tally.domain.records import Record, Recordlist, TemplateEntry
from tally.domain.report import NO_TRANSACTIONS, alignment_charlen, count_digits, dash_count, dash_row, row_charlen


@dataclass(frozen=True)
class Node:
    label: str
    children: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Tree:
    """A forest of labelled nodes.

    Top-level nodes are written flush left; their descendants are drawn with
    the charset's branch glyphs:

        a
        |-- a1
        |   `-- a1a
        `-- a2
    """

    roots: tuple[Node, ...] = ()
    charset: Charset = field(default_factory=Charset)

    def is_empty(self) -> bool:
        return not self.roots

    def render(self) -> str:
        """Render every node on its own line, with a trailing newline."""
        lines: list[str] = []
        for root in self.roots:
            lines.append(root.label)
            self._render_children(root, "", lines)
        return "".join(line + "\n" for line in lines)

    def _render_children(self, node: Node, prefix: str, lines: list[str]) -> None:
        cs = self.charset
        for i, child in enumerate(node.children):
            is_last = i == len(node.children) - 1
            lines.append(prefix + (cs.tree_corner if is_last else cs.tree_sideways_t) + child.label)
            self._render_children(child, prefix + (cs.tree_space if is_last else cs.tree_pipe_gap), lines)

    def __str__(self) -> str:
        return self.render()


class LeafDecorator(Protocol):
    """Decorates the text of a transaction leaf in a view tree."""

    def decorate(self, record: Record, iid: int, text: str) -> str:
        """Return the text to display for a leaf.

        Args:
            record: Transaction the leaf represents.
            iid: Zero-based index-in-date of the transaction.
            text: Leaf text, `{iid} -- {amount} {category}[: {note}]`.
        """
        ...


@dataclass(frozen=True)
class RemovalMarker:
    """Flags the leaf of a transaction that is, or would be, removed."""

    date: Date
    iid: int
    removed: bool
    charset: Charset = field(default_factory=Charset)

    def decorate(self, record: Record, iid: int, text: str) -> str:
        if record.date != self.date or iid != self.iid:
            return text
        if self.removed:
            return f"{self.charset.color_prefix_red}{text} <- [REMOVED]{self.charset.color_suffix}"
        return f"{self.charset.color_prefix_yellow}{text} <- [WOULD BE REMOVED]{self.charset.color_suffix}"


@dataclass(frozen=True)
class ViewTreeConfig:
    """Transactions grouped by year, month and day.

    Attributes:
        records: Transactions to show, already filtered by the caller.
        charset: Glyphs to draw with.
        first_iid: Index-origin added to each displayed index-in-date.
        decorator: Optional hook applied once to each leaf's text.
    """

    records: Recordlist
    charset: Charset = field(default_factory=Charset)
    first_iid: int = 0
    decorator: LeafDecorator | None = None

    def to_tree(self) -> Tree:
        pairs = list(self.records.iter_with_iid())
        alignment = max(
            (row_charlen(count_digits(iid + self.first_iid), r.amount) for iid, r in pairs),
            default=0,
        )
        years = []
        for year, in_year in groupby(pairs, key=lambda p: p[1].date.year):
            months = []
            for month, in_month in groupby(in_year, key=lambda p: p[1].date.month):
                days = []
                for day, in_day in groupby(in_month, key=lambda p: p[1].date.day):
                    leaves = tuple(Node(self._leaf_text(r, iid, alignment)) for iid, r in in_day)
                    days.append(Node(ordinal_day(day), leaves))
                months.append(Node(month_abbr(month), tuple(days)))
            years.append(Node(f"{year:04d}", tuple(months)))
        return Tree(tuple(years), self.charset)

    def _leaf_text(self, record: Record, iid: int, alignment: int) -> str:
        index = iid + self.first_iid
        dashes = self.charset.dash * dash_count(alignment, count_digits(index), record.amount)
        # Non-negative amounts get a trailing space so categories line up
        # after parenthesized negatives.
        pad = " " if record.amount.value >= 0 else ""
        text = f"{index} {dashes} {record.amount}{pad} {record.category}"
        if record.note:
            text += f": {record.note}"
        if self.decorator is not None:
            text = self.decorator.decorate(record, iid, text)
        return text

    def render(self) -> str:
        if not self.records:
            return NO_TRANSACTIONS
        return self.to_tree().render()


def _sorted_by_magnitude(agg: Aggregate[str, Cents]) -> list[tuple[str, Cents]]:
    """Largest absolute amount first; ties broken alphabetically by label."""
    return sorted(agg.items(), key=lambda item: (-abs(item[1].value), item[0]))


@dataclass(frozen=True)
class SumTreeConfig:
    """Per-category totals split into income (In) and spending (Out).

    Attributes:
        records: Transactions to total, already filtered by the caller.
        level: Category hierarchy level to group on; 0 groups everything
            under "All".
        charset: Glyphs to draw with.
    """

    records: Recordlist
    level: int = 1
    charset: Charset = field(default_factory=Charset)

    IN = "In"
    OUT = "Out"
    NET = "Net"
    TOTAL = "Total"

    def to_tree(self) -> Tree:
        pos = Aggregate.from_pairs(
            ((r.category.level(self.level), r.amount) for r in self.records if r.amount.value > 0), ZERO
        )
        neg = Aggregate.from_pairs(
            ((r.category.level(self.level), r.amount) for r in self.records if r.amount.value < 0), ZERO
        )

        sections = [
            (self.IN, _sorted_by_magnitude(pos)),
            (self.OUT, _sorted_by_magnitude(neg)),
            (self.NET, [(self.IN, pos.total), (self.OUT, neg.total), (self.TOTAL, pos.total + neg.total)]),
        ]
        alignment = alignment_charlen(row for _, rows in sections for row in rows)
        roots = tuple(
            Node(name, tuple(Node(dash_row(label, amount, alignment, self.charset.dash)) for label, amount in rows))
            for name, rows in sections
            if rows
        )
        return Tree(roots, self.charset)

    def render(self) -> str:
        return self.to_tree().render()


@dataclass(frozen=True)
class TemplateTreeConfig:
    """Configured transaction templates, one branch per template name."""

    templates: Mapping[str, Sequence[TemplateEntry]]
    charset: Charset = field(default_factory=Charset)

    def to_tree(self) -> Tree:
        alignment = alignment_charlen(self._rows(entry for entries in self.templates.values() for entry in entries))
        roots = tuple(
            Node(
                name,
                tuple(
                    Node(dash_row(label, amount, alignment, self.charset.dash))
                    for label, amount in self._rows(self.templates[name])
                ),
            )
            for name in sorted(self.templates)
        )
        return Tree(roots, self.charset)

    @staticmethod
    def _rows(entries: Iterable[TemplateEntry]) -> Iterable[tuple[str, Cents]]:
        return ((str(entry.category), entry.amount) for entry in entries)

    def render(self) -> str:
        if not self.templates:
            return "No templates.\n"
        return self.to_tree().render()
