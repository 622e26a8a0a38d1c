"""Horizontal bar charts of income and spending over time.

All monetary amounts are in cents (Cents type).
"""

from dataclasses import dataclass, field

from tally.domain.aggregate import Aggregate
from tally.domain.calendar import MAX_INTERVAL, Date, Datepart, Interval, month_abbr
from tally.domain.charset import Charset
from tally.domain.money import ZERO, Cents
from tally.domain.records import Recordlist
from tally.domain.report import BOUNDING_SPACES_COUNT, MIN_TERM_WIDTH, NO_TRANSACTIONS

# yyyy, yyyy mmm, yyyy-mm-dd
LABEL_CHARLEN = {Datepart.YEAR: 4, Datepart.MONTH: 8, Datepart.DAY: 10}


def calculate_bar_length(value: Cents, max_value: Cents, max_bar_length: int) -> int:
    """Scale a magnitude to a bar length, rounding half up.

    Args:
        value: Non-negative magnitude to draw.
        max_value: Largest magnitude in the chart.
        max_bar_length: Length of the bar drawn for `max_value`.

    Returns:
        Bar length in characters, never more than `max_bar_length`.
    """
    if max_value.value <= 0:
        return 0
    scaled = (2 * value.value * max_bar_length + max_value.value) // (2 * max_value.value)
    return min(max_bar_length, scaled)


@dataclass(frozen=True)
class Barchart:
    """Per-period positive and negative totals, ready to draw."""

    charset: Charset
    bounds: Interval
    unit: Datepart
    pos: Aggregate[Date, Cents]
    # Absolute values
    neg: Aggregate[Date, Cents]
    max_value: Cents
    max_bar_length: int

    def is_empty(self) -> bool:
        return self.bounds.is_empty()

    @property
    def label_charlen(self) -> int:
        return LABEL_CHARLEN[self.unit]

    def label(self, start: Date) -> str:
        if self.unit is Datepart.YEAR:
            return f"{start.year:04d}"
        if self.unit is Datepart.MONTH:
            return f"{start.year:04d} {month_abbr(start.month)}"
        return str(start)

    def _bar(self, magnitude: Cents, glyph: str, color: str) -> str:
        length = calculate_bar_length(magnitude, self.max_value, self.max_bar_length)
        if length == 0:
            return ""
        return f"{color}{glyph * length}{self.charset.color_suffix} "

    def _draw(self, start: Date) -> list[str]:
        if not self.pos and not self.neg:
            return []
        cs = self.charset
        lines = []
        prefix = f"{self.label(start)} {cs.chart_axis}"
        if self.pos:
            value = self.pos.get(start) or ZERO
            lines.append(prefix + self._bar(value, cs.chart_bar_pos, cs.color_prefix_green) + str(value))
            if not self.neg:
                return lines
            prefix = " " * self.label_charlen + f" {cs.chart_axis}"
        value = self.neg.get(start) or ZERO
        lines.append(prefix + self._bar(value, cs.chart_bar_neg, cs.color_prefix_red) + str(-value))
        return lines

    def render(self) -> str:
        lines = []
        for interval in self.bounds.iter(self.unit):
            lines.extend(self._draw(interval.start))
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class BarchartConfig:
    """Inputs for a bar chart.

    Attributes:
        records: Transactions to chart, already filtered by the caller.
        bounds: Dates of interest; trimmed to the span of `records`.
        unit: Period covered by each bar.
        term_width: Terminal width in columns; at least 60 is assumed.
        charset: Glyphs to draw with.
    """

    records: Recordlist
    bounds: Interval = MAX_INTERVAL
    unit: Datepart = Datepart.MONTH
    term_width: int = 80
    charset: Charset = field(default_factory=Charset)

    def to_barchart(self) -> Barchart:
        bounds = self.records.spanned_interval().intersection(self.bounds)
        pos: Aggregate[Date, Cents] = Aggregate(ZERO)
        neg: Aggregate[Date, Cents] = Aggregate(ZERO)
        for interval in bounds.iter(self.unit):
            for r in self.records.slice_spanning_interval(interval):
                if r.amount.value > 0:
                    pos.add(interval.start, r.amount)
                elif r.amount.value < 0:
                    neg.add(interval.start, -r.amount)

        max_value = max((v for _, v in pos.items()), default=ZERO)
        max_value = max(max_value, max((v for _, v in neg.items()), default=ZERO))
        # Sized for the parenthesized width of the largest magnitude even when
        # it is positive, which can leave up to two columns unused.
        max_bar_length = (
            max(self.term_width, MIN_TERM_WIDTH)
            - LABEL_CHARLEN[self.unit]
            - BOUNDING_SPACES_COUNT
            - 1
            - (-max_value).charlen()
        )
        return Barchart(self.charset, bounds, self.unit, pos, neg, max_value, max_bar_length)

    def render(self) -> str:
        if not self.records:
            return NO_TRANSACTIONS
        chart = self.to_barchart()
        if chart.is_empty():
            return NO_TRANSACTIONS
        return chart.render()
