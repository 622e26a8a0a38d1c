"""Contribution limit summary: yearly limits, total and remaining room."""

from dataclasses import dataclass, field

from tally.domain.charset import Charset
from tally.domain.limits import Limitkind, Limits
from tally.domain.money import ZERO
from tally.domain.records import Recordlist
from tally.domain.report import alignment_charlen, dash_row


@dataclass(frozen=True)
class LimitPrinterConfig:
    """Inputs for the limit summary.

    Attributes:
        year: Year of interest; later limits and contributions are ignored.
        kind: Account type deciding how withdrawals restore room.
        limits: Yearly limits.
        records: Transactions against the account.
        charset: Glyphs to draw with.
    """

    year: int
    kind: Limitkind
    limits: Limits
    records: Recordlist
    charset: Charset = field(default_factory=Charset)

    def render(self) -> str:
        """Render listed limits, a rule, then Total and Remaining rows.

        Example:
            2014 ----- 5,000.00
            2015 ----- 5,500.00
            ===================
            Total --- 10,500.00
            Remaining -- 500.00
        """
        limits = [(f"{year:04d}", limit) for year, limit in self.limits.up_to(self.year)]
        total = sum((limit for _, limit in limits), ZERO)
        remaining = self.kind.remaining(self.limits, self.records, self.year)
        summary = [("Total", total), ("Remaining", remaining)]

        alignment = alignment_charlen(limits + summary)
        lines = [dash_row(label, value, alignment, self.charset.dash) for label, value in limits]
        if limits:
            lines.append("=" * (alignment - 1))
        lines.extend(dash_row(label, value, alignment, self.charset.dash) for label, value in summary)
        return "".join(line + "\n" for line in lines)
