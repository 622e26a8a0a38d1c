"""Report commands (view, sum, plot)."""

from pathlib import Path

from tally import dates
from tally.commands.output import fail, print_report, terminal_width
from tally.domain.barchart import BarchartConfig
from tally.domain.calendar import Datepart, Interval
from tally.domain.errors import LedgerError
from tally.domain.records import Recordlist, filter_records
from tally.domain.tree import SumTreeConfig, ViewTreeConfig
from tally.store import get_repo_dir, load_records, load_repo_config


def split_patterns(text: str | None, default: list[str]) -> list[str]:
    """Split a comma-separated list of wildcard patterns.

    Args:
        text: Patterns as typed, e.g. "food/*,rent". None means not given.
        default: Patterns to use when none were given.

    Returns:
        Non-empty patterns in the order given.
    """
    if text is None:
        return default
    return [p for p in text.split(",") if p]


def _load_filtered(
    repo_dir: Path, interval: Interval, categories: str | None, exclude: str | None
) -> Recordlist:
    return filter_records(
        load_records(repo_dir),
        interval,
        include=split_patterns(categories, ["*"]),
        exclude=split_patterns(exclude, []),
    )


def view_command(interval: str = "m", categories: str | None = None, exclude: str | None = None) -> None:
    """Show transactions grouped by year, month and day."""
    try:
        repo_dir = get_repo_dir()
        config = load_repo_config(repo_dir)
        bounds = Interval.parse(interval, dates.today())
        records = _load_filtered(repo_dir, bounds, categories, exclude)
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(
        ViewTreeConfig(records, charset=config.charset(), first_iid=config.first_index_in_date).render()
    )


def sum_command(
    interval: str = "m", level: int = 1, categories: str | None = None, exclude: str | None = None
) -> None:
    """Show income and spending totals per category."""
    try:
        repo_dir = get_repo_dir()
        config = load_repo_config(repo_dir)
        bounds = Interval.parse(interval, dates.today())
        records = _load_filtered(repo_dir, bounds, categories, exclude)
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(SumTreeConfig(records, level=level, charset=config.charset()).render())


def plot_command(
    interval: str = "m-12:M", unit: str = "month", categories: str | None = None, exclude: str | None = None
) -> None:
    """Plot income and spending per year, month or day."""
    try:
        repo_dir = get_repo_dir()
        config = load_repo_config(repo_dir)
        bounds = Interval.parse(interval, dates.today())
        datepart = Datepart.parse(unit)
        records = _load_filtered(repo_dir, bounds, categories, exclude)
    except (LedgerError, OSError) as e:
        fail(e)

    chart = BarchartConfig(
        records,
        bounds=bounds,
        unit=datepart,
        term_width=terminal_width(),
        charset=config.charset(),
    )
    print_report(chart.render())
