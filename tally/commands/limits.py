"""Contribution limit command (lim)."""

from tally import dates
from tally.commands.output import console, fail, print_report
from tally.domain.errors import ConfigError, LedgerError
from tally.domain.limitprinter import LimitPrinterConfig
from tally.domain.limits import Limitkind, Limits
from tally.domain.money import Cents
from tally.store import get_repo_dir, load_limits, load_records, load_repo_config, save_limits


def update_limit(limits: Limits, year: int, amount: Cents) -> tuple[str, bool]:
    """Set or clear the limit for a year.

    Args:
        limits: Limits to update in place.
        year: Year to update.
        amount: New limit; zero removes the year's limit.

    Returns:
        Message to show, and whether `limits` changed.
    """
    if amount:
        limits.set(year, amount)
        return f"{year:04d} limit set to {amount}", True
    if limits.get(year) is None:
        return f"{year:04d} has no limit.", False
    limits.remove(year)
    return f"{year:04d} limit removed.", True


def lim_command(year: str = "y", set_amount: str | None = None, view: str | None = None) -> None:
    """View contribution room for a year, or set the year's limit.

    Args:
        year: Year as a number or relative token such as "y-1".
        set_amount: New limit for the year; "0" removes it.
        view: Account type to report on; defaults to the configured one.
    """
    repo_dir = get_repo_dir()
    try:
        config = load_repo_config(repo_dir)
        if set_amount is not None and view is not None:
            raise ConfigError("--set and --view cannot be used together")
        target = dates.parse_year(year, dates.today())
        limits = load_limits(repo_dir)

        if set_amount is not None:
            message, changed = update_limit(limits, target, Cents.parse(set_amount))
            if changed:
                save_limits(limits, repo_dir)
            console.print(message)
            return

        kind = Limitkind.parse(view) if view is not None else config.default_limitkind()
        printer = LimitPrinterConfig(target, kind, limits, load_records(repo_dir), config.charset())
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(printer.render())
