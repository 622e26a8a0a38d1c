"""CLI entry point for tally."""

import typer

from tally.commands.admin import init_command
from tally.commands.limits import lim_command
from tally.commands.report import plot_command, sum_command, view_command
from tally.commands.transactions import cats_command, log_command, logt_command, rm_command

app = typer.Typer(
    name="tally",
    help="Plain-text personal ledger with tree reports, bar charts and contribution limits",
    add_completion=False,
)

INTERVAL_HELP = (
    "Interval 'A:B'; each side is an ISO date or a relative date "
    "(dN, mN, MN, yN, YN) and may be omitted. Shorthands: dN, mN = mN:MN, yN = yN:YN"
)
CATEGORIES_HELP = "Comma-separated wildcard patterns of categories to include"
EXCLUDE_HELP = "Comma-separated wildcard patterns of categories to exclude (wins over --categories)"


@app.callback()
def main() -> None:
    """Plain-text personal ledger with tree reports, bar charts and contribution limits."""
    pass


@app.command(name="init")
def init(
    reset_config: bool = typer.Option(False, "--reset-config", help="Restore an existing repository's config to defaults"),
) -> None:
    """Initialize a repository in the current directory."""
    init_command(reset_config)


@app.command(context_settings={"ignore_unknown_options": True})
def log(
    category: str = typer.Argument(..., help="Transaction category; use '/' for hierarchy, e.g. 'commute/car/gas'"),
    amount: str = typer.Argument(..., help="Amount; a leading '+' or '-' overrides unsigned_is_negative"),
    date: str = typer.Argument("d", help="Transaction date"),
    note: str = typer.Option("", "--note", "-n", help="Optional comments about the transaction"),
    create: bool = typer.Option(False, "--create", "-c", help="Allow a category no transaction uses yet"),
) -> None:
    """Log a transaction."""
    log_command(category, amount, date, note, create)


@app.command()
def logt(
    template: str = typer.Argument(None, help="Template name; omit to list templates"),
    date: str = typer.Argument("d", help="Transaction date"),
) -> None:
    """Log the transactions of a predefined template."""
    logt_command(template, date)


@app.command()
def rm(
    date: str = typer.Argument(..., help="Transaction date"),
    index: int = typer.Argument(..., help="Index of the transaction within DATE"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Remove it instead of showing a dry run"),
) -> None:
    """Remove a transaction."""
    rm_command(date, index, yes)


@app.command()
def cats(
    patterns: list[str] = typer.Argument(None, help="Wildcard patterns of categories to show"),
) -> None:
    """List the categories in use."""
    cats_command(patterns)


@app.command()
def view(
    interval: str = typer.Argument("m", help=INTERVAL_HELP),
    categories: str = typer.Option(None, "--categories", "-c", help=CATEGORIES_HELP),
    exclude: str = typer.Option(None, "--exclude", "-x", help=EXCLUDE_HELP),
) -> None:
    """View transactions grouped by date."""
    view_command(interval, categories, exclude)


@app.command(name="sum")
def sum_(
    interval: str = typer.Argument("m", help=INTERVAL_HELP),
    level: int = typer.Option(1, "--level", "-l", min=0, help="Category level to total on; 0 totals everything"),
    categories: str = typer.Option(None, "--categories", "-c", help=CATEGORIES_HELP),
    exclude: str = typer.Option(None, "--exclude", "-x", help=EXCLUDE_HELP),
) -> None:
    """Show income and spending totals by category."""
    sum_command(interval, level, categories, exclude)


@app.command()
def plot(
    interval: str = typer.Argument("m-12:M", help=INTERVAL_HELP),
    unit: str = typer.Option("month", "--unit", "-u", help="Period of each bar: 'year', 'month' or 'day'"),
    categories: str = typer.Option(None, "--categories", "-c", help=CATEGORIES_HELP),
    exclude: str = typer.Option(None, "--exclude", "-x", help=EXCLUDE_HELP),
) -> None:
    """Plot income and spending totals over time."""
    plot_command(interval, unit, categories, exclude)


@app.command()
def lim(
    year: str = typer.Argument("y", help="Year, or 'yN' for N years from this year"),
    set_amount: str = typer.Option(None, "--set", "-s", help="Set the limit for YEAR; 0 removes it"),
    view: str = typer.Option(None, "--view", "-v", help="Account type to report on: 'rrsp' or 'tfsa'"),
) -> None:
    """View and manage contribution limits."""
    lim_command(year, set_amount, view)


if __name__ == "__main__":
    app()
