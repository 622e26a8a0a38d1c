"""Transaction management commands (log, logt, rm, cats)."""

from tally import dates
from tally.commands.output import console, fail, print_report
from tally.config import Config
from tally.domain.calendar import MAX_INTERVAL, Date, Interval
from tally.domain.category import Category
from tally.domain.errors import CategoryNotFoundError, ConfigError, LedgerError, RecordNotFoundError
from tally.domain.money import Cents
from tally.domain.records import Record, Recordlist, filter_records
from tally.domain.tree import RemovalMarker, TemplateTreeConfig, ViewTreeConfig
from tally.store import get_repo_dir, load_records, load_repo_config, save_records


def signed_amount(text: str, unsigned_is_negative: bool) -> Cents:
    """Parse an amount typed on the command line.

    An explicit leading sign, or parentheses marking a negative, is kept as
    given. Without one, the sign comes from the repository setting.

    Args:
        text: Amount such as "12.50", "+12.50" or "-12.50".
        unsigned_is_negative: Whether unsigned amounts are spending.

    Returns:
        Amount in cents.

    Raises:
        MoneyParseError: If the amount is malformed.
    """
    amount = Cents.parse(text)
    if text[:1] in ("+", "-", "("):
        return amount
    return -abs(amount) if unsigned_is_negative else abs(amount)


def _view_for_date(records: Recordlist, date: Date, config: Config) -> ViewTreeConfig:
    return ViewTreeConfig(
        records.spanning(Interval.single(date)),
        charset=config.charset(),
        first_iid=config.first_index_in_date,
    )


def log_command(category: str, amount: str, date: str = "d", note: str = "", create: bool = False) -> None:
    """Log a transaction and show every transaction on its date.

    Args:
        category: Category path such as "food/groceries".
        amount: Amount text; see signed_amount().
        date: ISO date or relative date token.
        note: Optional free-form note.
        create: Allow a category that no transaction uses yet.
    """
    repo_dir = get_repo_dir()
    try:
        config = load_repo_config(repo_dir)
        record = Record(
            Date.parse(date, dates.today()),
            Category(category),
            signed_amount(amount, config.unsigned_is_negative),
            note,
        )
        records = load_records(repo_dir)
        if not create and record.category not in records.categories():
            raise CategoryNotFoundError("nonexistent category")
        records.insert(record)
        save_records(records, repo_dir)
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(_view_for_date(records, record.date, config).render())


def logt_command(template: str | None = None, date: str = "d") -> None:
    """Log every entry of a template, or list templates when none is named."""
    repo_dir = get_repo_dir()
    try:
        config = load_repo_config(repo_dir)
        if template is None:
            print_report(TemplateTreeConfig(config.templates, config.charset()).render())
            return
        entries = config.templates.get(template)
        if entries is None:
            raise ConfigError("unknown template")
        day = Date.parse(date, dates.today())
        records = load_records(repo_dir)
        for entry in entries:
            records.insert(entry.to_record(day))
        save_records(records, repo_dir)
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(_view_for_date(records, day, config).render())


def rm_command(date: str, index: int, yes: bool = False) -> None:
    """Remove a transaction, or show what would be removed.

    Args:
        date: Date of the transaction.
        index: Position of the transaction within its date, counted from
            the configured first index.
        yes: Remove it; otherwise only mark it in the output.
    """
    repo_dir = get_repo_dir()
    try:
        config = load_repo_config(repo_dir)
        day = Date.parse(date, dates.today())
        iid = index - config.first_index_in_date
        records = load_records(repo_dir)
        try:
            records.get(day, iid)
        except RecordNotFoundError:
            raise RecordNotFoundError("nonexistent transaction") from None

        view = ViewTreeConfig(
            records.spanning(Interval.single(day)),
            charset=config.charset(),
            first_iid=config.first_index_in_date,
            decorator=RemovalMarker(day, iid, removed=yes, charset=config.charset()),
        )
        if yes:
            records.remove(day, iid)
            save_records(records, repo_dir)
    except (LedgerError, OSError) as e:
        fail(e)

    print_report(view.render())


def cats_command(patterns: list[str] | None = None) -> None:
    """List the categories in use that match any wildcard pattern."""
    repo_dir = get_repo_dir()
    try:
        load_repo_config(repo_dir)
        records = filter_records(load_records(repo_dir), MAX_INTERVAL, include=patterns or ["*"])
    except (LedgerError, OSError) as e:
        fail(e)

    categories = records.categories()
    if not categories:
        console.print("No categories.")
        return
    print_report("".join(f"{c}\n" for c in categories))
