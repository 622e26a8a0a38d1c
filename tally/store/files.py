"""Reading and writing the ledger and limits files.

A missing file reads as an empty value; anything else that goes wrong is
raised to the caller.
"""

from pathlib import Path

from tally.config import Config, load_config
from tally.domain.errors import NotARepositoryError
from tally.domain.limits import Limits
from tally.domain.records import Recordlist
from tally.store.paths import get_config_path, get_limits_path, get_records_path, repo_exists


def load_repo_config(repo_dir: Path | None = None) -> Config:
    """Load the configuration of an initialized repository.

    Raises:
        NotARepositoryError: If the directory has no config file.
        ConfigError: If the config file is invalid.
    """
    if not repo_exists(repo_dir):
        raise NotARepositoryError()
    return load_config(get_config_path(repo_dir))


def load_records(repo_dir: Path | None = None) -> Recordlist:
    """Load all transactions.

    Args:
        repo_dir: Repository directory. If None, uses the default location.

    Returns:
        Transactions sorted by date.

    Raises:
        RecordParseError: If a line of the ledger is malformed.
        OSError: If the file exists but cannot be read.
    """
    try:
        text = get_records_path(repo_dir).read_text(encoding="utf-8")
    except FileNotFoundError:
        return Recordlist()
    return Recordlist.loads(text)


def save_records(records: Recordlist, repo_dir: Path | None = None) -> None:
    """Write all transactions, one JSON object per line."""
    get_records_path(repo_dir).write_text(records.dumps(), encoding="utf-8")


def load_limits(repo_dir: Path | None = None) -> Limits:
    """Load yearly contribution limits.

    Raises:
        ParseError: If the limits file is malformed.
        OSError: If the file exists but cannot be read.
    """
    try:
        text = get_limits_path(repo_dir).read_text(encoding="utf-8")
    except FileNotFoundError:
        return Limits()
    return Limits.loads(text)


def save_limits(limits: Limits, repo_dir: Path | None = None) -> None:
    """Write yearly contribution limits."""
    get_limits_path(repo_dir).write_text(limits.dumps(), encoding="utf-8")
