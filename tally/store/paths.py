"""Repository location and file naming."""

import os
from pathlib import Path

from tally.config import CONFIG_FILENAME

RECORDS_FILENAME = "ledger.jsonl"
LIMITS_FILENAME = "limits.json"


def get_repo_dir() -> Path:
    """Get the repository directory: $TALLY_DIR, or the current directory."""
    repo_dir = os.environ.get("TALLY_DIR")
    if repo_dir:
        return Path(repo_dir).expanduser()
    return Path.cwd()


def get_config_path(repo_dir: Path | None = None) -> Path:
    """Get the config file path.

    Args:
        repo_dir: Repository directory. If None, uses the default location.
    """
    return (repo_dir or get_repo_dir()) / CONFIG_FILENAME


def get_records_path(repo_dir: Path | None = None) -> Path:
    return (repo_dir or get_repo_dir()) / RECORDS_FILENAME


def get_limits_path(repo_dir: Path | None = None) -> Path:
    return (repo_dir or get_repo_dir()) / LIMITS_FILENAME


def repo_exists(repo_dir: Path | None = None) -> bool:
    """Check whether the directory has been initialized with 'tally init'."""
    return get_config_path(repo_dir).is_file()
