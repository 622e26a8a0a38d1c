"""Filesystem store layer - provides persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from tally.store.files import load_limits, load_records, load_repo_config, save_limits, save_records
from tally.store.paths import (
    get_config_path,
    get_limits_path,
    get_records_path,
    get_repo_dir,
    repo_exists,
)

__all__ = [
    # Paths
    "get_config_path",
    "get_limits_path",
    "get_records_path",
    "get_repo_dir",
    "repo_exists",
    # Files
    "load_limits",
    "load_records",
    "load_repo_config",
    "save_limits",
    "save_records",
]
