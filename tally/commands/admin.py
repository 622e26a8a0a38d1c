"""Admin commands for initializing a repository."""

from rich.markup import escape

from tally.commands.output import console, fail
from tally.config import Config, load_config, save_config
from tally.domain.errors import LedgerError
from tally.store.paths import get_config_path, get_repo_dir, repo_exists


def init_command(reset_config: bool = False) -> None:
    """Initialize a repository in the current directory.

    An existing configuration is kept (and rewritten with every key present)
    unless `reset_config` is set.
    """
    repo_dir = get_repo_dir()
    config_path = get_config_path(repo_dir)
    already_repo = repo_exists(repo_dir)

    try:
        config = Config() if reset_config else load_config(config_path)
        save_config(config, config_path)
    except (LedgerError, OSError) as e:
        fail(e)

    if not already_repo:
        console.print(f"[green]✓[/green] Repository initialized in '{escape(str(repo_dir))}'", soft_wrap=True)
    elif reset_config:
        console.print("[green]✓[/green] Repository configuration reset to defaults.")
    else:
        console.print(f"[green]✓[/green] Repository reinitialized in '{escape(str(repo_dir))}'", soft_wrap=True)
    console.print(f"[dim]Config: {escape(str(config_path))}[/dim]", soft_wrap=True)
