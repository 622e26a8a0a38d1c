"""Console output shared by all commands.

Status messages and errors go through rich; rendered reports are written
verbatim with typer.echo, which drops colour codes when stdout is not a
terminal.
"""

import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def fail(error: Exception) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    if isinstance(error, OSError):
        err_console.print(f"[red]Filesystem error: {escape(str(error))}[/red]", style="bold")
    else:
        err_console.print(f"[red]Error: {escape(str(error))}[/red]", style="bold")
    sys.exit(1)


def print_report(text: str) -> None:
    """Write a rendered report, which already ends with a newline."""
    typer.echo(text, nl=False)


def terminal_width() -> int:
    return console.width
