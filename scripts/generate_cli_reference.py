#!/usr/bin/env python3
"""Generate CLI reference documentation from typer app."""

import inspect
import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import tally
sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.models import ArgumentInfo, OptionInfo

from tally.cli import app


def format_option(param_name: str, info: OptionInfo) -> str:
    """Format an option with its flags and help text."""
    flags = list(info.param_decls) or [f"--{param_name.replace('_', '-')}"]
    parts = ["- " + ", ".join(f"`{flag}`" for flag in flags)]
    if info.help:
        parts.append(f": {info.help}")
    if info.default is not None and info.default is not False and info.default != "":
        parts.append(f" (default: {info.default})")
    return "".join(parts)


def format_argument(param_name: str, info: ArgumentInfo) -> str:
    """Format a positional argument, noting its default when optional."""
    parts = [f"- `{param_name.upper()}`"]
    if info.help:
        parts.append(f": {info.help}")
    if info.default is ...:
        parts.append(" (required)")
    elif info.default is not None:
        parts.append(f" (default: {info.default})")
    return "".join(parts)


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    params = inspect.signature(callback).parameters.items()
    args = [(name, p.default) for name, p in params if isinstance(p.default, ArgumentInfo)]
    options = [(name, p.default) for name, p in params if isinstance(p.default, OptionInfo)]

    usage = " ".join(
        [f"uv run tally {command_name}"]
        + [name.upper() if info.default is ... else f"[{name.upper()}]" for name, info in args]
        + (["[OPTIONS]"] if options else [])
    )
    lines = [f"### {command_name}", "", doc, "", "**Usage:**", "", "```bash", usage, "```", ""]

    if args:
        lines.extend(["**Arguments:**", ""])
        lines.extend(format_argument(name, info) for name, info in args)
        lines.append("")

    if options:
        lines.extend(["**Options:**", ""])
        lines.extend(format_option(name, info) for name, info in options)
        lines.append("")

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "Complete reference for all tally CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "uv run tally [COMMAND] [OPTIONS]",
        "```",
        "",
        "Every command except `init` must run inside a repository: the current",
        "directory, or the directory named by `TALLY_DIR`.",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
        "| `--help` | Show help message and exit |",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = generate_cli_reference()

    output_path.write_text(doc)
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
