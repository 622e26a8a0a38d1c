#!/usr/bin/env python3
"""Generate file format reference documentation from the actual serializers."""

import sys
from pathlib import Path

# Add parent directory to path to import tally
sys.path.insert(0, str(Path(__file__).parent.parent))

import tomli_w

from tally.config import Config, config_to_dict
from tally.domain import Category, Cents, Date, Limitkind, Limits, Record, Recordlist, TemplateEntry
from tally.store.paths import CONFIG_FILENAME, LIMITS_FILENAME, RECORDS_FILENAME

RECORD_FIELDS = [
    ("d", "string", "Transaction date (YYYY-MM-DD)"),
    ("c", "string", "Category path, levels separated by '/'"),
    ("a", "integer", "Amount in cents (negative for spending)"),
    ("n", "string", "Optional note; omitted when empty"),
]

CONFIG_KEYS = [
    ("first_index_in_date", "integer", "Index shown for the first transaction of a date"),
    ("lim_account_type", "string", "Default account type for 'lim': 'rrsp' or 'tfsa'"),
    ("unsigned_is_negative", "boolean", "Treat amounts typed without a sign as spending"),
    ("use_colored_output", "boolean", "Colour reports with ANSI codes"),
    ("use_unicode_symbols", "boolean", "Draw trees and charts with box-drawing characters"),
    ("templates", "table", "Named lists of {category, amount} entries for 'logt'"),
]


def sample_records() -> Recordlist:
    return Recordlist(
        [
            Record(Date(2015, 3, 30), Category("food/groceries"), Cents(-4599)),
            Record(Date(2015, 3, 30), Category("salary"), Cents(250000), "March"),
        ]
    )


def sample_limits() -> Limits:
    return Limits({2014: Cents(550000), 2015: Cents(1000000)})


def sample_config() -> Config:
    return Config(
        lim_account_type=Limitkind.TFSA,
        templates={"rent": [TemplateEntry(Category("housing/rent"), Cents(-120000))]},
    )


def generate_field_table(header: str, rows: list[tuple[str, str, str]]) -> list[str]:
    """Generate a markdown table of fields."""
    lines = [f"| {header} | Type | Description |", "|-----|------|-------------|"]
    lines.extend(f"| `{name}` | {kind} | {desc} |" for name, kind, desc in rows)
    lines.append("")
    return lines


def generate_format_reference() -> str:
    """Generate complete file format reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# File Format Reference",
        "",
        "A tally repository is a directory holding three plain-text files.",
        "",
        f"## {RECORDS_FILENAME}",
        "",
        "One JSON object per line, sorted by date. Transactions sharing a date",
        "keep the order in which they were logged.",
        "",
    ]
    lines.extend(generate_field_table("Key", RECORD_FIELDS))
    lines.extend(["```json", sample_records().dumps().rstrip("\n"), "```", ""])

    lines.extend(
        [
            f"## {LIMITS_FILENAME}",
            "",
            "A JSON object mapping four-digit years to the contribution limit in cents.",
            "",
            "```json",
            sample_limits().dumps().rstrip("\n"),
            "```",
            "",
            f"## {CONFIG_FILENAME}",
            "",
            "TOML, written by `tally init`. Unknown keys are rejected.",
            "",
        ]
    )
    lines.extend(generate_field_table("Key", CONFIG_KEYS))
    lines.extend(["```toml", tomli_w.dumps(config_to_dict(sample_config())).rstrip("\n"), "```", ""])

    lines.extend(
        [
            "## Currency Storage",
            "",
            "Amounts in the ledger and limits files are integers in cents to prevent floating-point precision errors.",
            "Template amounts in the config are written as formatted strings.",
            "",
            "Examples:",
            f"- {Cents(1050)} is stored as 1050",
            f"- {Cents(-4299)} (spending) is stored as -4299",
            "",
        ]
    )

    return "\n".join(lines)


def main() -> None:
    """Generate and write file format reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "file-formats.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = generate_format_reference()

    output_path.write_text(doc)
    print(f"Generated file format reference at {output_path}")


if __name__ == "__main__":
    main()
