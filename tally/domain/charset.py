"""Glyphs and colour codes used when rendering reports."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Charset:
    """Characters used to draw trees and charts.

    The defaults are plain ASCII with no colour.
    """

    dash: str = "-"
    tree_sideways_t: str = "|-- "
    tree_corner: str = "`-- "
    tree_pipe_gap: str = "|   "
    tree_space: str = "    "
    chart_axis: str = "|"
    chart_bar_pos: str = "+"
    chart_bar_neg: str = "-"
    color_prefix_green: str = ""
    color_prefix_yellow: str = ""
    color_prefix_red: str = ""
    color_suffix: str = ""

    def with_unicode(self) -> "Charset":
        return replace(
            self,
            dash="─",
            tree_sideways_t="├── ",
            tree_corner="└── ",
            tree_pipe_gap="│   ",
            tree_space="    ",
            chart_axis="│",
            chart_bar_pos="█",
            chart_bar_neg="█",
        )

    def with_color(self) -> "Charset":
        return replace(
            self,
            color_prefix_green="\x1b[38;2;90;165;90m",
            color_prefix_yellow="\x1b[38;2;165;165;90m",
            color_prefix_red="\x1b[38;2;165;90;90m",
            color_suffix="\x1b[0m",
        )
