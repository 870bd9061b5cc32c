# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for parse results."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..logging import section
from ..options import ParseResult
from ..severity import Severity

SEVERITY_SECTION_TITLE = "Severity overrides"
REMAINING_SECTION_TITLE = "Pass-through arguments"

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.DEFAULT: "cyan",
    Severity.OFF: "dim",
    Severity.WARN: "yellow",
    Severity.ERROR: "bold red",
}


def build_severity_table(result: ParseResult) -> Table:
    """Return a rich table listing each check with its requested severity.

    Args:
        result: Parse result whose severity overrides are rendered.

    Returns:
        Table: Rich table in argument order, one row per check.
    """

    table = Table(box=box.SIMPLE)
    table.add_column("Check", style="bold")
    table.add_column("Severity")
    for name, severity in result.severity_map.items():
        table.add_row(Text(name or "''"), Text(severity.value, style=_SEVERITY_STYLES[severity]))
    return table


def build_remaining_table(result: ParseResult) -> Table:
    """Return a rich table listing pass-through arguments in order."""

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Argument", overflow="fold")
    for index, arg in enumerate(result.remaining_args, start=1):
        table.add_row(str(index), Text(arg))
    return table


def render_result(console: Console, result: ParseResult, *, use_color: bool) -> None:
    """Print the overrides and pass-through arguments of ``result`` under section headers.

    Args:
        console: Console receiving the tables.
        result: Parse result to render.
        use_color: Whether section headers are drawn as coloured rules.
    """

    section(SEVERITY_SECTION_TITLE, use_color=use_color)
    if result.severity_map:
        console.print(build_severity_table(result))
    else:
        console.print("No severity overrides.")
    section(REMAINING_SECTION_TITLE, use_color=use_color)
    if result.remaining_args:
        console.print(build_remaining_table(result))
    else:
        console.print("No pass-through arguments.")


__all__ = [
    "REMAINING_SECTION_TITLE",
    "SEVERITY_SECTION_TITLE",
    "build_remaining_table",
    "build_severity_table",
    "render_result",
]
