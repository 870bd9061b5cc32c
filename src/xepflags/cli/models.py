# SPDX-License-Identifier: MIT
"""Data structures for the parse CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import Config

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", help="Directory holding pyproject.toml."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit the parse result as JSON."),
]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Force or disable coloured output."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Force or disable emoji output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", help="Log parser decisions to stderr."),
]
ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="[ARGS]...", help="Arguments to parse; put them after '--'."),
]


@dataclass(slots=True)
class ParseCLIOptions:
    """Normalised CLI inputs for the parse command."""

    args: list[str]
    root: Path
    as_json: bool
    color: bool
    emoji: bool
    verbose: bool


def build_parse_options(
    config: Config,
    *,
    args: list[str] | None,
    root: Path,
    as_json: bool,
    color: bool | None,
    emoji: bool | None,
    verbose: bool,
) -> ParseCLIOptions:
    """Merge command-line values over the loaded configuration.

    Args:
        config: Configuration loaded from ``pyproject.toml``.
        args: Arguments supplied on the command line.
        root: Resolved project root.
        as_json: ``True`` when ``--json`` was passed.
        color: Explicit colour preference, ``None`` to defer to configuration.
        emoji: Explicit emoji preference, ``None`` to defer to configuration.
        verbose: ``True`` when debug logging was requested.

    Returns:
        ParseCLIOptions: Effective options with configured default flags
        placed ahead of the command-line arguments.
    """

    output = config.output
    return ParseCLIOptions(
        args=[*config.default_flags, *(args or [])],
        root=root,
        as_json=as_json or output.format == "json",
        color=output.color if color is None else color,
        emoji=output.emoji if emoji is None else emoji,
        verbose=verbose,
    )


__all__ = [
    "ARGS_ARGUMENT",
    "COLOR_OPTION",
    "EMOJI_OPTION",
    "JSON_OPTION",
    "ROOT_OPTION",
    "VERBOSE_OPTION",
    "ParseCLIOptions",
    "build_parse_options",
]
