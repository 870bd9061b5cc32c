# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command that parses an argument list and reports its severity flags."""

from __future__ import annotations

from pathlib import Path

from ...config import load_config
from ...console import get_console_manager
from ...errors import ConfigError, InvalidOptionsError
from ...options import process_args
from ...serialization import dump_result
from ..models import (
    ARGS_ARGUMENT,
    COLOR_OPTION,
    EMOJI_OPTION,
    JSON_OPTION,
    ROOT_OPTION,
    VERBOSE_OPTION,
    build_parse_options,
)
from ..rendering import render_result
from ..shared import EXIT_INVALID_OPTIONS, CLIError, CLILogger, configure_verbose_logging, exit_with


def parse_command(
    args: ARGS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    as_json: JSON_OPTION = False,
    color: COLOR_OPTION = None,
    emoji: EMOJI_OPTION = None,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Split ARGS into per-check severity overrides and pass-through arguments.

    Args:
        args: Arguments to parse, typically passed after ``--``.
        root: Directory whose ``pyproject.toml`` supplies configuration.
        as_json: Emit the result as JSON instead of tables.
        color: Explicit colour preference.
        emoji: Explicit emoji preference.
        verbose: Log parser decisions to stderr.

    Raises:
        typer.Exit: With status 2 when the flags are invalid, 1 when the
            configuration cannot be loaded.
    """

    resolved_root = root.expanduser().resolve()
    try:
        config = load_config(resolved_root)
    except ConfigError as exc:
        logger = CLILogger(use_emoji=emoji is not False, use_color=color is not False)
        raise exit_with(logger, CLIError(str(exc))) from exc

    options = build_parse_options(
        config,
        args=args,
        root=resolved_root,
        as_json=as_json,
        color=color,
        emoji=emoji,
        verbose=verbose,
    )
    configure_verbose_logging(options.verbose)
    logger = CLILogger(use_emoji=options.emoji, use_color=options.color)

    try:
        result = process_args(options.args)
    except InvalidOptionsError as exc:
        raise exit_with(logger, CLIError(str(exc), exit_code=EXIT_INVALID_OPTIONS)) from exc

    if options.as_json:
        logger.echo(dump_result(result))
        return
    if config.default_flags:
        logger.info(f"Prepended {len(config.default_flags)} configured argument(s) from pyproject.toml")
    console = get_console_manager().get(color=options.color, emoji=options.emoji)
    render_result(console, result, use_color=options.color)


__all__ = ["parse_command"]
