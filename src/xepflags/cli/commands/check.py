# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command reporting whether a single option is a recognised tool flag."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import load_config
from ...errors import ConfigError
from ...options import OPTION_HANDLED, is_supported_option
from ..models import COLOR_OPTION, EMOJI_OPTION, ROOT_OPTION
from ..shared import EXIT_FAILURE, EXIT_OK, CLIError, CLILogger, exit_with

OPTION_ARGUMENT = Annotated[str, typer.Argument(metavar="OPTION", help="Single argument to classify.")]


def check_command(
    option: OPTION_ARGUMENT,
    root: ROOT_OPTION = Path("."),
    color: COLOR_OPTION = None,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Exit 0 when OPTION is handled by the flag parser and 1 otherwise."""

    try:
        output = load_config(root.expanduser().resolve()).output
    except ConfigError as exc:
        logger = CLILogger(use_emoji=emoji is not False, use_color=color is not False)
        raise exit_with(logger, CLIError(str(exc))) from exc

    logger = CLILogger(
        use_emoji=output.emoji if emoji is None else emoji,
        use_color=output.color if color is None else color,
    )
    if is_supported_option(option) == OPTION_HANDLED:
        logger.ok(f"{option} is a recognised flag")
        raise typer.Exit(code=EXIT_OK)
    logger.warn(f"{option} is not recognised and will be passed through")
    raise typer.Exit(code=EXIT_FAILURE)


__all__ = ["check_command"]
