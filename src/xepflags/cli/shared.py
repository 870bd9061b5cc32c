# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, verbosity)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INVALID_OPTIONS: Final[int] = 2


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def configure_verbose_logging(verbose: bool) -> None:
    """Route library debug records through Rich when ``verbose`` is set."""

    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def exit_with(logger: CLILogger, error: CLIError) -> typer.Exit:
    """Report ``error`` and return the :class:`typer.Exit` the caller should raise."""

    logger.fail(str(error))
    return typer.Exit(code=error.exit_code)


__all__ = [
    "EXIT_FAILURE",
    "EXIT_INVALID_OPTIONS",
    "EXIT_OK",
    "CLIError",
    "CLILogger",
    "configure_verbose_logging",
    "exit_with",
]
