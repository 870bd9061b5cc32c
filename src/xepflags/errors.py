# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while processing command-line options."""

from __future__ import annotations


class InvalidOptionsError(ValueError):
    """Raised when tool flags in an argument list cannot be interpreted."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        """Initialise the error with a user-facing message.

        Args:
            message: Human-readable description of the problem.
            argument: Offending argument when a single flag is at fault.
        """

        super().__init__(message)
        self.argument = argument


class ConfigError(RuntimeError):
    """Raised when the ``[tool.xepflags]`` configuration cannot be loaded."""


__all__ = ["ConfigError", "InvalidOptionsError"]
