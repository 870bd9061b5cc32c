# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command listing the severity literals accepted in flags."""

from __future__ import annotations

import typer

from ...severity import USER_SEVERITY_TOKENS, Severity


def severities_command() -> None:
    """List severity literals accepted after ``-Xep:<checkName>:``."""

    for token in USER_SEVERITY_TOKENS:
        typer.echo(token)
    typer.echo(f"({Severity.DEFAULT.value} is implied when no severity is given)")


__all__ = ["severities_command"]
