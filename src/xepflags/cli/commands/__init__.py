# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command registration for the xepflags CLI."""

from __future__ import annotations

import typer

from .check import check_command
from .parse import parse_command
from .severities import severities_command

# Tool flags look like unknown short options to click, so let them through.
_PASSTHROUGH_CONTEXT = {"ignore_unknown_options": True}


def register_commands(app: typer.Typer) -> None:
    """Register every xepflags command on ``app``."""

    app.command("parse", context_settings=_PASSTHROUGH_CONTEXT)(parse_command)
    app.command("check", context_settings=_PASSTHROUGH_CONTEXT)(check_command)
    app.command("severities")(severities_command)


__all__ = ["register_commands"]
