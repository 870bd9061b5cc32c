# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity levels a command-line flag may request for a check."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity requested for a check.

    ``DEFAULT`` defers to whatever level the check declares for itself; it is
    distinct from the check never being mentioned at all.
    """

    DEFAULT = "DEFAULT"
    OFF = "OFF"
    WARN = "WARN"
    ERROR = "ERROR"


SEVERITY_TOKENS: Final[tuple[str, ...]] = tuple(member.value for member in Severity)

# Tokens users are expected to write; DEFAULT is implied by omitting the suffix.
USER_SEVERITY_TOKENS: Final[tuple[str, ...]] = (
    Severity.OFF.value,
    Severity.WARN.value,
    Severity.ERROR.value,
)


def severity_from_token(token: str) -> Severity | None:
    """Return the severity spelled exactly as ``token``.

    Args:
        token: Literal severity text taken from a flag, matched case-sensitively.

    Returns:
        Severity | None: Matching severity, or ``None`` for unknown tokens.
    """
    try:
        return Severity(token)
    except ValueError:
        return None


__all__ = [
    "SEVERITY_TOKENS",
    "USER_SEVERITY_TOKENS",
    "Severity",
    "severity_from_token",
]
