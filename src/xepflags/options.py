# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract per-check severity flags from a compiler argument list.

Two mutually exclusive flag styles are recognised::

    -Xep:<checkName>[:<severity>]                  new style
    -Xepdisable:<checkName>[,<checkName>...]       legacy style

``severity`` is one of ``OFF``, ``WARN`` or ``ERROR``; omitting it requests the
check's built-in level (:attr:`Severity.DEFAULT`). For the new style the last
flag naming a check wins. A legacy flag replaces every override made by an
earlier legacy flag. Arguments that are not tool flags are passed through
untouched and in order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from .errors import InvalidOptionsError
from .severity import Severity, severity_from_token

LOGGER = logging.getLogger(__name__)

FLAG_PREFIX: Final[str] = "-Xep:"
LEGACY_DISABLE_PREFIX: Final[str] = "-Xepdisable:"

_SEVERITY_SEPARATOR: Final[str] = ":"
_LEGACY_NAME_SEPARATOR: Final[str] = ","
_MAX_FLAG_SEGMENTS: Final[int] = 2

# Return values of the compiler option-checker protocol.
OPTION_HANDLED: Final[int] = 0
OPTION_UNSUPPORTED: Final[int] = -1


class FlagStyle(Enum):
    """Flag syntax used by an argument list."""

    LEGACY = "legacy"
    NEW = "new"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Severity overrides and pass-through arguments produced by one parse."""

    severity_map: Mapping[str, Severity]
    remaining_args: tuple[str, ...]

    def remaining_args_list(self) -> list[str]:
        """Return a fresh, mutable copy of the pass-through arguments.

        Returns:
            list[str]: Arguments that were not tool flags, in original order.
        """

        return list(self.remaining_args)


def is_supported_option(option: str) -> int:
    """Report whether ``option`` is a flag handled by this parser.

    Args:
        option: Single command-line argument.

    Returns:
        int: :data:`OPTION_HANDLED` (no further arguments consumed) when the
        option carries either recognised prefix, else :data:`OPTION_UNSUPPORTED`.
    """

    if option.startswith((FLAG_PREFIX, LEGACY_DISABLE_PREFIX)):
        return OPTION_HANDLED
    return OPTION_UNSUPPORTED


def detect_flag_style(args: Iterable[str] | None) -> FlagStyle:
    """Return the flag style used by ``args``.

    Args:
        args: Complete argument list; ``None`` is treated as empty.

    Returns:
        FlagStyle: Style shared by every tool flag, or ``FlagStyle.NONE``.

    Raises:
        InvalidOptionsError: If legacy and new style flags are mixed.
    """

    arguments = tuple(args) if args is not None else ()
    has_legacy = False
    has_new = False
    for arg in arguments:
        if arg.startswith(LEGACY_DISABLE_PREFIX):
            has_legacy = True
        elif arg.startswith(FLAG_PREFIX):
            has_new = True

    if has_legacy and has_new:
        raise InvalidOptionsError(
            f"cannot mix old- and new-style error-prone flags: {list(arguments)}",
        )
    if has_legacy:
        return FlagStyle.LEGACY
    if has_new:
        return FlagStyle.NEW
    return FlagStyle.NONE


def process_args(args: Iterable[str] | None) -> ParseResult:
    """Split ``args`` into severity overrides and pass-through arguments.

    Args:
        args: Command-line arguments in their original order. Any iterable is
            accepted; ``None`` behaves like an empty list.

    Returns:
        ParseResult: Read-only severity map and the remaining arguments.

    Raises:
        InvalidOptionsError: If flag styles are mixed or a new style flag is
            malformed.
    """

    arguments = tuple(args) if args is not None else ()
    style = detect_flag_style(arguments)
    LOGGER.debug("detected %s flag style in %d argument(s)", style.value, len(arguments))

    if style is FlagStyle.LEGACY:
        severities, remaining = _process_legacy(arguments)
    elif style is FlagStyle.NEW:
        severities, remaining = _process_new(arguments)
    else:
        severities, remaining = {}, list(arguments)

    return ParseResult(
        severity_map=MappingProxyType(severities),
        remaining_args=tuple(remaining),
    )


def _process_legacy(arguments: tuple[str, ...]) -> tuple[dict[str, Severity], list[str]]:
    severities: dict[str, Severity] = {}
    remaining: list[str] = []
    for arg in arguments:
        if not arg.startswith(LEGACY_DISABLE_PREFIX):
            remaining.append(arg)
            continue
        names = _split_segments(arg[len(LEGACY_DISABLE_PREFIX) :], _LEGACY_NAME_SEPARATOR)
        LOGGER.debug("%s replaces %d earlier override(s)", arg, len(severities))
        # A later legacy flag discards everything an earlier one disabled.
        severities = dict.fromkeys(names, Severity.OFF)
    return severities, remaining


def _process_new(arguments: tuple[str, ...]) -> tuple[dict[str, Severity], list[str]]:
    severities: dict[str, Severity] = {}
    remaining: list[str] = []
    for arg in arguments:
        if not arg.startswith(FLAG_PREFIX):
            remaining.append(arg)
            continue
        check_name, severity = _parse_new_flag(arg)
        severities[check_name] = severity
    return severities, remaining


def _parse_new_flag(arg: str) -> tuple[str, Severity]:
    """Return the check name and severity encoded in a new style flag.

    Args:
        arg: Argument starting with :data:`FLAG_PREFIX`.

    Returns:
        tuple[str, Severity]: Check name and the requested severity.

    Raises:
        InvalidOptionsError: If the flag has too many segments, no check name,
            or an unknown severity.
    """

    parts = _split_segments(arg[len(FLAG_PREFIX) :], _SEVERITY_SEPARATOR)
    if not parts or len(parts) > _MAX_FLAG_SEGMENTS or not parts[0]:
        raise InvalidOptionsError(f"invalid flag: {arg}", argument=arg)
    if len(parts) == 1:
        return parts[0], Severity.DEFAULT
    severity = severity_from_token(parts[1])
    if severity is None:
        raise InvalidOptionsError(f"invalid flag: {arg}", argument=arg)
    return parts[0], severity


def _split_segments(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` dropping trailing empty segments.

    An empty ``text`` yields a single empty segment, so ``-Xep:`` reports an
    empty check name and ``-Xepdisable:`` disables the empty name.
    """

    if not text:
        return [text]
    parts = text.split(separator)
    while parts and not parts[-1]:
        parts.pop()
    return parts


__all__ = [
    "FLAG_PREFIX",
    "LEGACY_DISABLE_PREFIX",
    "OPTION_HANDLED",
    "OPTION_UNSUPPORTED",
    "FlagStyle",
    "ParseResult",
    "detect_flag_style",
    "is_supported_option",
    "process_args",
]
