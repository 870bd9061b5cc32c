# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting parse results to and from JSON-friendly data."""

from __future__ import annotations

import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from .errors import InvalidOptionsError
from .options import ParseResult
from .severity import Severity, severity_from_token

JsonValue: TypeAlias = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
SerializableMapping: TypeAlias = dict[str, JsonValue]

SEVERITIES_KEY = "severities"
REMAINING_ARGS_KEY = "remaining_args"


def serialize_result(result: ParseResult) -> SerializableMapping:
    """Convert a parse result into a JSON-friendly mapping.

    Args:
        result: Parse result to convert.

    Returns:
        SerializableMapping: Severity tokens keyed by check name and the
        pass-through arguments, both in their original order.
    """
    return {
        SEVERITIES_KEY: {name: severity.value for name, severity in result.severity_map.items()},
        REMAINING_ARGS_KEY: list(result.remaining_args),
    }


def dump_result(result: ParseResult, *, indent: int | None = 2) -> str:
    """Return ``result`` rendered as JSON text."""
    return json.dumps(serialize_result(result), indent=indent)


def load_result(payload: Mapping[str, object]) -> ParseResult:
    """Rebuild a :class:`ParseResult` from :func:`serialize_result` output.

    Args:
        payload: Mapping holding ``severities`` and ``remaining_args`` entries.

    Returns:
        ParseResult: Result equivalent to the one that was serialised.

    Raises:
        InvalidOptionsError: If the payload shape or a severity token is invalid.
    """
    raw_severities = payload.get(SEVERITIES_KEY, {})
    raw_remaining = payload.get(REMAINING_ARGS_KEY, [])
    if not isinstance(raw_severities, Mapping) or not isinstance(raw_remaining, list):
        raise InvalidOptionsError("malformed parse result payload")

    severities: dict[str, Severity] = {}
    for name, token in raw_severities.items():
        severity = severity_from_token(token) if isinstance(token, str) else None
        if severity is None:
            raise InvalidOptionsError(f"invalid severity for {name}: {token!r}")
        severities[str(name)] = severity
    return ParseResult(
        severity_map=MappingProxyType(severities),
        remaining_args=tuple(str(arg) for arg in raw_remaining),
    )


__all__ = [
    "REMAINING_ARGS_KEY",
    "SEVERITIES_KEY",
    "JsonValue",
    "SerializableMapping",
    "dump_result",
    "load_result",
    "serialize_result",
]
