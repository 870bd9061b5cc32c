# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line severity flag parsing for compiler-hosted checks."""

from __future__ import annotations

from importlib import metadata

from .errors import InvalidOptionsError
from .options import (
    FLAG_PREFIX,
    LEGACY_DISABLE_PREFIX,
    OPTION_HANDLED,
    OPTION_UNSUPPORTED,
    FlagStyle,
    ParseResult,
    detect_flag_style,
    is_supported_option,
    process_args,
)
from .severity import Severity

__all__ = [
    "FLAG_PREFIX",
    "LEGACY_DISABLE_PREFIX",
    "OPTION_HANDLED",
    "OPTION_UNSUPPORTED",
    "FlagStyle",
    "InvalidOptionsError",
    "ParseResult",
    "Severity",
    "__version__",
    "detect_flag_style",
    "is_supported_option",
    "process_args",
]

try:
    __version__ = metadata.version("xepflags")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
