# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models and the ``[tool.xepflags]`` pyproject loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "xepflags"


class OutputConfig(BaseModel):
    """Configuration for controlling console output."""

    model_config = ConfigDict(validate_assignment=True)

    color: bool = True
    emoji: bool = True
    format: Literal["table", "json"] = "table"


class Config(BaseModel):
    """Top-level configuration for the ``xepflags`` command line."""

    model_config = ConfigDict(validate_assignment=True)

    output: OutputConfig = Field(default_factory=OutputConfig)
    default_flags: list[str] = Field(default_factory=list)


def load_config(root: Path) -> Config:
    """Load configuration from ``root/pyproject.toml``.

    Args:
        root: Directory containing the project's ``pyproject.toml``.

    Returns:
        Config: Parsed configuration, or defaults when no section exists.

    Raises:
        ConfigError: If the document is not valid TOML or the section fails
            validation.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return Config()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return Config()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return Config()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    try:
        return Config.model_validate(_normalise_keys(section))
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{PYPROJECT_SECTION_KEY}] in {path}: {exc}") from exc


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``payload`` with TOML-style dashed keys converted to underscores."""

    normalised: dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, Mapping):
            value = _normalise_keys(value)
        normalised[key.replace("-", "_")] = value
    return normalised


__all__ = [
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "Config",
    "OutputConfig",
    "load_config",
]
