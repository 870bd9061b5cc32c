# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from xepflags.console import get_console_manager


@pytest.fixture(autouse=True)
def _fresh_consoles() -> Iterator[None]:
    """Drop cached Rich consoles so each test sees its own stdout."""
    get_console_manager().clear()
    yield
    get_console_manager().clear()


@pytest.fixture
def runner() -> CliRunner:
    """Return a Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def write_pyproject(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing ``pyproject.toml`` content under ``tmp_path``."""

    def _write(body: str) -> Path:
        path = tmp_path / "pyproject.toml"
        path.write_text(body.strip() + "\n", encoding="utf-8")
        return tmp_path

    return _write
