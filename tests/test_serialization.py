# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for converting parse results to JSON-friendly data."""

from __future__ import annotations

import json

import pytest

from xepflags import InvalidOptionsError, Severity, process_args
from xepflags.serialization import dump_result, load_result, serialize_result


def test_serialize_result_keeps_argument_order() -> None:
    result = process_args(["-Xep:Zed:ERROR", "--keep", "-Xep:Alpha"])

    payload = serialize_result(result)

    assert payload == {
        "severities": {"Zed": "ERROR", "Alpha": "DEFAULT"},
        "remaining_args": ["--keep"],
    }
    assert list(payload["severities"]) == ["Zed", "Alpha"]


def test_dump_result_emits_json() -> None:
    text = dump_result(process_args(["-Xepdisable:Foo"]), indent=None)

    assert json.loads(text) == {"severities": {"Foo": "OFF"}, "remaining_args": []}


def test_load_result_rebuilds_result() -> None:
    result = load_result({"severities": {"Foo": "WARN"}, "remaining_args": ["x"]})

    assert result.severity_map == {"Foo": Severity.WARN}
    assert result.remaining_args == ("x",)


@pytest.mark.parametrize(
    "payload",
    [
        {"severities": {"Foo": "LOUD"}, "remaining_args": []},
        {"severities": ["Foo"], "remaining_args": []},
        {"severities": {}, "remaining_args": "x"},
    ],
)
def test_load_result_rejects_malformed_payload(payload: dict[str, object]) -> None:
    with pytest.raises(InvalidOptionsError):
        load_result(payload)
