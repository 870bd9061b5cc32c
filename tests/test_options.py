# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for splitting argument lists into severity overrides and pass-through args."""

from __future__ import annotations

import logging

import pytest

from xepflags import InvalidOptionsError, ParseResult, Severity, process_args


def test_new_style_flags_last_one_wins() -> None:
    result = process_args(["-Xep:Foo", "-Xep:Bar:WARN", "--other", "-Xep:Foo:OFF"])

    assert dict(result.severity_map) == {"Foo": Severity.OFF, "Bar": Severity.WARN}
    assert result.remaining_args == ("--other",)


def test_legacy_flag_disables_listed_checks() -> None:
    result = process_args(["-Xepdisable:Foo,Bar", "keep"])

    assert dict(result.severity_map) == {"Foo": Severity.OFF, "Bar": Severity.OFF}
    assert result.remaining_args == ("keep",)


def test_later_legacy_flag_replaces_earlier_one() -> None:
    result = process_args(["-Xepdisable:Foo,Bar", "-g", "-Xepdisable:Baz,Foo"])

    assert dict(result.severity_map) == {"Baz": Severity.OFF, "Foo": Severity.OFF}
    assert "Bar" not in result.severity_map
    assert result.remaining_args == ("-g",)


def test_no_flags_passes_everything_through() -> None:
    args = ["-d", "out", "Foo.java", "-d", "-Xlint:all"]

    result = process_args(args)

    assert result.severity_map == {}
    assert result.remaining_args == tuple(args)


@pytest.mark.parametrize("args", [[], None])
def test_empty_input_is_not_an_error(args: list[str] | None) -> None:
    result = process_args(args)

    assert result.severity_map == {}
    assert result.remaining_args == ()


def test_flag_without_severity_requests_default() -> None:
    result = process_args(["-Xep:StringEquality"])

    assert result.severity_map["StringEquality"] is Severity.DEFAULT


def test_flag_without_severity_restores_default_after_off() -> None:
    result = process_args(["-Xep:StringEquality:OFF", "-Xep:StringEquality"])

    assert result.severity_map == {"StringEquality": Severity.DEFAULT}


@pytest.mark.parametrize(
    ("flag", "expected"),
    [
        ("-Xep:Check:OFF", Severity.OFF),
        ("-Xep:Check:WARN", Severity.WARN),
        ("-Xep:Check:ERROR", Severity.ERROR),
        ("-Xep:Check:DEFAULT", Severity.DEFAULT),
    ],
)
def test_explicit_severity_literals(flag: str, expected: Severity) -> None:
    assert process_args([flag]).severity_map == {"Check": expected}


@pytest.mark.parametrize(
    "flag",
    [
        "-Xep:",
        "-Xep:Foo:BOGUS",
        "-Xep:Foo:warn",
        "-Xep:Foo:WARN:extra",
        "-Xep::WARN",
        "-Xep::",
    ],
)
def test_malformed_new_style_flag_raises(flag: str) -> None:
    with pytest.raises(InvalidOptionsError, match="invalid flag") as excinfo:
        process_args(["-g", flag])

    assert str(excinfo.value) == f"invalid flag: {flag}"
    assert excinfo.value.argument == flag


def test_trailing_separator_is_ignored() -> None:
    assert process_args(["-Xep:Foo:"]).severity_map == {"Foo": Severity.DEFAULT}
    assert process_args(["-Xepdisable:Foo,Bar,"]).severity_map == {
        "Foo": Severity.OFF,
        "Bar": Severity.OFF,
    }


def test_empty_legacy_names_are_accepted() -> None:
    assert process_args(["-Xepdisable:"]).severity_map == {"": Severity.OFF}
    assert process_args(["-Xepdisable:,Foo"]).severity_map == {"": Severity.OFF, "Foo": Severity.OFF}


@pytest.mark.parametrize(
    "args",
    [
        ["-Xep:Foo", "-Xepdisable:Bar"],
        ["-Xepdisable:Bar", "-g", "-Xep:Foo:ERROR"],
        ["-Xep:Foo:BOGUS", "-Xepdisable:Bar"],
    ],
)
def test_mixing_styles_raises(args: list[str]) -> None:
    with pytest.raises(InvalidOptionsError, match="cannot mix"):
        process_args(args)


def test_pass_through_preserves_order_and_duplicates() -> None:
    result = process_args(["a", "-Xep:Foo", "b", "a", "-Xep:Bar:ERROR", "b"])

    assert result.remaining_args == ("a", "b", "a", "b")
    assert result.remaining_args_list() == ["a", "b", "a", "b"]


def test_check_names_are_case_sensitive() -> None:
    result = process_args(["-Xep:foo:OFF", "-Xep:Foo:ERROR"])

    assert result.severity_map == {"foo": Severity.OFF, "Foo": Severity.ERROR}


def test_prefix_matching_is_case_sensitive() -> None:
    result = process_args(["-xep:Foo", "-XEP:Foo"])

    assert result.severity_map == {}
    assert result.remaining_args == ("-xep:Foo", "-XEP:Foo")


def test_accepts_one_shot_iterables() -> None:
    result = process_args(iter(["-Xep:Foo:WARN", "keep"]))

    assert result.severity_map == {"Foo": Severity.WARN}
    assert result.remaining_args == ("keep",)


def test_severity_map_is_read_only() -> None:
    result = process_args(["-Xep:Foo"])

    with pytest.raises(TypeError):
        result.severity_map["Bar"] = Severity.OFF  # type: ignore[index]


def test_result_does_not_alias_input() -> None:
    args = ["-Xep:Foo", "keep"]
    result = process_args(args)
    args.append("later")

    assert result.remaining_args == ("keep",)
    mutable = result.remaining_args_list()
    mutable.append("extra")
    assert result.remaining_args == ("keep",)


def test_results_are_independent_between_calls() -> None:
    first = process_args(["-Xep:Foo:OFF"])
    second = process_args(["-Xep:Bar:WARN"])

    assert first.severity_map == {"Foo": Severity.OFF}
    assert second.severity_map == {"Bar": Severity.WARN}
    assert isinstance(first, ParseResult)


def test_every_legacy_flag_logs_its_replacement(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="xepflags.options"):
        process_args(["-Xepdisable:,", "-Xepdisable:Foo"])

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "detected legacy flag style in 2 argument(s)",
        "-Xepdisable:, replaces 0 earlier override(s)",
        "-Xepdisable:Foo replaces 0 earlier override(s)",
    ]


def test_legacy_replacement_log_counts_discarded_overrides(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="xepflags.options"):
        process_args(["-Xepdisable:A,B", "-Xepdisable:C"])

    assert "-Xepdisable:C replaces 2 earlier override(s)" in caplog.messages
