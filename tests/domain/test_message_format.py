from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_syslog.domain.message import build_syslog_message, format_timestamp, split_lines
from lib_log_syslog.domain.syslog import SyslogFacility, SyslogSeverity
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_split_lines_yields_each_line_when_enabled() -> None:
    assert split_lines("a\nb\nc", split_newlines=True) == ["a", "b", "c"]


def test_split_lines_keeps_message_whole_when_disabled() -> None:
    assert split_lines("a\nb\nc", split_newlines=False) == ["a\nb\nc"]


@pytest.mark.parametrize(
    "message, expected",
    [
        ("one\r\ntwo", ["one", "two"]),
        ("one\rtwo", ["one", "two"]),
        ("\n\nfirst\n\n\nsecond\n", ["first", "second"]),
        ("single", ["single"]),
        ("", [""]),
        ("\n\r\n", [""]),
    ],
)
def test_split_lines_drops_empty_segments(message: str, expected: list[str]) -> None:
    assert split_lines(message) == expected


def test_split_lines_returns_fresh_list() -> None:
    first = split_lines("a\nb")
    first.append("mutated")
    assert split_lines("a\nb") == ["a", "b"]


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2025, 1, 5, 0, 0, 0), "Jan  5 00:00:00"),
        (datetime(2025, 5, 15, 7, 8, 9), "May 15 07:08:09"),
        (datetime(2025, 12, 31, 23, 59, 59), "Dec 31 23:59:59"),
    ],
)
def test_format_timestamp_uses_fixed_month_table(moment: datetime, expected: str) -> None:
    assert format_timestamp(moment) == expected


def test_format_timestamp_renders_aware_values_in_local_time() -> None:
    moment = datetime(2025, 6, 1, 12, 30, 45, tzinfo=timezone.utc)
    local = moment.astimezone()
    assert format_timestamp(moment) == format_timestamp(local.replace(tzinfo=None))


def test_build_syslog_message_is_byte_exact() -> None:
    payload = build_syslog_message(
        SyslogFacility.LOCAL1,
        SyslogSeverity.INFORMATIONAL,
        datetime(2025, 9, 3, 8, 7, 6),
        "host",
        "app",
        "hello",
    )
    assert payload == b"<142>Sep  3 08:07:06 host app: hello\r\n"


def test_build_syslog_message_honours_line_terminator() -> None:
    payload = build_syslog_message(
        SyslogFacility.USER,
        SyslogSeverity.ERROR,
        datetime(2025, 9, 13, 8, 7, 6),
        "box",
        "svc",
        "failed",
        line_terminator="\n",
    )
    assert payload == b"<11>Sep 13 08:07:06 box svc: failed\n"


def test_build_syslog_message_replaces_non_ascii() -> None:
    payload = build_syslog_message(
        SyslogFacility.LOCAL0,
        SyslogSeverity.WARNING,
        datetime(2025, 9, 13, 8, 7, 6),
        "box",
        "svc",
        "café",
    )
    assert payload.endswith(b"svc: caf?\r\n")
    assert isinstance(payload, bytes)
