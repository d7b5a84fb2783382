from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_syslog.domain.events import LogEvent
from lib_log_syslog.domain.levels import LogLevel
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_timestamp_is_normalised_to_utc() -> None:
    tz = timezone(timedelta(hours=2))
    event = LogEvent(datetime(2025, 9, 23, 14, 0, tzinfo=tz), LogLevel.INFO, "msg")
    assert event.timestamp == datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)
    assert event.timestamp.tzinfo is timezone.utc


def test_naive_timestamp_is_rejected() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        LogEvent(datetime(2025, 9, 23, 12, 0), LogLevel.INFO, "msg")


def test_level_must_be_log_level() -> None:
    with pytest.raises(TypeError):
        LogEvent(datetime(2025, 9, 23, tzinfo=timezone.utc), 20, "msg")  # type: ignore[arg-type]


def test_events_are_immutable(event_factory) -> None:
    event = event_factory()
    with pytest.raises(AttributeError):
        event.message = "changed"  # type: ignore[misc]


def test_empty_message_is_allowed(event_factory) -> None:
    assert event_factory("").message == ""
