from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from typing import Any

import pytest

from lib_log_syslog import runtime
from lib_log_syslog.adapters.handler import SyslogBatchHandler
from lib_log_syslog.domain.events import LogEvent
from lib_log_syslog.domain.levels import LogLevel
from tests._fakes import RecordingTransport


@pytest.fixture
def event_factory() -> Callable[..., LogEvent]:
    def factory(message: str = "hello", level: LogLevel = LogLevel.INFO, **overrides: Any) -> LogEvent:
        payload: dict[str, Any] = {
            "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
            "level": level,
            "message": message,
            "logger_name": "tests",
        }
        payload.update(overrides)
        return LogEvent(**payload)

    return factory


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def _reset_runtime() -> Iterator[None]:
    yield
    runtime.shutdown()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, SyslogBatchHandler):
            root.removeHandler(handler)
