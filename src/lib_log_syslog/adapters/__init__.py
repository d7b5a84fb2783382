"""Adapter implementations for the syslog sink's ports."""

from __future__ import annotations

from .batching import BatchingSyslogSink, SinkState, SinkStats
from .handler import SyslogBatchHandler
from .scheduler import ManualScheduler, ThreadScheduler
from .transport import SocketTransport

__all__ = [
    "BatchingSyslogSink",
    "ManualScheduler",
    "SinkState",
    "SinkStats",
    "SocketTransport",
    "SyslogBatchHandler",
    "ThreadScheduler",
]
