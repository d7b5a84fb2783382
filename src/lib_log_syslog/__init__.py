"""Batch log events and forward them to a remote syslog collector.

The stable surface re-exports the domain values hosts construct
(:class:`LogEvent`, :class:`SinkConfig`, ...), the batching sink and its stdlib
:mod:`logging` handler, and the runtime façade (:func:`init`,
:func:`shutdown`).
"""

from __future__ import annotations

from .adapters import (
    BatchingSyslogSink,
    ManualScheduler,
    SinkState,
    SinkStats,
    SocketTransport,
    SyslogBatchHandler,
    ThreadScheduler,
)
from .domain import (
    ConfigurationError,
    LogEvent,
    LogLevel,
    SinkConfig,
    SyslogFacility,
    SyslogSeverity,
    TransportProtocol,
    UnsupportedProtocolError,
    build_syslog_message,
    map_severity,
    split_lines,
)
from .runtime import RuntimeConfig, get_sink, init, inspect_runtime, shutdown

__all__ = [
    "BatchingSyslogSink",
    "ConfigurationError",
    "LogEvent",
    "LogLevel",
    "ManualScheduler",
    "RuntimeConfig",
    "SinkConfig",
    "SinkState",
    "SinkStats",
    "SocketTransport",
    "SyslogBatchHandler",
    "SyslogFacility",
    "SyslogSeverity",
    "ThreadScheduler",
    "TransportProtocol",
    "UnsupportedProtocolError",
    "build_syslog_message",
    "get_sink",
    "init",
    "inspect_runtime",
    "map_severity",
    "shutdown",
    "split_lines",
]
