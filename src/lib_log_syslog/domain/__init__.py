"""Domain entities and value objects used by the syslog sink."""

from __future__ import annotations

from .config import ConfigurationError, SinkConfig, TransportProtocol, UnsupportedProtocolError
from .events import LogEvent
from .levels import LogLevel
from .message import build_syslog_message, format_timestamp, split_lines
from .syslog import SyslogFacility, SyslogSeverity, map_severity, priority

__all__ = [
    "ConfigurationError",
    "LogEvent",
    "LogLevel",
    "SinkConfig",
    "SyslogFacility",
    "SyslogSeverity",
    "TransportProtocol",
    "UnsupportedProtocolError",
    "build_syslog_message",
    "format_timestamp",
    "map_severity",
    "priority",
    "split_lines",
]
