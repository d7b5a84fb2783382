"""Domain event describing one log message handed to the syslog sink.

Purpose
-------
Provide an immutable representation of the events the host framework
delivers. The sink only reads these objects; it never mutates them.

Contents
--------
* :class:`LogEvent` dataclass.
* Utility function ``_ensure_aware`` for timestamp validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event buffered by the batching sink.

    Attributes
    ----------
    timestamp:
        Time of the event in timezone-aware UTC.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        Fully rendered message text, possibly spanning several lines.
    logger_name:
        Logical logger emitting the event (informational only).
    """

    timestamp: datetime
    level: LogLevel
    message: str
    logger_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be a LogLevel")


__all__ = ["LogEvent"]
