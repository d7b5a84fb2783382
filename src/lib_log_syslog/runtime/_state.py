"""Runtime state container and access helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock

from lib_log_syslog.adapters.batching import BatchingSyslogSink
from lib_log_syslog.adapters.handler import SyslogBatchHandler
from lib_log_syslog.domain import LogLevel, SinkConfig


@dataclass(slots=True)
class SyslogRuntime:
    """Aggregate of live collaborators assembled by :func:`init`."""

    config: SinkConfig
    sink: BatchingSyslogSink
    handler: SyslogBatchHandler
    level: LogLevel
    attached_to_root: bool
    shutdown: Callable[[], None]


_STATE: SyslogRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: SyslogRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> SyslogRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_syslog.init() must be called before using the syslog sink")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_syslog.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "SyslogRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
