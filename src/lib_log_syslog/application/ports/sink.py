"""Port exposed to the host framework by the batching sink."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from lib_log_syslog.domain.events import LogEvent


@runtime_checkable
class BatchSinkPort(Protocol):
    """Accept events for buffering and expose the lifecycle hooks."""

    def accept(self, event: LogEvent) -> None:
        """Buffer ``event`` for the next flush."""

    def emit_batch(self, events: Iterable[LogEvent]) -> None:
        """Buffer every event of ``events`` in order."""

    def flush(self) -> None:
        """Drain the buffer synchronously."""

    def shutdown(self) -> None:
        """Flush what is left and release resources."""


__all__ = ["BatchSinkPort"]
