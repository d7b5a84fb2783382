"""Port for the driver that decides when the sink flushes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class SchedulerPort(Protocol):
    """Invoke a flush callback periodically and on demand."""

    def start(self, callback: Callable[[], None], interval: float) -> None:
        """Begin calling ``callback`` every ``interval`` seconds."""

    def wake(self) -> None:
        """Request an early call of the callback (size trigger)."""

    def stop(self, *, timeout: float | None = None) -> None:
        """Stop calling the callback and release the driver."""


__all__ = ["SchedulerPort"]
