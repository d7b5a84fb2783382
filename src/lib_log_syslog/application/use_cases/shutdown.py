"""Shutdown orchestration for the syslog sink.

Purpose
-------
Provide one shutdown routine that stops new events from arriving, then lets
the sink flush what is buffered and release its driver.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lib_log_syslog.application.ports.sink import BatchSinkPort


def create_shutdown(
    *,
    sink: BatchSinkPort | None,
    detach: Sequence[Callable[[], None]] = (),
) -> Callable[[], None]:
    """Return a callable performing the shutdown sequence.

    ``detach`` callbacks run first (e.g. removing a logging handler) so no
    producer can add events while the final flush is in progress.
    """

    def shutdown() -> None:
        """Detach producers, then flush and close the sink."""
        for callback in detach:
            callback()
        if sink is not None:
            sink.shutdown()

    return shutdown


__all__ = ["create_shutdown"]
