"""Flush drivers deciding when the batching sink drains its buffer.

Purpose
-------
Run the sink's flush callback on a fixed interval and whenever the size
threshold asks for an early flush, without blocking producers.

Contents
--------
* :class:`ThreadScheduler` - background daemon thread driver.
* :class:`ManualScheduler` - inline driver for hosts that own the timer
  (and for deterministic tests).

System Role
-----------
Injected into :class:`~lib_log_syslog.adapters.batching.BatchingSyslogSink`;
the sink never creates hidden timers of its own.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from lib_log_syslog.application.diagnostics import DiagnosticHook, build_diagnostic_emitter
from lib_log_syslog.application.ports.scheduler import SchedulerPort

LOGGER = logging.getLogger(__name__)


class ThreadScheduler(SchedulerPort):
    """Invoke the callback on a dedicated thread.

    A size-triggered :meth:`wake` and an expiring interval that race each
    other collapse into a single callback because both only set the same
    event, and the callback never runs on two threads at once.

    Examples
    --------
    >>> flushed = threading.Event()
    >>> scheduler = ThreadScheduler()
    >>> scheduler.start(flushed.set, interval=60)
    >>> scheduler.wake()
    >>> flushed.wait(1.0)
    True
    >>> scheduler.stop()
    """

    def __init__(
        self,
        *,
        name: str = "lib-log-syslog-flush",
        stop_timeout: float | None = 5.0,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        """Create an idle scheduler.

        Parameters
        ----------
        name:
            Thread name, visible in debuggers and thread dumps.
        stop_timeout:
            Default deadline (seconds) for :meth:`stop` to wait for the
            thread; ``None`` waits indefinitely.
        diagnostic:
            Optional hook receiving ``syslog_flush_error`` and
            ``syslog_scheduler_stop_timeout`` notifications.
        """
        self._name = name
        self._stop_timeout = stop_timeout
        self._emit_diagnostic = build_diagnostic_emitter(diagnostic)
        self._thread: threading.Thread | None = None
        self._wake_event = threading.Event()
        self._stop_event = threading.Event()
        self._callback: Callable[[], None] | None = None
        self._interval = 1.0

    @property
    def running(self) -> bool:
        """Return ``True`` while the driver thread is alive."""

        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: Callable[[], None], interval: float) -> None:
        """Start the driver thread if it is not already running."""
        if self.running:
            return
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._callback = callback
        self._interval = interval
        self._stop_event.clear()
        self._wake_event.clear()
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def wake(self) -> None:
        """Ask the driver to run the callback as soon as possible."""
        self._wake_event.set()

    def stop(self, *, timeout: float | None = None) -> None:
        """Stop the driver thread.

        A callback already in progress is allowed to finish. Raises
        :class:`RuntimeError` when the thread does not exit in time.
        """
        thread = self._thread
        if thread is None:
            return
        effective_timeout = timeout if timeout is not None else self._stop_timeout
        self._stop_event.set()
        self._wake_event.set()
        if thread is not threading.current_thread():
            thread.join(effective_timeout)
        if thread.is_alive() and thread is not threading.current_thread():
            self._emit_diagnostic("syslog_scheduler_stop_timeout", {"timeout": effective_timeout})
            raise RuntimeError("Flush scheduler failed to stop within the allotted timeout")
        self._thread = None

    def _run(self) -> None:
        """Wait for the interval or a wake-up, then run the callback."""
        while not self._stop_event.is_set():
            self._wake_event.wait(self._interval)
            self._wake_event.clear()
            if self._stop_event.is_set():
                break
            callback = self._callback
            if callback is None:
                continue
            try:
                callback()
            except Exception as exc:  # noqa: BLE001
                LOGGER.error("Scheduled syslog flush raised an exception; continuing", exc_info=exc)
                self._emit_diagnostic("syslog_flush_error", {"exception": repr(exc)})


class ManualScheduler(SchedulerPort):
    """Run the callback inline, only when asked.

    Hosts that already own a timer call :meth:`tick` from it; size triggers
    flush synchronously on the producer's thread through :meth:`wake`.

    Examples
    --------
    >>> calls = []
    >>> scheduler = ManualScheduler()
    >>> scheduler.start(lambda: calls.append("flush"), interval=1.0)
    >>> scheduler.wake()
    >>> scheduler.tick()
    >>> calls
    ['flush', 'flush']
    """

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.interval: float | None = None
        self.wakes = 0
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None], interval: float) -> None:
        self._callback = callback
        self.interval = interval

    def wake(self) -> None:
        self.wakes += 1
        if self._callback is not None:
            self._callback()

    def tick(self) -> None:
        """Signal that one flush interval has elapsed."""
        self.ticks += 1
        if self._callback is not None:
            self._callback()

    def stop(self, *, timeout: float | None = None) -> None:  # noqa: ARG002 - nothing to wait for
        self._callback = None


__all__ = ["ManualScheduler", "ThreadScheduler"]
