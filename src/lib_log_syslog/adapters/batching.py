"""Batching sink buffering log events and flushing them to syslog.

Purpose
-------
Decouple the producer's emission rate from network IO: events are appended to
an in-memory buffer and drained either when the buffer reaches the configured
batch size or when the flush interval elapses.

Contents
--------
* :class:`SinkState` - lifecycle states.
* :class:`SinkStats` - read-only counters snapshot.
* :class:`BatchingSyslogSink` - concrete :class:`BatchSinkPort`.

System Role
-----------
The entry point host frameworks talk to. Producers only ever hold the buffer
lock long enough to append; a flush swaps the buffer under that lock and then
formats and sends outside of it, guarded by a separate lock so flushes never
overlap.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from types import TracebackType

from lib_log_syslog.application.diagnostics import DiagnosticHook, build_diagnostic_emitter
from lib_log_syslog.application.ports.scheduler import SchedulerPort
from lib_log_syslog.application.ports.sink import BatchSinkPort
from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.application.use_cases.emit_batch import BatchResult, create_emit_batch
from lib_log_syslog.domain.config import SinkConfig
from lib_log_syslog.domain.events import LogEvent
from lib_log_syslog.domain.message import DEFAULT_LINE_TERMINATOR

from .scheduler import ThreadScheduler
from .transport import SocketTransport

LOGGER = logging.getLogger(__name__)


class SinkState(Enum):
    """Lifecycle of a :class:`BatchingSyslogSink`."""

    IDLE = "idle"
    ACCUMULATING = "accumulating"
    FLUSHING = "flushing"
    SHUTDOWN = "shutdown"


@dataclass(frozen=True, slots=True)
class SinkStats:
    """Counters accumulated since the sink was created."""

    accepted: int
    buffered: int
    flushes: int
    lines_sent: int
    lines_failed: int
    events_failed: int


class BatchingSyslogSink(BatchSinkPort):
    """Buffer events and forward them to a syslog collector in batches.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_syslog.adapters.scheduler import ManualScheduler
    >>> from lib_log_syslog.domain.levels import LogLevel
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.payloads = []
    ...     def send(self, host, port, payload, protocol, use_tls=False):
    ...         self.payloads.append(payload)
    ...         return True
    >>> transport, scheduler = Recorder(), ManualScheduler()
    >>> config = SinkConfig(host="logs", port=514, batch_size=2, sender="app", machine_name="box")
    >>> sink = BatchingSyslogSink(config, transport=transport, scheduler=scheduler)
    >>> event = LogEvent(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), LogLevel.INFO, "msg")
    >>> sink.accept(event)
    >>> len(transport.payloads), sink.state.value
    (0, 'accumulating')
    >>> sink.accept(event)
    >>> len(transport.payloads), sink.state.value
    (2, 'idle')
    >>> sink.shutdown()
    >>> sink.state.value
    'shutdown'
    """

    def __init__(
        self,
        config: SinkConfig,
        *,
        transport: TransportPort | None = None,
        scheduler: SchedulerPort | None = None,
        diagnostic: DiagnosticHook = None,
        line_terminator: str = DEFAULT_LINE_TERMINATOR,
    ) -> None:
        """Create a sink; the scheduler starts on :meth:`start` or the first event.

        Parameters
        ----------
        config:
            Frozen sink settings.
        transport:
            Delivery adapter; defaults to :class:`SocketTransport` using
            ``config.send_timeout``.
        scheduler:
            Flush driver; defaults to :class:`ThreadScheduler`.
        diagnostic:
            Optional hook receiving failure and flush notifications.
        line_terminator:
            Appended to every formatted syslog line.
        """
        self._config = config
        if transport is None:
            transport = SocketTransport(timeout=config.send_timeout, diagnostic=diagnostic)
        self._scheduler = scheduler if scheduler is not None else ThreadScheduler(diagnostic=diagnostic)
        self._emit_batch = create_emit_batch(
            config=config,
            transport=transport,
            diagnostic=diagnostic,
            line_terminator=line_terminator,
        )
        self._emit_diagnostic = build_diagnostic_emitter(diagnostic)
        self._buffer: list[LogEvent] = []
        self._buffer_lock = threading.Lock()
        self._flush_lock = threading.Lock()
        self._flushing = False
        self._started = False
        self._closed = False
        self._accepted = 0
        self._flushes = 0
        self._lines_sent = 0
        self._lines_failed = 0
        self._events_failed = 0

    @property
    def config(self) -> SinkConfig:
        return self._config

    @property
    def state(self) -> SinkState:
        """Return the current lifecycle state."""
        with self._buffer_lock:
            if self._closed:
                return SinkState.SHUTDOWN
            if self._flushing:
                return SinkState.FLUSHING
            return SinkState.ACCUMULATING if self._buffer else SinkState.IDLE

    @property
    def stats(self) -> SinkStats:
        """Return a snapshot of the sink's counters."""
        with self._buffer_lock:
            return SinkStats(
                accepted=self._accepted,
                buffered=len(self._buffer),
                flushes=self._flushes,
                lines_sent=self._lines_sent,
                lines_failed=self._lines_failed,
                events_failed=self._events_failed,
            )

    def start(self) -> None:
        """Start the flush scheduler if it is not already running."""
        with self._buffer_lock:
            if self._closed:
                raise RuntimeError("Syslog sink has been shut down")
            if self._started:
                return
            self._started = True
        self._scheduler.start(self._scheduled_flush, self._config.flush_interval)

    def accept(self, event: LogEvent) -> None:
        """Append ``event`` to the buffer, waking the scheduler at the batch size."""
        if not self._started:
            self.start()
        with self._buffer_lock:
            if self._closed:
                raise RuntimeError("Syslog sink has been shut down")
            self._buffer.append(event)
            self._accepted += 1
            threshold_reached = len(self._buffer) >= self._config.batch_size
        if threshold_reached:
            self._scheduler.wake()

    def emit_batch(self, events: Iterable[LogEvent]) -> None:
        """Accept every event of ``events`` in order."""
        for event in events:
            self.accept(event)

    def flush(self) -> BatchResult:
        """Drain the current buffer synchronously and return its counters.

        An empty buffer makes this a no-op. Configuration errors raised by
        the transport propagate; every other failure is counted.
        """
        with self._flush_lock:
            with self._buffer_lock:
                batch, self._buffer = self._buffer, []
                if not batch:
                    return BatchResult()
                self._flushing = True
            try:
                result = self._emit_batch(batch)
            finally:
                with self._buffer_lock:
                    self._flushing = False
            with self._buffer_lock:
                self._flushes += 1
                self._lines_sent += result.lines_sent
                self._lines_failed += result.lines_failed
                self._events_failed += result.events_failed
        self._emit_diagnostic(
            "syslog_flush",
            {
                "events": result.events,
                "lines_sent": result.lines_sent,
                "lines_failed": result.lines_failed,
                "events_failed": result.events_failed,
            },
        )
        return result

    def shutdown(self, *, timeout: float | None = None) -> None:
        """Stop the scheduler, flush remaining events, and refuse new ones.

        Calling it again is a no-op.
        """
        with self._buffer_lock:
            if self._closed:
                return
            self._closed = True
            started = self._started
        if started:
            try:
                self._scheduler.stop(timeout=timeout)
            except RuntimeError as exc:
                LOGGER.error("Syslog flush scheduler did not stop cleanly; flushing anyway", exc_info=exc)
        self.flush()

    def _scheduled_flush(self) -> None:
        self.flush()

    def __enter__(self) -> "BatchingSyslogSink":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.shutdown()


__all__ = ["BatchingSyslogSink", "SinkState", "SinkStats"]
