"""Bridge from the stdlib :mod:`logging` framework into the batching sink.

Purpose
-------
Let applications keep calling ``logging.getLogger(...).info(...)`` while the
records travel to syslog through :class:`BatchingSyslogSink`.

Contents
--------
* :class:`SyslogBatchHandler` - :class:`logging.Handler` feeding a sink.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from lib_log_syslog.application.ports.sink import BatchSinkPort
from lib_log_syslog.domain.events import LogEvent
from lib_log_syslog.domain.levels import LogLevel

_OWN_LOGGER_PREFIX = "lib_log_syslog"


class _ForeignRecordFilter(logging.Filter):
    """Reject records emitted by this package's own loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        return not (name == _OWN_LOGGER_PREFIX or name.startswith(_OWN_LOGGER_PREFIX + "."))


class SyslogBatchHandler(logging.Handler):
    """Convert log records into :class:`LogEvent` objects and buffer them.

    Records emitted by this package's own loggers are filtered out before
    :meth:`logging.Handler.handle` takes the handler lock, so failures
    reported while flushing never feed back into the sink or wait on a
    thread that is flushing through this handler.

    Examples
    --------
    >>> class Collecting:
    ...     def __init__(self):
    ...         self.events = []
    ...     def accept(self, event):
    ...         self.events.append(event)
    ...     def emit_batch(self, events):
    ...         self.events.extend(events)
    ...     def flush(self):
    ...         pass
    ...     def shutdown(self):
    ...         pass
    >>> sink = Collecting()
    >>> handler = SyslogBatchHandler(sink)
    >>> record = logging.LogRecord("app", logging.WARNING, __file__, 1, "disk %s%%", (93,), None)
    >>> handler.handle(record)
    True
    >>> sink.events[0].message, sink.events[0].level.name
    ('disk 93%', 'WARNING')
    """

    def __init__(self, sink: BatchSinkPort, level: int = logging.NOTSET, *, close_sink: bool = True) -> None:
        """Attach the handler to ``sink``.

        ``close_sink`` controls whether :meth:`close` shuts the sink down.
        """
        super().__init__(level)
        self._sink = sink
        self._close_sink = close_sink
        self.addFilter(_ForeignRecordFilter())

    @property
    def sink(self) -> BatchSinkPort:
        return self._sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            event = LogEvent(
                timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
                level=LogLevel.from_python_level(record.levelno),
                message=self.format(record),
                logger_name=record.name,
            )
            self._sink.accept(event)
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def flush(self) -> None:
        """Drain the sink's buffer synchronously.

        The handler lock is not taken; the sink serialises flushes itself and
        producers keep appending while the drain does network IO.
        """
        self._sink.flush()

    def close(self) -> None:
        """Shut the sink down (final flush) when this handler owns it."""
        try:
            if self._close_sink:
                self._sink.shutdown()
        finally:
            super().close()


__all__ = ["SyslogBatchHandler"]
