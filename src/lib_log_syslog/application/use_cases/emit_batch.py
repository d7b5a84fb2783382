"""Use case draining one batch of events to the syslog collector.

Purpose
-------
Apply the per-event pipeline (split lines, map severity, format, send) to a
batch in insertion order with best-effort delivery.

Contents
--------
* :class:`BatchResult` - counters describing one drained batch.
* :func:`create_emit_batch` - factory returning the drain callable.

System Role
-----------
Invoked by :class:`lib_log_syslog.adapters.batching.BatchingSyslogSink` once
it has taken ownership of a buffer. A failed line never stops later lines or
events; only configuration errors escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from lib_log_syslog.application.diagnostics import DiagnosticHook, build_diagnostic_emitter
from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.domain.config import ConfigurationError, SinkConfig
from lib_log_syslog.domain.events import LogEvent
from lib_log_syslog.domain.message import DEFAULT_LINE_TERMINATOR, build_syslog_message, split_lines
from lib_log_syslog.domain.syslog import map_severity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchResult:
    """Outcome counters of one drained batch."""

    events: int = 0
    lines_sent: int = 0
    lines_failed: int = 0
    events_failed: int = 0


EmitBatch = Callable[[Sequence[LogEvent]], BatchResult]


def create_emit_batch(
    *,
    config: SinkConfig,
    transport: TransportPort,
    diagnostic: DiagnosticHook = None,
    line_terminator: str = DEFAULT_LINE_TERMINATOR,
) -> EmitBatch:
    """Build the callable that formats and sends a batch of events.

    Parameters
    ----------
    config:
        Frozen sink settings (destination, facility, tag, split policy).
    transport:
        Adapter implementing :class:`TransportPort`.
    diagnostic:
        Optional hook notified about failed lines and skipped events.
    line_terminator:
        Appended to every formatted line.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_syslog.domain.levels import LogLevel
    >>> sent = []
    >>> class Recorder:
    ...     def send(self, host, port, payload, protocol, use_tls=False):
    ...         sent.append(payload)
    ...         return True
    >>> emit = create_emit_batch(
    ...     config=SinkConfig(host="logs", port=514, sender="app", machine_name="box"),
    ...     transport=Recorder(),
    ... )
    >>> event = LogEvent(datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc), LogLevel.ERROR, "a\\nb")
    >>> emit([event]).lines_sent
    2
    >>> [payload.split(b": ", 1)[1] for payload in sent]
    [b'a\\r\\n', b'b\\r\\n']
    """

    emit_diagnostic = build_diagnostic_emitter(diagnostic)

    def _format_event(event: LogEvent) -> list[bytes]:
        severity = map_severity(event.level)
        return [
            build_syslog_message(
                config.facility,
                severity,
                event.timestamp,
                config.machine_name,
                config.sender,
                line,
                line_terminator=line_terminator,
            )
            for line in split_lines(event.message, split_newlines=config.split_newlines)
        ]

    def _send(payload: bytes) -> bool:
        try:
            return transport.send(config.host, config.port, payload, config.protocol, config.use_tls)
        except ConfigurationError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.debug("Transport raised while sending to %s:%s", config.host, config.port, exc_info=exc)
            emit_diagnostic(
                "syslog_send_failed",
                {"host": config.host, "port": config.port, "exception": repr(exc)},
            )
            return False

    def emit_batch(events: Sequence[LogEvent]) -> BatchResult:
        result = BatchResult()
        for event in events:
            result.events += 1
            try:
                payloads = _format_event(event)
            except Exception as exc:  # noqa: BLE001
                result.events_failed += 1
                logger.error("Failed to format log event; skipping it", exc_info=exc)
                emit_diagnostic(
                    "syslog_event_failed",
                    {"logger": event.logger_name, "exception": repr(exc)},
                )
                continue
            for payload in payloads:
                if _send(payload):
                    result.lines_sent += 1
                else:
                    result.lines_failed += 1
        return result

    return emit_batch


__all__ = ["BatchResult", "EmitBatch", "create_emit_batch"]
