"""Runtime façade wiring the syslog sink into the host's logging setup.

Purpose
-------
Expose a stable entry point (``init``, ``get_sink``, ``inspect_runtime``,
``shutdown``) so host applications do not assemble the domain, use cases and
adapters themselves.

Contents
--------
* ``init`` - composition root building the sink and stdlib handler.
* ``get_sink`` / ``inspect_runtime`` - accessors for the live runtime.
* ``shutdown`` - deterministic teardown (detach, final flush, release).

System Role
-----------
Outer shell of the package: configuration inputs and environment overrides
are resolved here into an immutable :class:`SinkConfig`; everything inside
depends only on that value object and the ports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from lib_log_syslog.adapters.batching import BatchingSyslogSink, SinkStats
from lib_log_syslog.adapters.handler import SyslogBatchHandler
from lib_log_syslog.application.ports.scheduler import SchedulerPort
from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.application.use_cases.shutdown import create_shutdown
from lib_log_syslog.domain import LogLevel, SinkConfig

from ._settings import RuntimeConfig, RuntimeSettings, build_runtime_settings, coerce_level
from ._state import SyslogRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active runtime."""

    config: SinkConfig
    level: LogLevel
    attached_to_root: bool
    stats: SinkStats


def init(
    config: RuntimeConfig,
    *,
    transport: TransportPort | None = None,
    scheduler: SchedulerPort | None = None,
) -> BatchingSyslogSink:
    """Compose the syslog runtime and install it as the active singleton.

    Resolves ``config`` plus ``LOG_SYSLOG_*`` environment overrides, builds a
    started :class:`BatchingSyslogSink`, and (unless
    ``config.attach_to_root`` is ``False``) attaches a
    :class:`SyslogBatchHandler` to the root logger.

    Raises
    ------
    RuntimeError
        When a runtime is already initialised.
    ValueError
        When configuration or environment values are invalid.
    """

    if is_initialised():
        raise RuntimeError("lib_log_syslog runtime is already initialised; call shutdown() first")

    settings = build_runtime_settings(config)
    sink = BatchingSyslogSink(
        settings.sink,
        transport=transport,
        scheduler=scheduler,
        diagnostic=settings.diagnostic_hook,
    )
    handler = SyslogBatchHandler(sink, level=settings.level.to_python_level(), close_sink=False)
    detach: list[Callable[[], None]] = []
    if settings.attach_to_root:
        root = logging.getLogger()
        root.addHandler(handler)
        detach.append(lambda: root.removeHandler(handler))
    detach.append(handler.close)

    sink.start()
    set_runtime(
        SyslogRuntime(
            config=settings.sink,
            sink=sink,
            handler=handler,
            level=settings.level,
            attached_to_root=settings.attach_to_root,
            shutdown=create_shutdown(sink=sink, detach=detach),
        )
    )
    return sink


def get_sink() -> BatchingSyslogSink:
    """Return the active sink."""

    return current_runtime().sink


def get_handler() -> SyslogBatchHandler:
    """Return the stdlib handler feeding the active sink."""

    return current_runtime().handler


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        config=runtime.config,
        level=runtime.level,
        attached_to_root=runtime.attached_to_root,
        stats=runtime.sink.stats,
    )


def flush() -> None:
    """Drain the active sink synchronously."""

    current_runtime().sink.flush()


def shutdown() -> None:
    """Detach the handler, flush remaining events, and clear the runtime.

    Calling it without an active runtime is a no-op.
    """

    if not is_initialised():
        return
    runtime = current_runtime()
    try:
        runtime.shutdown()
    finally:
        clear_runtime()


__all__ = [
    "RuntimeConfig",
    "RuntimeSettings",
    "RuntimeSnapshot",
    "build_runtime_settings",
    "coerce_level",
    "flush",
    "get_handler",
    "get_sink",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
]
