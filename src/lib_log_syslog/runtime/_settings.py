"""Resolve runtime configuration and environment overrides into a :class:`SinkConfig`."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from lib_log_syslog.application.diagnostics import DiagnosticHook
from lib_log_syslog.domain.config import SinkConfig, TransportProtocol, default_machine_name, default_sender
from lib_log_syslog.domain.levels import LogLevel
from lib_log_syslog.domain.syslog import SyslogFacility

ENV_ENDPOINT = "LOG_SYSLOG_ENDPOINT"
ENV_PROTOCOL = "LOG_SYSLOG_PROTOCOL"
ENV_TLS = "LOG_SYSLOG_TLS"
ENV_FACILITY = "LOG_SYSLOG_FACILITY"
ENV_SENDER = "LOG_SYSLOG_SENDER"
ENV_MACHINE_NAME = "LOG_SYSLOG_MACHINE_NAME"
ENV_BATCH_SIZE = "LOG_SYSLOG_BATCH_SIZE"
ENV_FLUSH_INTERVAL = "LOG_SYSLOG_FLUSH_INTERVAL"
ENV_SPLIT_NEWLINES = "LOG_SYSLOG_SPLIT_NEWLINES"
ENV_SEND_TIMEOUT = "LOG_SYSLOG_SEND_TIMEOUT"
ENV_LEVEL = "LOG_SYSLOG_LEVEL"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class RuntimeConfig:
    """Inputs accepted by :func:`lib_log_syslog.runtime.init`.

    ``endpoint`` is ``(host, port)``; it may be omitted when
    ``LOG_SYSLOG_ENDPOINT`` provides it. Environment variables override the
    values given here.
    """

    endpoint: tuple[str, int] | None = None
    batch_size: int = 10
    flush_interval: float = 1.0
    sender: str | None = None
    facility: SyslogFacility | str | int = SyslogFacility.LOCAL1
    protocol: TransportProtocol | str = TransportProtocol.UDP
    use_tls: bool = False
    machine_name: str | None = None
    split_newlines: bool = True
    send_timeout: float | None = None
    level: str | LogLevel = LogLevel.INFO
    attach_to_root: bool = True
    diagnostic_hook: DiagnosticHook = None


@dataclass(frozen=True)
class RuntimeSettings:
    """Fully resolved settings: sink configuration plus handler wiring."""

    sink: SinkConfig
    level: LogLevel
    attach_to_root: bool
    diagnostic_hook: DiagnosticHook


def build_runtime_settings(config: RuntimeConfig, environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Merge ``config`` with environment overrides and validate the result."""

    env = os.environ if environ is None else environ
    endpoint = parse_endpoint(env.get(ENV_ENDPOINT), config.endpoint)
    if endpoint is None:
        raise ValueError(f"A syslog endpoint is required; pass endpoint=(host, port) or set {ENV_ENDPOINT}=HOST:PORT")
    host, port = endpoint

    sink = SinkConfig(
        host=host,
        port=port,
        facility=env.get(ENV_FACILITY, config.facility),
        protocol=env.get(ENV_PROTOCOL, config.protocol),
        use_tls=_env_bool(env, ENV_TLS, config.use_tls),
        sender=env.get(ENV_SENDER) or config.sender or default_sender(),
        machine_name=env.get(ENV_MACHINE_NAME) or config.machine_name or default_machine_name(),
        split_newlines=_env_bool(env, ENV_SPLIT_NEWLINES, config.split_newlines),
        batch_size=_env_int(env, ENV_BATCH_SIZE, config.batch_size),
        flush_interval=_env_float(env, ENV_FLUSH_INTERVAL, config.flush_interval),
        send_timeout=_env_float(env, ENV_SEND_TIMEOUT, config.send_timeout),
    )
    return RuntimeSettings(
        sink=sink,
        level=coerce_level(env.get(ENV_LEVEL, config.level)),
        attach_to_root=config.attach_to_root,
        diagnostic_hook=config.diagnostic_hook,
    )


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise level inputs (enum, name, or stdlib number) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(logging.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int):
        return LogLevel.from_python_level(level)
    return LogLevel.from_name(level)


def parse_endpoint(value: str | None, fallback: tuple[str, int] | None) -> tuple[str, int] | None:
    """Parse ``HOST:PORT`` strings into endpoint tuples.

    IPv6 literals are written in brackets (``[::1]:514``); the brackets are
    stripped so the host can be resolved.

    Examples
    --------
    >>> parse_endpoint("logs.example:514", None)
    ('logs.example', 514)
    >>> parse_endpoint("[::1]:514", None)
    ('::1', 514)
    >>> parse_endpoint(None, ("localhost", 514))
    ('localhost', 514)
    """
    if value is None:
        return fallback
    host, sep, port_text = value.strip().rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not sep or not host:
        raise ValueError(f"endpoint must look like HOST:PORT, got {value!r}")
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"endpoint port must be an integer, got {port_text!r}") from exc
    if port <= 0:
        raise ValueError(f"endpoint port must be positive, got {port}")
    return host, port


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off, got {value!r}")


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if number <= 0:
        raise ValueError(f"{name} must be positive, got {number}")
    return number


def _env_float(env: Mapping[str, str], name: str, default: float | None) -> float | None:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        number = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if number <= 0:
        raise ValueError(f"{name} must be positive, got {number}")
    return number


__all__ = ["RuntimeConfig", "RuntimeSettings", "build_runtime_settings", "coerce_level", "parse_endpoint"]
