"""Immutable sink configuration and configuration errors.

Purpose
-------
Fix every setting of a syslog sink at construction time and validate it once.

Contents
--------
* :class:`TransportProtocol` - supported transports.
* :class:`ConfigurationError` / :class:`UnsupportedProtocolError`.
* :class:`SinkConfig` - frozen settings value object.
* :func:`default_sender` / :func:`default_machine_name` - fallbacks.
"""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .syslog import SyslogFacility


class ConfigurationError(ValueError):
    """Raised when sink settings cannot be used."""


class UnsupportedProtocolError(ConfigurationError):
    """Raised at send time when the configured transport is not UDP or TCP."""


class TransportProtocol(Enum):
    """Network transports understood by the socket transport."""

    UDP = "udp"
    TCP = "tcp"

    @classmethod
    def coerce(cls, value: "TransportProtocol | str") -> "TransportProtocol | str":
        """Return the enum member for known names, otherwise ``value`` unchanged.

        Unknown values are kept so the transport can reject them when a
        message is actually sent.

        Examples
        --------
        >>> TransportProtocol.coerce("TCP") is TransportProtocol.TCP
        True
        >>> TransportProtocol.coerce("sctp")
        'sctp'
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return value


def default_sender() -> str:
    """Return the running application's name, used as the syslog tag."""

    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else ""
    name = Path(argv0).stem
    if not name or name in {"-c", "-m", "__main__"}:
        return "python"
    return name


def default_machine_name() -> str:
    """Return the local host name written into every message."""

    return socket.gethostname()


@dataclass(frozen=True, slots=True)
class SinkConfig:
    """Settings of one batching syslog sink.

    Attributes
    ----------
    host, port:
        Collector address. ``host`` is resolved on every send.
    facility:
        :class:`SyslogFacility`, its name, or its code (default ``LOCAL1``).
    protocol:
        ``udp`` or ``tcp``; other values fail when a message is sent.
    use_tls:
        Wrap TCP connections in TLS, validating the certificate against ``host``.
    sender:
        Tag placed before the message body.
    machine_name:
        Host name placed after the timestamp.
    split_newlines:
        Send every line of a multi-line message separately.
    batch_size:
        Buffered event count that triggers a flush.
    flush_interval:
        Seconds between time-triggered flushes.
    send_timeout:
        Optional socket timeout in seconds for each send.
    """

    host: str
    port: int
    facility: SyslogFacility = SyslogFacility.LOCAL1
    protocol: TransportProtocol | str = TransportProtocol.UDP
    use_tls: bool = False
    sender: str = field(default_factory=default_sender)
    machine_name: str = field(default_factory=default_machine_name)
    split_newlines: bool = True
    batch_size: int = 10
    flush_interval: float = 1.0
    send_timeout: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ConfigurationError("host must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 1 <= self.port <= 65535:
            raise ConfigurationError(f"port must be an integer between 1 and 65535, got {self.port!r}")
        if isinstance(self.batch_size, bool) or not isinstance(self.batch_size, int) or self.batch_size < 1:
            raise ConfigurationError(f"batch_size must be a positive integer, got {self.batch_size!r}")
        if self.flush_interval <= 0:
            raise ConfigurationError(f"flush_interval must be positive, got {self.flush_interval!r}")
        if self.send_timeout is not None and self.send_timeout <= 0:
            raise ConfigurationError(f"send_timeout must be positive, got {self.send_timeout!r}")
        object.__setattr__(self, "host", self.host.strip())
        object.__setattr__(self, "facility", SyslogFacility.coerce(self.facility))
        object.__setattr__(self, "protocol", TransportProtocol.coerce(self.protocol))
        object.__setattr__(self, "flush_interval", float(self.flush_interval))

    @property
    def endpoint(self) -> tuple[str, int]:
        """Return ``(host, port)``."""

        return self.host, self.port


__all__ = [
    "ConfigurationError",
    "SinkConfig",
    "TransportProtocol",
    "UnsupportedProtocolError",
    "default_machine_name",
    "default_sender",
]
