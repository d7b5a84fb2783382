"""Port describing how formatted syslog messages reach the collector."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_syslog.domain.config import TransportProtocol


@runtime_checkable
class TransportPort(Protocol):
    """Deliver one formatted syslog message."""

    def send(
        self,
        host: str,
        port: int,
        payload: bytes,
        protocol: TransportProtocol | str,
        use_tls: bool = False,
    ) -> bool:
        """Send ``payload`` and return ``True`` when it was written.

        Resolution misses and network failures return ``False``; an
        unsupported ``protocol`` raises :class:`UnsupportedProtocolError`.
        """


__all__ = ["TransportPort"]
