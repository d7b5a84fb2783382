"""Socket transport delivering syslog messages over UDP, TCP, or TLS.

Purpose
-------
Resolve the collector, open a short-lived connection per message, write the
bytes, and close the connection on every exit path.

Contents
--------
* :class:`SocketTransport` - concrete :class:`TransportPort` implementation.

System Role
-----------
Used by the emit-batch use case. Connections are not pooled; each line
opens and closes its own connection.
"""

from __future__ import annotations

import logging
import socket
import ssl
from collections.abc import Callable
from typing import Any

from lib_log_syslog.application.diagnostics import DiagnosticHook, build_diagnostic_emitter
from lib_log_syslog.application.ports.transport import TransportPort
from lib_log_syslog.domain.config import TransportProtocol, UnsupportedProtocolError

logger = logging.getLogger(__name__)

_SOCKET_TYPES = {
    TransportProtocol.UDP: socket.SOCK_DGRAM,
    TransportProtocol.TCP: socket.SOCK_STREAM,
}


class SocketTransport(TransportPort):
    """Send each payload on a fresh socket.

    Parameters
    ----------
    timeout:
        Optional socket timeout (seconds) applied to connect and write.
        ``None`` keeps blocking sockets.
    diagnostic:
        Optional hook receiving ``syslog_send_failed`` and
        ``syslog_resolution_failed`` notifications.
    ssl_context_factory:
        Callable returning the :class:`ssl.SSLContext` used for TLS; defaults
        to :func:`ssl.create_default_context`, which verifies the server
        certificate and host name.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        diagnostic: DiagnosticHook = None,
        ssl_context_factory: Callable[[], ssl.SSLContext] | None = None,
    ) -> None:
        self._timeout = timeout
        self._emit_diagnostic = build_diagnostic_emitter(diagnostic)
        self._ssl_context_factory = ssl_context_factory

    def send(
        self,
        host: str,
        port: int,
        payload: bytes,
        protocol: TransportProtocol | str,
        use_tls: bool = False,
    ) -> bool:
        """Deliver ``payload`` to ``host:port``.

        Returns ``False`` when the host does not resolve or the network
        operation fails. Raises :class:`UnsupportedProtocolError` for any
        protocol other than UDP or TCP.
        """
        protocol = TransportProtocol.coerce(protocol)
        if not isinstance(protocol, TransportProtocol):
            raise UnsupportedProtocolError(f"Protocol {protocol!r} is not supported")

        address = self._resolve(host, port, _SOCKET_TYPES[protocol])
        if address is None:
            return False
        family, sockaddr = address

        try:
            if protocol is TransportProtocol.UDP:
                self._send_udp(family, sockaddr, payload)
            else:
                self._send_tcp(host, sockaddr, payload, use_tls)
        except OSError as exc:
            logger.debug("Sending syslog message to %s:%s failed", host, port, exc_info=exc)
            self._report_failure(host, port, protocol, exc)
            return False
        return True

    def _resolve(self, host: str, port: int, sock_type: int) -> tuple[int, tuple[Any, ...]] | None:
        """Return the first resolved ``(family, sockaddr)`` or ``None``."""
        try:
            infos = socket.getaddrinfo(host, port, 0, sock_type)
        except OSError as exc:
            logger.debug("Could not resolve syslog host %s", host, exc_info=exc)
            self._emit_diagnostic("syslog_resolution_failed", {"host": host, "port": port, "exception": repr(exc)})
            return None
        if not infos:
            self._emit_diagnostic("syslog_resolution_failed", {"host": host, "port": port, "exception": None})
            return None
        family, _type, _proto, _canonname, sockaddr = infos[0]
        return family, sockaddr

    def _send_udp(self, family: int, sockaddr: tuple[Any, ...], payload: bytes) -> None:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            if self._timeout is not None:
                sock.settimeout(self._timeout)
            sock.sendto(payload, sockaddr)

    def _send_tcp(self, host: str, sockaddr: tuple[Any, ...], payload: bytes, use_tls: bool) -> None:
        connection = socket.create_connection((sockaddr[0], sockaddr[1]), timeout=self._timeout)
        try:
            if use_tls:
                context = self._create_ssl_context()
                stream = context.wrap_socket(connection, server_hostname=host)
                try:
                    stream.sendall(payload)
                finally:
                    stream.close()
            else:
                connection.sendall(payload)
        finally:
            connection.close()

    def _create_ssl_context(self) -> ssl.SSLContext:
        if self._ssl_context_factory is not None:
            return self._ssl_context_factory()
        return ssl.create_default_context()

    def _report_failure(self, host: str, port: int, protocol: TransportProtocol, exc: OSError) -> None:
        self._emit_diagnostic(
            "syslog_send_failed",
            {"host": host, "port": port, "protocol": protocol.value, "exception": repr(exc)},
        )


__all__ = ["SocketTransport"]
