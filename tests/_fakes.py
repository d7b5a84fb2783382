"""Test doubles shared across the suite."""

from __future__ import annotations

from typing import Any


class RecordingTransport:
    """Transport fake recording payloads; ``fail_on`` lists 1-based call numbers that fail."""

    def __init__(self, fail_on: set[int] | None = None, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, int, bytes, Any, bool]] = []
        self._fail_on = fail_on or set()
        self._error = error

    @property
    def payloads(self) -> list[bytes]:
        return [call[2] for call in self.calls]

    def bodies(self) -> list[str]:
        return [payload.decode("ascii").split(": ", 1)[1].rstrip("\r\n") for payload in self.payloads]

    def send(self, host: str, port: int, payload: bytes, protocol: Any, use_tls: bool = False) -> bool:
        self.calls.append((host, port, payload, protocol, use_tls))
        if len(self.calls) in self._fail_on:
            if self._error is not None:
                raise self._error
            return False
        return True
