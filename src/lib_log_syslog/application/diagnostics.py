"""Guarded diagnostic hook shared by the sink's components.

The optional hook receives ``(name, payload)`` for notable events such as
failed sends. A hook that raises is logged and otherwise ignored so that
observability never breaks the logging path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None
DiagnosticEmitter = Callable[[str, dict[str, Any]], None]

logger = logging.getLogger(__name__)


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> DiagnosticEmitter:
    """Return a callable forwarding to ``diagnostic`` while trapping its errors.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append((name, payload)))
    >>> emit("syslog_flush", {"events": 2})
    >>> seen
    [('syslog_flush', {'events': 2})]
    >>> build_diagnostic_emitter(None)("ignored", {})
    """

    def emit(name: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(name, payload)
        except Exception as exc:  # noqa: BLE001
            logger.error("Diagnostic hook raised while reporting %s", name, exc_info=exc)

    return emit


__all__ = ["DiagnosticEmitter", "DiagnosticHook", "build_diagnostic_emitter"]
