"""Log level abstraction shared by producers and the syslog sink.

Purpose
-------
Offer a domain-specific representation of log severities that covers the
stdlib levels plus a lowest ``VERBOSE`` tier used by chatty producers.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.

System Role
-----------
Consumed by the severity mapper (:mod:`lib_log_syslog.domain.syslog`) and by
the stdlib bridge that turns :class:`logging.LogRecord` levels into events.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels ordered by their numeric value."""

    VERBOSE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level.

        ``VERBOSE`` has no stdlib constant and maps to its own value (5).
        """

        return getattr(logging, self.name, self.value)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "FATAL":
            normalized = "CRITICAL"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging number into the closest :class:`LogLevel`.

        Custom stdlib levels between the named ones round down to the nearest
        member so ``logging.INFO + 5`` stays ``INFO``.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING) is LogLevel.WARNING
        True
        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(1) is LogLevel.VERBOSE
        True
        """
        chosen = cls.VERBOSE
        for member in cls:
            if level >= member.value:
                chosen = member
        return chosen


__all__ = ["LogLevel"]
