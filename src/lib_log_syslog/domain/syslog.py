"""Syslog facility/severity numbering and the level-to-severity mapping.

Purpose
-------
Capture the numeric tables of RFC 3164 and translate :class:`LogLevel`
values into syslog severities.

Contents
--------
* :class:`SyslogFacility` - facility codes 0..23.
* :class:`SyslogSeverity` - severity codes 0..7.
* :func:`map_severity` - total mapping from log levels to severities.
* :func:`priority` - PRI value ``facility * 8 + severity``.
"""

from __future__ import annotations

from enum import IntEnum

from .levels import LogLevel


class SyslogFacility(IntEnum):
    """Syslog source categories as numbered by RFC 3164."""

    KERNEL = 0
    USER = 1
    MAIL = 2
    DAEMONS = 3
    AUTHORIZATION = 4
    SYSLOG = 5
    PRINTER = 6
    NEWS = 7
    UUCP = 8
    CLOCK = 9
    AUTHORIZATION2 = 10
    FTP = 11
    NTP = 12
    LOG_AUDIT = 13
    LOG_ALERT = 14
    CLOCK2 = 15
    LOCAL0 = 16
    LOCAL1 = 17
    LOCAL2 = 18
    LOCAL3 = 19
    LOCAL4 = 20
    LOCAL5 = 21
    LOCAL6 = 22
    LOCAL7 = 23

    @classmethod
    def coerce(cls, value: "SyslogFacility | str | int") -> "SyslogFacility":
        """Accept an enum member, its name (``"local1"``, ``"LOCAL1"``) or code.

        Examples
        --------
        >>> SyslogFacility.coerce("local1") is SyslogFacility.LOCAL1
        True
        >>> SyslogFacility.coerce(3) is SyslogFacility.DAEMONS
        True
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.coerce(int(text))
            normalized = text.upper().replace("-", "_").replace(" ", "_")
            try:
                return cls[normalized]
            except KeyError as exc:
                raise ValueError(f"Unknown syslog facility: {value!r}") from exc
        try:
            return cls(int(value))
        except ValueError as exc:
            raise ValueError(f"Unsupported syslog facility code: {value!r}") from exc


class SyslogSeverity(IntEnum):
    """Syslog urgency levels, most urgent first."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


def map_severity(level: LogLevel | int) -> SyslogSeverity:
    """Return the syslog severity for ``level``.

    Thresholds are inclusive; the first matching rule wins. Levels below
    ``DEBUG`` (``VERBOSE`` or unknown small numbers) fall through to
    ``NOTICE``.

    Examples
    --------
    >>> map_severity(LogLevel.CRITICAL).name
    'EMERGENCY'
    >>> map_severity(LogLevel.INFO).name
    'INFORMATIONAL'
    >>> map_severity(LogLevel.VERBOSE).name
    'NOTICE'
    """
    value = level.value if isinstance(level, LogLevel) else int(level)
    if value >= LogLevel.CRITICAL.value:
        return SyslogSeverity.EMERGENCY
    if value >= LogLevel.ERROR.value:
        return SyslogSeverity.ERROR
    if value >= LogLevel.WARNING.value:
        return SyslogSeverity.WARNING
    if value >= LogLevel.INFO.value:
        return SyslogSeverity.INFORMATIONAL
    if value >= LogLevel.DEBUG.value:
        return SyslogSeverity.DEBUG
    return SyslogSeverity.NOTICE


def priority(facility: SyslogFacility, severity: SyslogSeverity) -> int:
    """Return the PRI number encoding ``facility`` and ``severity``."""

    return int(facility) * 8 + int(severity)


__all__ = ["SyslogFacility", "SyslogSeverity", "map_severity", "priority"]
