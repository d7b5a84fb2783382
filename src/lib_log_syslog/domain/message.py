"""Syslog wire formatting and newline splitting.

Purpose
-------
Turn a rendered log message into one or more RFC 3164 style byte strings.

Contents
--------
* :func:`split_lines` - newline fragmentation policy.
* :func:`format_timestamp` - ``Mon dd HH:mm:ss`` rendering from a fixed table.
* :func:`build_syslog_message` - ``<PRI>`` + timestamp + host + tag + body.

System Role
-----------
Pure helpers used by the emit-batch use case. Nothing here touches the
network or shared state.
"""

from __future__ import annotations

import re
from datetime import datetime

from .syslog import SyslogFacility, SyslogSeverity, priority

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
# Month abbreviations required by RFC 3164, independent of the host locale.

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

DEFAULT_LINE_TERMINATOR = "\r\n"


def split_lines(message: str, *, split_newlines: bool = True) -> list[str]:
    """Expand ``message`` into the lines sent as separate syslog messages.

    Examples
    --------
    >>> split_lines("a\\nb\\nc")
    ['a', 'b', 'c']
    >>> split_lines("a\\nb\\nc", split_newlines=False)
    ['a\\nb\\nc']
    >>> split_lines("first\\r\\n\\r\\nsecond")
    ['first', 'second']
    >>> split_lines("\\n")
    ['']
    """
    if not split_newlines:
        return [message]
    lines = [segment for segment in _LINE_BREAK.split(message) if segment]
    return lines or [""]


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``Mon dd HH:mm:ss`` with a space-padded day.

    Aware datetimes are converted to local time first; naive ones are used
    as given.

    Examples
    --------
    >>> format_timestamp(datetime(2025, 3, 7, 9, 5, 1))
    'Mar  7 09:05:01'
    >>> format_timestamp(datetime(2025, 12, 24, 23, 59, 59))
    'Dec 24 23:59:59'
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    month = _MONTHS[moment.month - 1]
    return f"{month} {moment.day:>2} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def build_syslog_message(
    facility: SyslogFacility,
    severity: SyslogSeverity,
    timestamp: datetime,
    machine_name: str,
    sender: str,
    body: str,
    *,
    line_terminator: str = DEFAULT_LINE_TERMINATOR,
) -> bytes:
    """Return one syslog message as ASCII bytes.

    Layout: ``<PRI>Mon dd HH:mm:ss machine sender: body`` followed by
    ``line_terminator``. Characters outside ASCII are replaced with ``?``.

    Examples
    --------
    >>> build_syslog_message(
    ...     SyslogFacility.LOCAL1,
    ...     SyslogSeverity.INFORMATIONAL,
    ...     datetime(2025, 9, 23, 14, 3, 9),
    ...     "host",
    ...     "app",
    ...     "hello",
    ... )
    b'<142>Sep 23 14:03:09 host app: hello\\r\\n'
    """
    pri = priority(facility, severity)
    text = f"<{pri}>{format_timestamp(timestamp)} {machine_name} {sender}: {body}{line_terminator}"
    return text.encode("ascii", errors="replace")


__all__ = ["DEFAULT_LINE_TERMINATOR", "build_syslog_message", "format_timestamp", "split_lines"]
