"""Static package metadata used by the CLI banner."""

from __future__ import annotations

from importlib import metadata

name = "lib_log_syslog"
title = "Batching syslog sink for Python logging"
shell_command = "lib_log_syslog"

try:
    version = metadata.version(name)
except metadata.PackageNotFoundError:
    version = "0.0.0"


def print_info() -> str:
    """Return the metadata banner printed by ``lib_log_syslog info``."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    return "\n".join(lines) + "\n"
