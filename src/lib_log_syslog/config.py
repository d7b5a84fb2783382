"""Optional ``.env`` loading for ``LOG_SYSLOG_*`` settings.

Purpose
-------
Let deployments keep syslog endpoints and toggles in a ``.env`` file next to
the application. Loading is explicit: call :func:`enable_dotenv` or pass
``--use-dotenv`` to the CLI (``LOG_SYSLOG_USE_DOTENV=1`` enables it too).

Existing environment variables always win over values from the file.
"""

from __future__ import annotations

import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_SYSLOG_USE_DOTENV"

_LOCK = threading.Lock()
_LOADED_PATH: Path | None = None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file once and return its path.

    The search walks upwards from ``search_from`` (default: the current
    working directory). Returns ``None`` when no file is found.
    """

    global _LOADED_PATH
    with _LOCK:
        if _LOADED_PATH is not None:
            return _LOADED_PATH
        if search_from is None:
            located = find_dotenv(usecwd=True)
        else:
            located = _find_upwards(search_from)
        if not located:
            return None
        path = Path(located).resolve()
        load_dotenv(path, override=False)
        _LOADED_PATH = path
        return path


def _find_upwards(start: Path) -> str:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    """Forget which file was loaded so tests can load again."""

    global _LOADED_PATH
    with _LOCK:
        _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv"]
