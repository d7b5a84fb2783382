"""Protocols separating the sink's policy from its infrastructure."""

from __future__ import annotations

from .scheduler import SchedulerPort
from .sink import BatchSinkPort
from .transport import TransportPort

__all__ = ["BatchSinkPort", "SchedulerPort", "TransportPort"]
