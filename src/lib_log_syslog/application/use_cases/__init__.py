"""Use cases orchestrating formatting and delivery."""

from __future__ import annotations

from .emit_batch import BatchResult, EmitBatch, create_emit_batch
from .shutdown import create_shutdown

__all__ = ["BatchResult", "EmitBatch", "create_emit_batch", "create_shutdown"]
