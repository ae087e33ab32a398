"""Lifecycle states of a streaming call."""
from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    """``PENDING -> VALIDATING -> STREAMING -> {DONE, FAILED}``.

    ``PENDING`` covers request composition and the send itself. A stream
    abandoned through cancellation ends in ``FAILED`` without an error.
    """

    PENDING = "pending"
    VALIDATING = "validating"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (StreamState.DONE, StreamState.FAILED)


__all__ = ["StreamState"]
