"""
Failure kinds specific to the streaming worker.
"""
from __future__ import annotations

from dataclasses import dataclass

from .client_error import ClientError
from .error_code import ErrorCode


@dataclass(eq=False)
class StreamReadError(ClientError):
    """The body read failed after the stream had been validated."""

    code: ErrorCode = ErrorCode.TRANSIENT


@dataclass(eq=False)
class StreamStalledError(ClientError):
    """A frame could not be delivered within the configured offer timeout.

    Raised only when an offer timeout is configured; by default the worker
    waits for the consumer indefinitely (while still observing cancellation).
    """

    code: ErrorCode = ErrorCode.TIMEOUT


__all__ = ["StreamReadError", "StreamStalledError"]
