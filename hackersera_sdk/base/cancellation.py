"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the cancellation constructs via the canonical
``hackersera_sdk.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is passed to chat calls and polled at every blocking
  point of the streaming worker (before sending, between body lines, while a
  full frame channel is waited on).
- ``CancelledError`` is the underlying cause attached to errors produced by an
  operation that observed a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
