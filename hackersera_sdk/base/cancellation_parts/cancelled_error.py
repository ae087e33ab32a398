"""Cancellation error type.

Defines the public ``CancelledError`` raised when an SDK operation observes a
cancellation request on its :class:`CancellationToken`.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Kept distinct from transport failures so callers can tell an abandoned
    request apart from a network problem.
    """


__all__ = ["CancelledError"]
