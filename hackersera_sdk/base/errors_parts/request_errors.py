"""
Failure kinds raised around a single HTTP exchange.

- ``RequestBuildError``: the request could not be serialized or constructed.
- ``TransportError``: no response was received (connectivity, timeout,
  cancellation before send).
- ``DecodeError``: a success response body could not be read or did not match
  the expected schema.
"""
from __future__ import annotations

from dataclasses import dataclass

from .client_error import ClientError
from .error_code import ErrorCode


@dataclass(eq=False)
class RequestBuildError(ClientError):
    """Request body could not be marshalled or the request could not be built."""

    code: ErrorCode = ErrorCode.VALIDATION


@dataclass(eq=False)
class TransportError(ClientError):
    """The exchange failed before any response status was received."""

    code: ErrorCode = ErrorCode.UNAVAILABLE


@dataclass(eq=False)
class DecodeError(ClientError):
    """A success response could not be read or decoded."""

    code: ErrorCode = ErrorCode.INTERNAL


__all__ = ["RequestBuildError", "TransportError", "DecodeError"]
