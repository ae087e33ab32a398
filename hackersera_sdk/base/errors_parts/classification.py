"""
Error classification helpers mapping statuses and exceptions to ``ErrorCode``.

Implements HTTP status extraction, status-to-code mapping and ``httpx``
exception mapping so every ``ClientError`` carries a normalized code.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..cancellation_parts.cancelled_error import CancelledError
from .client_error import ClientError
from .error_code import ErrorCode


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unlisted 5xx statuses map to ``SERVER_ERROR`` and unlisted 4xx statuses
    to ``VALIDATION``; anything else is ``UNKNOWN``.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ``ClientError`` passthrough.
        2. Cooperative cancellation.
        3. Timeouts (``httpx`` and builtin).
        4. ``httpx`` connectivity failures.
        5. HTTP status mapping.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ClientError):
        return exc.code
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.ConnectError, httpx.UnsupportedProtocol)):
        return ErrorCode.UNAVAILABLE
    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError)):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "code_for_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
