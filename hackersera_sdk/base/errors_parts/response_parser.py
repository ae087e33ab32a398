"""
Error classifier turning a non-success ``httpx.Response`` into an ``APIError``.

The whole body is read and parsed as the JSON error envelope. A body that is
not a valid envelope never produces a separate error; instead the raw text
becomes the message and the type is ``"unknown_error"``. A body that cannot
be read at all is treated as empty.
"""
from __future__ import annotations

import httpx
from pydantic import ValidationError

from ..constants import UNKNOWN_ERROR_TYPE
from .api_error import APIError
from .classification import code_for_status
from .envelope import ErrorDetail, ErrorResponse


def _read_body(response: httpx.Response) -> bytes:
    """Return the full body, or ``b""`` when the connection fails mid-read."""
    try:
        return response.read()
    except (httpx.HTTPError, httpx.StreamError):
        return b""


def parse_error_response(response: httpx.Response) -> APIError:
    """Build the typed protocol error for ``response``.

    Parameters:
        response: A response whose status the caller does not accept. It may
            be streaming (body not yet read) or fully loaded.

    Returns:
        An :class:`APIError` carrying ``status_code`` and the envelope detail.
    """
    body = _read_body(response)
    try:
        detail = ErrorResponse.model_validate_json(body).error
    except ValidationError:
        detail = ErrorDetail(
            message=body.decode("utf-8", errors="replace"),
            type=UNKNOWN_ERROR_TYPE,
        )
    return APIError(
        message=detail.message,
        code=code_for_status(response.status_code),
        status_code=response.status_code,
        detail=detail,
    )


__all__ = ["parse_error_response"]
