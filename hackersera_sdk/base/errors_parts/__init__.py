"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from ``hackersera_sdk.base.errors`` for the stable surface.
"""

from .error_code import ErrorCode
from .client_error import ClientError
from .request_errors import RequestBuildError, TransportError, DecodeError
from .stream_errors import StreamReadError, StreamStalledError
from .envelope import ErrorDetail, ErrorResponse
from .api_error import APIError
from .classification import classify_exception, code_for_status
from .response_parser import parse_error_response

__all__ = [
    "ErrorCode",
    "ClientError",
    "RequestBuildError",
    "TransportError",
    "DecodeError",
    "StreamReadError",
    "StreamStalledError",
    "ErrorDetail",
    "ErrorResponse",
    "APIError",
    "classify_exception",
    "code_for_status",
    "parse_error_response",
]
