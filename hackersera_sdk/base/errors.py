"""Unified client error taxonomy public surface.

Every failure the SDK surfaces is a :class:`ClientError` subclass:

- ``RequestBuildError``  request could not be serialized / constructed
- ``TransportError``     no response received (connectivity, cancellation)
- ``APIError``           non-success HTTP status, parsed error envelope
- ``DecodeError``        success body unreadable or off-schema
- ``StreamReadError``    mid-stream I/O failure
- ``StreamStalledError`` frame offer timed out (opt-in)

Implementations live under ``hackersera_sdk.base.errors_parts``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.client_error import ClientError
from .errors_parts.request_errors import RequestBuildError, TransportError, DecodeError
from .errors_parts.stream_errors import StreamReadError, StreamStalledError
from .errors_parts.envelope import ErrorDetail, ErrorResponse
from .errors_parts.api_error import APIError
from .errors_parts.classification import classify_exception, code_for_status
from .errors_parts.response_parser import parse_error_response

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
