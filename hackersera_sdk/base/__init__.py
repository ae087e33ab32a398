"""
SDK Base Package

Service-agnostic building blocks the client is assembled from:
- Cancellation tokens shared between callers and stream workers
- The error taxonomy and HTTP status classifier
- Timeout settings and structured logging helpers
- Request composition (headers, JSON bodies) and the HTTP transport
- The streaming engine (SSE decoder, channels, worker, consumer handle)
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIError,
    ClientError,
    DecodeError,
    ErrorCode,
    RequestBuildError,
    StreamReadError,
    StreamStalledError,
    TransportError,
    classify_exception,
    parse_error_response,
)
from .timeouts import TimeoutConfig, get_timeout_config
from .logging import configure_logger, get_logger
from .request import RequestConfig, RequestOptions, compose_headers, encode_json_body
from .http import Transport, close_all_clients, get_httpx_client
from .streaming import ChatStream, Channel, ChannelClosed, StreamDispatcher, StreamState

__all__ = [
    "CancellationToken",
    "CancelledError",
    "APIError",
    "ClientError",
    "DecodeError",
    "ErrorCode",
    "RequestBuildError",
    "StreamReadError",
    "StreamStalledError",
    "TransportError",
    "classify_exception",
    "parse_error_response",
    "TimeoutConfig",
    "get_timeout_config",
    "configure_logger",
    "get_logger",
    "RequestConfig",
    "RequestOptions",
    "compose_headers",
    "encode_json_body",
    "Transport",
    "close_all_clients",
    "get_httpx_client",
    "ChatStream",
    "Channel",
    "ChannelClosed",
    "StreamDispatcher",
    "StreamState",
]
