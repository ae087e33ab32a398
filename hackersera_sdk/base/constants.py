"""Wire-level constants shared across the SDK.

Only literals that describe the HTTP protocol spoken with the service live
here (header names, SSE framing, channel sizing). User-tunable defaults such
as the base URL and timeouts are in ``hackersera_sdk.config.defaults``.
"""

from __future__ import annotations

# ---- Headers ----
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_ID = "X-User-ID"
HEADER_CONVERSATION_ID = "X-Conversation-ID"
HEADER_COGNITIVE_DISABLED = "X-Cognitive-Disabled"
CONTENT_TYPE_JSON = "application/json"
BEARER_PREFIX = "Bearer "

# ---- Server-sent events ----
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"
# Longest accepted stream line; longer lines fail the stream.
SSE_MAX_LINE_BYTES = 1024 * 1024

# ---- Streaming channels ----
STREAM_FRAME_BUFFER = 100
STREAM_ERROR_BUFFER = 1

# ---- Error envelope ----
UNKNOWN_ERROR_TYPE = "unknown_error"

# ---- Action tags attached to client errors ----
ACTION_MARSHAL_REQUEST = "marshal request"
ACTION_CREATE_REQUEST = "create request"
ACTION_SEND_REQUEST = "send request"
ACTION_READ_RESPONSE = "read response"
ACTION_DECODE_RESPONSE = "decode response"
ACTION_READ_STREAM = "read stream"
ACTION_DELIVER_FRAME = "deliver frame"

__all__ = [
    "HEADER_CONTENT_TYPE",
    "HEADER_AUTHORIZATION",
    "HEADER_USER_ID",
    "HEADER_CONVERSATION_ID",
    "HEADER_COGNITIVE_DISABLED",
    "CONTENT_TYPE_JSON",
    "BEARER_PREFIX",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "SSE_MAX_LINE_BYTES",
    "STREAM_FRAME_BUFFER",
    "STREAM_ERROR_BUFFER",
    "UNKNOWN_ERROR_TYPE",
    "ACTION_MARSHAL_REQUEST",
    "ACTION_CREATE_REQUEST",
    "ACTION_SEND_REQUEST",
    "ACTION_READ_RESPONSE",
    "ACTION_DECODE_RESPONSE",
    "ACTION_READ_STREAM",
    "ACTION_DELIVER_FRAME",
]
