"""Streaming package: SSE decoding, the stream worker and its channels."""

from .channel import Channel, ChannelClosed, SendResult
from .decoder import DecodedLine, LineKind, decode_line
from .stream_state import StreamState
from .streaming_metrics import StreamMetrics
from .accumulate import accumulate_chunks, join_content
from .dispatcher import StreamDispatcher, StreamStarter
from .chat_stream import ChatStream

__all__ = [
    "Channel",
    "ChannelClosed",
    "SendResult",
    "DecodedLine",
    "LineKind",
    "decode_line",
    "StreamState",
    "StreamMetrics",
    "accumulate_chunks",
    "join_content",
    "StreamDispatcher",
    "StreamStarter",
    "ChatStream",
]
