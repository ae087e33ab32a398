"""
HackersEra SDK

Python client for the HackersEra chat-completion service: chat (blocking and
streamed), models, embeddings, documents and search, conversations,
feedback, profiles, knowledge graph, learned facts and service statistics.

Quick start::

    from hackersera_sdk import ChatRequest, HackersEraClient, Message

    client = HackersEraClient("http://localhost:8080", "sk-...")
    req = ChatRequest(model="hackersera-ai", messages=[Message(role="user", content="Hi")])
    with client.chat_completion_stream(req) as stream:
        for frame in stream:
            print(frame.content, end="")
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    APIError,
    ClientError,
    DecodeError,
    ErrorCode,
    RequestBuildError,
    StreamReadError,
    StreamStalledError,
    TransportError,
)
from .base.http import close_all_clients
from .base.logging import configure_logger
from .base.request import RequestConfig, RequestOptions
from .base.streaming import ChatStream, StreamMetrics, StreamState, accumulate_chunks
from .base.timeouts import TimeoutConfig
from .client import HackersEraClient
from .config import get_client_config
from .config.defaults import MODEL_DEFAULT, MODEL_EMBEDDING, MODEL_LITE, MODEL_PRO
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "HackersEraClient",
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
    "close_all_clients",
    "configure_logger",
    "RequestConfig",
    "RequestOptions",
    "ChatStream",
    "StreamMetrics",
    "StreamState",
    "accumulate_chunks",
    "TimeoutConfig",
    "get_client_config",
    "MODEL_DEFAULT",
    "MODEL_PRO",
    "MODEL_LITE",
    "MODEL_EMBEDDING",
    *_models_all,
]
