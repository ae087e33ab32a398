"""HackersEra API client.

Summary:
- Synchronous calls over ``httpx`` in bounded-timeout mode, decoded into
  pydantic DTOs or raised as :class:`ClientError` subclasses
- Streaming chat via a background worker delivering frames on a bounded
  channel (see :mod:`hackersera_sdk.base.streaming`)
- Client-wide identity headers (user, conversation, cognitive switch) with
  per-call overrides through :class:`RequestOptions`

Configuration:
- Explicit constructor arguments, or :meth:`HackersEraClient.from_env` to
  merge defaults, the optional config file, ``HACKERSERA_*`` variables and
  overrides

Nothing is retried; retry and rate limiting belong to the caller.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Dict, Optional

import httpx

from ..base.http import Transport, get_httpx_client
from ..base.logging import get_logger
from ..base.request import RequestConfig
from ..base.timeouts import TimeoutConfig, get_timeout_config
from ..config import get_client_config
from ..config.defaults import DEFAULT_BASE_URL

from .helpers import HackersEraCommonMixin
from .chat_helpers import HackersEraChatMixin
from .stream_helpers import HackersEraStreamingMixin
from .catalog_helpers import HackersEraCatalogMixin
from .document_helpers import HackersEraDocumentMixin
from .conversation_helpers import HackersEraConversationMixin
from .knowledge_helpers import HackersEraKnowledgeMixin
from .stats_helpers import HackersEraStatsMixin


class HackersEraClient(
    HackersEraCommonMixin,
    HackersEraChatMixin,
    HackersEraStreamingMixin,
    HackersEraCatalogMixin,
    HackersEraDocumentMixin,
    HackersEraConversationMixin,
    HackersEraKnowledgeMixin,
    HackersEraStatsMixin,
):
    """Client for the HackersEra chat-completion service.

    Parameters:
        base_url: Service root; a trailing ``/`` is dropped.
        api_key: Bearer token. Empty sends no ``Authorization`` header.
        http_client: ``httpx.Client`` to use instead of the shared pooled one
            (custom TLS, proxies, ``httpx.MockTransport`` in tests). The caller
            owns an injected client; pooled clients are closed by
            :func:`close_all_clients` or at interpreter exit.
        config: Initial header defaults; ``api_key`` wins over
            ``config.api_key`` when non-empty.
        timeouts: Timeout settings; defaults to :func:`get_timeout_config`.

    Thread-safety:
        Methods may be called from several threads. The setters swap in a new
        immutable :class:`RequestConfig`; calls already in flight keep the
        snapshot they started with.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        *,
        http_client: Optional[httpx.Client] = None,
        config: Optional[RequestConfig] = None,
        timeouts: Optional[TimeoutConfig] = None,
    ) -> None:
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        cfg = config or RequestConfig()
        if api_key:
            cfg = replace(cfg, api_key=api_key)
        self._config = cfg
        self._config_lock = threading.Lock()
        self._timeouts = timeouts or get_timeout_config()
        self._logger = get_logger("hackersera_sdk.client")
        self._transport = Transport(
            http_client or get_httpx_client(self._base_url),
            timeouts=self._timeouts,
        )

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "HackersEraClient":
        """Build a client from :func:`get_client_config` (defaults, file, env, ``overrides``).

        Extra keyword arguments (``http_client``, ``timeouts``) are forwarded
        to the constructor.
        """
        cfg = get_client_config(overrides)
        return cls(
            cfg["base_url"],
            cfg["api_key"],
            config=RequestConfig(
                user_id=cfg["user_id"],
                conversation_id=cfg["conversation_id"],
                cognitive_disabled=bool(cfg["cognitive_disabled"]),
            ),
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> RequestConfig:
        """Current header defaults (an immutable snapshot)."""
        return self._config

    @property
    def http_client(self) -> httpx.Client:
        return self._transport.client

    def with_http_client(self, http_client: httpx.Client) -> "HackersEraClient":
        """Route subsequent calls through ``http_client``."""
        self._transport = Transport(http_client, timeouts=self._timeouts)
        return self

    def set_user_id(self, user_id: str) -> "HackersEraClient":
        """Default ``X-User-ID`` for later calls; empty clears it."""
        with self._config_lock:
            self._config = self._config.with_user_id(user_id)
        return self

    def set_conversation_id(self, conversation_id: str) -> "HackersEraClient":
        """Default ``X-Conversation-ID`` for later calls; empty clears it."""
        with self._config_lock:
            self._config = self._config.with_conversation_id(conversation_id)
        return self

    def set_cognitive_disabled(self, disabled: bool) -> "HackersEraClient":
        """Send ``X-Cognitive-Disabled: true`` on later calls (raw LLM mode)."""
        with self._config_lock:
            self._config = self._config.with_cognitive_disabled(disabled)
        return self

    def __repr__(self) -> str:
        return f"HackersEraClient(base_url={self._base_url!r}, config={self._config!r})"


__all__ = ["HackersEraClient"]
