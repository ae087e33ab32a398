"""Chat helpers for the HackersEra client.

Encapsulates the non-streaming chat completion call so the main client
module stays focused on construction and configuration.
"""

from __future__ import annotations

import time
from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.logging import LogContext, normalized_log_event
from ..base.request import RequestOptions
from ..models.chat import ChatRequest, ChatResponse

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class HackersEraChatMixin:
    """Mixin providing ``chat_completion``."""

    def chat_completion(
        self,
        request: ChatRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ChatResponse:
        """Create a chat completion and wait for the whole answer.

        The body is sent with ``"stream": false`` whatever ``request.stream``
        holds; ``request`` itself is left untouched.

        Raises:
            RequestBuildError, TransportError, APIError, DecodeError
        """
        ctx = LogContext(model=request.model, method="POST", path=CHAT_COMPLETIONS_PATH)
        t0 = time.perf_counter()
        response = self._call(
            "POST",
            CHAT_COMPLETIONS_PATH,
            ChatResponse,
            body=request,
            forced={"stream": False},
            options=options,
            token=token,
        )
        ctx.response_id = response.id or None
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(response.choices),
            tokens={
                "prompt": response.usage.prompt_tokens,
                "completion": response.usage.completion_tokens,
                "total": response.usage.total_tokens,
            },
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 2),
        )
        return response


__all__ = ["HackersEraChatMixin", "CHAT_COMPLETIONS_PATH"]
