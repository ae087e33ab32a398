"""Streaming helpers for the HackersEra client.

Purpose:
    Start a streaming chat completion: take a snapshot of the client
    configuration, wire the frame and error channels and launch the stream
    worker. Everything after this point (sending, status validation, SSE
    decoding) happens on the worker thread.
"""

from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.constants import STREAM_ERROR_BUFFER, STREAM_FRAME_BUFFER
from ..base.errors import ClientError
from ..base.logging import LogContext
from ..base.request import RequestOptions, encode_json_body
from ..base.streaming import Channel, ChatStream, StreamDispatcher
from ..models.chat import ChatRequest, ChatStreamChunk
from .chat_helpers import CHAT_COMPLETIONS_PATH


class HackersEraStreamingMixin:
    """Mixin providing ``chat_completion_stream``."""

    def chat_completion_stream(
        self,
        request: ChatRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
        frame_buffer: int = STREAM_FRAME_BUFFER,
        offer_timeout: Optional[float] = None,
    ) -> ChatStream:
        """Start a streaming chat completion and return its handle.

        The call returns immediately. Failures of any phase, including body
        serialization, arrive on ``stream.errors`` (or are raised when
        iterating the handle); both channels close when the worker ends.

        Parameters:
            request: Chat request; sent with ``"stream": true``.
            options: Per-call identity header overrides.
            token: Cancellation token; a fresh one is created when omitted
                and exposed as ``stream.token``.
            frame_buffer: Capacity of the frame channel.
            offer_timeout: Seconds the worker waits on a full frame channel
                before failing with ``StreamStalledError``. Defaults to the
                configured value (indefinite unless set).
        """
        token = token or CancellationToken()
        config = self._config
        timeouts = self._transport.timeouts
        frames: Channel[ChatStreamChunk] = Channel(frame_buffer, poll_interval=timeouts.stream_poll_seconds)
        errors: Channel[ClientError] = Channel(STREAM_ERROR_BUFFER)

        def _start(tok: CancellationToken):
            content = encode_json_body(request, forced={"stream": True})
            return self._open(
                "POST",
                CHAT_COMPLETIONS_PATH,
                content=content,
                config=config,
                options=options,
                token=tok,
                streaming=True,
            )

        dispatcher = StreamDispatcher(
            _start,
            token=token,
            frames=frames,
            errors=errors,
            offer_timeout=offer_timeout if offer_timeout is not None else timeouts.stream_offer_timeout_seconds,
            ctx=LogContext(model=request.model, method="POST", path=CHAT_COMPLETIONS_PATH),
        )
        dispatcher.start()
        return ChatStream(dispatcher, frames=frames, errors=errors, token=token)


__all__ = ["HackersEraStreamingMixin"]
