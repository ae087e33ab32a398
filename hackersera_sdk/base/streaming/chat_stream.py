"""Consumer handle returned by ``chat_completion_stream``.

The handle exposes the two channels directly for callers that want
channel-level control, and offers the usual conveniences on top:

- iterate the handle to receive frames in order; when the stream failed, the
  error is raised after the last delivered frame;
- :meth:`text` / :meth:`collect` drain the stream into a string or an
  accumulated :class:`ChatResponse`;
- :meth:`cancel` (or leaving the ``with`` block) stops the worker.

Consumers that only read ``frames`` and never the error channel do not block
the worker: the error channel has room for its single error.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from ...models.chat import ChatResponse, ChatStreamChunk
from ..cancellation import CancellationToken
from ..errors import ClientError
from .accumulate import accumulate_chunks, join_content
from .channel import Channel, ChannelClosed
from .dispatcher import StreamDispatcher
from .stream_state import StreamState
from .streaming_metrics import StreamMetrics

_UNSET = object()
# Seconds leaving a ``with`` block waits for the worker to finish.
_EXIT_JOIN_SECONDS = 5.0


class ChatStream:
    """Live streaming completion.

    Attributes:
        frames: Channel of decoded frames, closed by the worker when it ends.
        errors: Channel carrying at most one :class:`ClientError`.
        token: Cancellation token driving the worker.
    """

    def __init__(
        self,
        dispatcher: StreamDispatcher,
        *,
        frames: Channel[ChatStreamChunk],
        errors: Channel[ClientError],
        token: CancellationToken,
    ) -> None:
        self._dispatcher = dispatcher
        self.frames = frames
        self.errors = errors
        self.token = token
        self._error: object = _UNSET

    @property
    def state(self) -> StreamState:
        return self._dispatcher.state

    @property
    def metrics(self) -> StreamMetrics:
        return self._dispatcher.metrics

    @property
    def cancelled(self) -> bool:
        """True when the worker stopped early because of cancellation."""
        return self._dispatcher.cancelled

    @property
    def done(self) -> bool:
        return self._dispatcher.finished

    def cancel(self, reason: str = "cancelled by caller") -> None:
        """Request the worker to stop; idempotent."""
        self.token.cancel(reason)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the worker has closed both channels."""
        return self._dispatcher.join(timeout)

    def error(self, timeout: Optional[float] = None) -> Optional[ClientError]:
        """Return the stream's error, or ``None`` when it ended without one.

        Blocks until the worker finishes (or ``timeout`` elapses, raising
        ``TimeoutError``). The result is remembered, so repeated calls agree.
        """
        if self._error is _UNSET:
            try:
                self._error = self.errors.receive(timeout)
            except ChannelClosed:
                self._error = None
        return self._error  # type: ignore[return-value]

    def __iter__(self) -> Iterator[ChatStreamChunk]:
        yield from self.frames
        err = self.error()
        if err is not None:
            raise err

    def chunks(self) -> List[ChatStreamChunk]:
        """Drain the stream into a list, raising its error if any."""
        return list(self)

    def text(self) -> str:
        """Drain the stream and return the concatenated choice-0 text."""
        return join_content(self)

    def collect(self) -> ChatResponse:
        """Drain the stream and fold it into a :class:`ChatResponse`."""
        return accumulate_chunks(self)

    def close(self, timeout: Optional[float] = _EXIT_JOIN_SECONDS) -> bool:
        """Cancel the worker if it is still running and wait for it.

        Returns whether the worker finished within ``timeout``. Cancelling closes
        the response, so a worker parked in a read on a silent server exits
        promptly.
        """
        if not self._dispatcher.finished:
            self.cancel("stream closed by caller")
        return self.wait(timeout)

    def __enter__(self) -> "ChatStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["ChatStream"]
