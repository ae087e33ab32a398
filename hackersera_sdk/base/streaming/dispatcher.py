"""Background worker that decodes a streaming completion into two channels.

Purpose:
    Own the HTTP response of one ``chat_completion_stream`` call for its whole
    lifetime, turn the SSE body into :class:`ChatStreamChunk` frames and hand
    them to the consumer through a bounded frame channel, while failures go
    to a one-slot error channel.

State machine (run on a single daemon thread):
    PENDING     compose + send through the injected starter
    VALIDATING  non-200 status -> error classifier -> FAILED
    STREAMING   read lines; ``[DONE]`` or end of body -> DONE;
                read failure -> FAILED; cancellation -> FAILED (no error)

Channel discipline:
    Both channels are closed exactly once, by this worker only, after its
    last send. The error (if any) is sent before either channel closes, so a
    consumer that drains frames first and then reads the error channel never
    misses it. Frames are delivered in wire order.

Cancellation:
    The token is checked before sending, after every line read and while
    waiting for room in a full frame channel. Once the response is open, a
    token callback also closes it, so a read parked inside the socket fails
    at once; that failure is reported as cancellation, not as a read error.

Resource handling:
    The response is closed on every exit path through an ``ExitStack``.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import ExitStack
from typing import Callable, Iterator, Optional

import httpx

from ...models.chat import ChatStreamChunk
from ..cancellation import CancellationToken
from ..constants import ACTION_DELIVER_FRAME, ACTION_READ_STREAM, SSE_MAX_LINE_BYTES
from ..errors import (
    ClientError,
    ErrorCode,
    StreamReadError,
    StreamStalledError,
    classify_exception,
    parse_error_response,
)
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from .channel import Channel, SendResult
from .decoder import LineKind, decode_line
from .stream_state import StreamState
from .streaming_metrics import StreamMetrics

# Sends the request and returns the open response; raises ClientError.
StreamStarter = Callable[[CancellationToken], httpx.Response]


class StreamDispatcher:
    """Single-use worker driving one streaming call.

    Parameters:
        starter: Callable performing composition and the HTTP send. It runs
            on the worker thread so construction and transport failures are
            reported through the error channel like any other failure.
        token: Cancellation token shared with the consumer.
        frames: Bounded frame channel (consumer side reads it).
        errors: One-slot error channel.
        offer_timeout: Seconds to wait for room in ``frames`` before giving up
            with :class:`StreamStalledError`; ``None`` waits indefinitely.
        max_line_bytes: Longest accepted body line.
        logger: Optional logger; defaults to ``hackersera_sdk.stream``.
        ctx: Log correlation context.
    """

    def __init__(
        self,
        starter: StreamStarter,
        *,
        token: CancellationToken,
        frames: Channel[ChatStreamChunk],
        errors: Channel[ClientError],
        offer_timeout: Optional[float] = None,
        max_line_bytes: int = SSE_MAX_LINE_BYTES,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._starter = starter
        self._token = token
        self._frames = frames
        self._errors = errors
        self._offer_timeout = offer_timeout
        self._max_line_bytes = max_line_bytes
        self._logger = logger or get_logger("hackersera_sdk.stream")
        self._ctx = ctx or LogContext()
        self._state = StreamState.PENDING
        self._cancelled = False
        self._thread: Optional[threading.Thread] = None
        self._finished = threading.Event()
        self.metrics = StreamMetrics()

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def cancelled(self) -> bool:
        """Whether the worker stopped because it observed cancellation."""
        return self._cancelled

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    def start(self) -> None:
        """Spawn the worker thread (once)."""
        if self._thread is not None:
            raise RuntimeError("stream dispatcher already started")
        self._thread = threading.Thread(target=self.run, name="hackersera-stream", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker to finish; returns whether it did."""
        return self._finished.wait(timeout)

    def run(self) -> None:
        """Execute the state machine on the calling thread."""
        t0 = time.perf_counter()
        error: Optional[ClientError] = None
        log_event(self._logger, "stream.start", self._ctx)
        try:
            with ExitStack() as stack:
                response = self._starter(self._token)
                stack.callback(response.close)
                stack.callback(self._token.register(lambda _reason: self._abort(response)))
                self._state = StreamState.VALIDATING
                if response.status_code != httpx.codes.OK:
                    raise parse_error_response(response)
                self._state = StreamState.STREAMING
                self._pump(response, t0)
        except ClientError as exc:
            error = exc
        except Exception as exc:
            error = StreamReadError(
                str(exc) or exc.__class__.__name__,
                action=ACTION_READ_STREAM,
                code=classify_exception(exc),
                raw=exc,
            )
        finally:
            self._finalize(error, t0)

    def _pump(self, response: httpx.Response, t0: float) -> None:
        for line in self._lines(response):
            if self._token.cancelled:
                self._cancelled = True
                return
            decoded = decode_line(line)
            if decoded.kind is LineKind.IGNORED:
                continue
            if decoded.kind is LineKind.DONE:
                return
            if decoded.kind is LineKind.MALFORMED:
                self.metrics.skipped += 1
                log_event(self._logger, "stream.frame.skipped", self._ctx, level=logging.DEBUG, reason=decoded.reason)
                continue
            frame = decoded.frame
            result = self._frames.send(frame, token=self._token, timeout=self._offer_timeout)
            if result is SendResult.CANCELLED:
                self._cancelled = True
                return
            if result is SendResult.TIMED_OUT:
                raise StreamStalledError(
                    f"consumer did not accept a frame within {self._offer_timeout}s",
                    action=ACTION_DELIVER_FRAME,
                )
            self._record_delivery(frame, t0)

    def _lines(self, response: httpx.Response) -> Iterator[str]:
        """Yield body lines, mapping read failures to ``StreamReadError``."""
        lines = response.iter_lines()
        while True:
            try:
                line = next(lines)
            except StopIteration:
                return
            except (httpx.HTTPError, httpx.StreamError) as exc:
                if self._token.cancelled:
                    self._cancelled = True
                    return
                raise StreamReadError(
                    str(exc) or exc.__class__.__name__,
                    action=ACTION_READ_STREAM,
                    code=classify_exception(exc),
                    raw=exc,
                ) from exc
            # utf-8 needs at most 4 bytes per character
            if len(line) * 4 > self._max_line_bytes and len(line.encode("utf-8")) > self._max_line_bytes:
                raise StreamReadError(
                    f"line exceeds {self._max_line_bytes} bytes",
                    action=ACTION_READ_STREAM,
                    code=ErrorCode.VALIDATION,
                )
            yield line

    def _abort(self, response: httpx.Response) -> None:
        """Close ``response`` from the cancelling thread to unblock a pending read."""
        try:
            response.close()
        except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
            log_event(self._logger, "stream.abort.failed", self._ctx, level=logging.DEBUG, error=str(exc))

    def _record_delivery(self, frame: ChatStreamChunk, t0: float) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_frame_ms = (time.perf_counter() - t0) * 1000.0
            if frame.id and not self._ctx.response_id:
                self._ctx.response_id = frame.id
        self.metrics.emitted += 1
        if frame.usage is not None:
            self.metrics.apply_usage(frame.usage)

    def _finalize(self, error: Optional[ClientError], t0: float) -> None:
        self.metrics.total_duration_ms = (time.perf_counter() - t0) * 1000.0
        try:
            if error is not None:
                self._state = StreamState.FAILED
                self._errors.send(error)
                event, level = "stream.error", logging.WARNING
            elif self._cancelled:
                self._state = StreamState.FAILED
                event, level = "stream.cancelled", logging.INFO
            else:
                self._state = StreamState.DONE
                event, level = "stream.end", logging.INFO
            normalized_log_event(
                self._logger,
                event,
                self._ctx,
                phase="finalize",
                level=level,
                error_code=error.code.value if error is not None else None,
                emitted=self.metrics.emitted > 0,
                tokens=self.metrics.tokens(),
                emitted_count=self.metrics.emitted,
                skipped_count=self.metrics.skipped,
                time_to_first_frame_ms=self.metrics.time_to_first_frame_ms,
                total_duration_ms=self.metrics.total_duration_ms,
                cancel_reason=self._token.reason if self._cancelled else None,
                error=str(error) if error is not None else None,
            )
        finally:
            self._frames.close()
            self._errors.close()
            self._finished.set()


__all__ = ["StreamDispatcher", "StreamStarter"]
