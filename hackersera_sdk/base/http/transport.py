"""Single-exchange HTTP transport.

Purpose:
    Execute exactly one HTTP exchange per call on top of an ``httpx.Client``,
    in one of two modes:

    - bounded: finite per-phase deadline, used for every synchronous call;
    - streaming: no read deadline, used only for ``chat_completion_stream``.

Failure modes:
    - Request construction problems (invalid URL) raise ``RequestBuildError``
      with action ``"create request"``.
    - Connection-level failures (DNS, refusal, TLS, timeouts, protocol
      violations before a status line) raise ``TransportError`` with action
      ``"send request"``. No body is read in that case.
    - A cancelled token raises ``TransportError`` coded ``CANCELLED`` before
      the request leaves, or right after headers arrive (the response is
      closed first).

Responses are always opened in streaming mode; the caller owns the returned
response and must close it on every exit path.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..constants import ACTION_CREATE_REQUEST, ACTION_SEND_REQUEST
from ..errors import ErrorCode, RequestBuildError, TransportError, classify_exception
from ..logging import LogContext, get_logger, log_event
from ..timeouts import TimeoutConfig, get_timeout_config


class Transport:
    """Thin wrapper over ``httpx.Client`` applying mode timeouts and error mapping.

    Parameters:
        client: The ``httpx.Client`` executing requests. Its own default
            timeout is ignored; each request carries the mode timeout.
        timeouts: Timeout settings; defaults to :func:`get_timeout_config`.
        logger: Optional logger; defaults to ``hackersera_sdk.http``.
    """

    def __init__(
        self,
        client: httpx.Client,
        timeouts: Optional[TimeoutConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._client = client
        self._timeouts = timeouts or get_timeout_config()
        self._logger = logger or get_logger("hackersera_sdk.http")

    @property
    def client(self) -> httpx.Client:
        return self._client

    @property
    def timeouts(self) -> TimeoutConfig:
        return self._timeouts

    def build(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        streaming: bool = False,
    ) -> httpx.Request:
        """Construct the request with the timeout of the selected mode."""
        timeout = self._timeouts.streaming_timeout() if streaming else self._timeouts.bounded_timeout()
        try:
            return self._client.build_request(
                method,
                url,
                headers=dict(headers),
                content=content,
                params=params,
                timeout=timeout,
            )
        except httpx.InvalidURL as exc:
            raise RequestBuildError(str(exc), action=ACTION_CREATE_REQUEST, raw=exc) from exc

    def send(
        self,
        request: httpx.Request,
        *,
        token: Optional[CancellationToken] = None,
    ) -> httpx.Response:
        """Send ``request`` and return the open (unread) response.

        Raises:
            TransportError: On connectivity failure or observed cancellation.
        """
        ctx = LogContext(method=request.method, path=request.url.path)
        self._raise_if_cancelled(token, ctx)
        t0 = time.perf_counter()
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            code = classify_exception(exc)
            log_event(
                self._logger,
                "http.request.error",
                ctx,
                level=logging.WARNING,
                error_code=code.value,
                failure_class=exc.__class__.__name__,
                elapsed_ms=round((time.perf_counter() - t0) * 1000.0, 2),
            )
            raise TransportError(str(exc) or exc.__class__.__name__, action=ACTION_SEND_REQUEST, code=code, raw=exc) from exc
        if token is not None and token.cancelled:
            response.close()
            self._raise_if_cancelled(token, ctx)
        log_event(
            self._logger,
            "http.request.end",
            ctx,
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - t0) * 1000.0, 2),
        )
        return response

    def _raise_if_cancelled(self, token: Optional[CancellationToken], ctx: LogContext) -> None:
        if token is None:
            return
        try:
            token.raise_if_cancelled()
        except CancelledError as exc:
            log_event(self._logger, "http.request.cancelled", ctx, reason=token.reason)
            raise TransportError(str(exc), action=ACTION_SEND_REQUEST, code=ErrorCode.CANCELLED, raw=exc) from exc


__all__ = ["Transport"]
