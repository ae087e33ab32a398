"""Shared helpers for SDK tests.

Provides a scripted response body (``ScriptedStream``) for
``httpx.MockTransport`` handlers, SSE frame builders and a recording handler
wrapper. No network access is involved anywhere.
"""
from __future__ import annotations

import json
import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import httpx

from hackersera_sdk.client import HackersEraClient

BASE_URL = "http://hackersera.test"
API_KEY = "sk-test-123"  # pragma: allowlist secret - fake test credential

ScriptItem = Union[bytes, str, threading.Event, BaseException]


class ScriptedStream(httpx.SyncByteStream):
    """Response body replaying a script.

    Items are yielded in order:
    - ``bytes`` / ``str``: emitted as a body chunk;
    - ``threading.Event``: the body blocks until the event is set (5 s cap);
      closing the body while it blocks fails the read like a closed socket;
    - exception instance: raised from the read, simulating a dropped connection.

    ``closed`` records whether the SDK closed the body.
    """

    def __init__(self, items: Iterable[ScriptItem]) -> None:
        self._items = list(items)
        self.closed = False
        self.consumed = 0
        self._closed = threading.Event()

    def __iter__(self):
        for item in self._items:
            self.consumed += 1
            if isinstance(item, threading.Event):
                deadline = time.monotonic() + 5.0
                while not item.is_set() and not self._closed.is_set() and time.monotonic() < deadline:
                    item.wait(0.01)
                if self._closed.is_set():
                    raise httpx.ReadError("connection closed")
                continue
            if isinstance(item, BaseException):
                raise item
            yield item.encode("utf-8") if isinstance(item, str) else item

    def close(self) -> None:
        self.closed = True
        self._closed.set()


def chunk(
    content: Optional[str] = None,
    *,
    chunk_id: str = "chatcmpl-1",
    role: Optional[str] = None,
    finish_reason: Optional[str] = None,
    usage: Optional[Dict[str, int]] = None,
    model: str = "hackersera-ai",
) -> Dict[str, Any]:
    """Build one ``chat.completion.chunk`` payload."""
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    body: Dict[str, Any] = {
        "id": chunk_id,
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": model,
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }
    if usage is not None:
        body["usage"] = usage
    return body


def sse(payload: Union[Dict[str, Any], str]) -> str:
    """Frame ``payload`` as one SSE event (JSON-encoded unless already text)."""
    data = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {data}\n\n"


DONE = "data: [DONE]\n\n"


def sse_response(items: Iterable[ScriptItem], status: int = 200) -> httpx.Response:
    return httpx.Response(status, headers={"Content-Type": "text/event-stream"}, stream=ScriptedStream(items))


class Recorder:
    """Wrap a MockTransport handler and keep every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> HackersEraClient:
    """Client wired to ``handler`` through ``httpx.MockTransport``."""
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    api_key = kwargs.pop("api_key", API_KEY)
    return HackersEraClient(BASE_URL, api_key, http_client=http_client, **kwargs)


def json_response(body: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json=body)


__all__ = [
    "BASE_URL",
    "API_KEY",
    "ScriptedStream",
    "chunk",
    "sse",
    "DONE",
    "sse_response",
    "Recorder",
    "make_client",
    "json_response",
]
