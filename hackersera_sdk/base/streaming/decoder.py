"""Server-sent event line decoder for chat completion streams.

Purpose:
    Classify one line of a ``text/event-stream`` body and, for data lines,
    decode the JSON payload into a :class:`ChatStreamChunk`.

Rules:
    - blank lines separate events and are ignored;
    - lines without the ``"data: "`` prefix (comments, keep-alives, ``event:``
      fields) are ignored;
    - ``data: [DONE]`` marks the normal end of the stream;
    - any other payload is parsed; a payload that is not valid JSON or does
      not fit the frame schema is reported as ``MALFORMED`` so the caller can
      skip it without aborting the stream.

This module performs no I/O and never raises for bad input.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional

from pydantic import ValidationError

from ...models.chat import ChatStreamChunk
from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL


class LineKind(enum.Enum):
    IGNORED = "ignored"
    DONE = "done"
    FRAME = "frame"
    MALFORMED = "malformed"


class DecodedLine(NamedTuple):
    kind: LineKind
    frame: Optional[ChatStreamChunk] = None
    reason: Optional[str] = None


_IGNORED = DecodedLine(LineKind.IGNORED)
_DONE = DecodedLine(LineKind.DONE)


def decode_line(line: str) -> DecodedLine:
    """Decode a single stream line (without its terminating newline).

    Examples:
        ``""`` -> IGNORED; ``": ping"`` -> IGNORED;
        ``"data: [DONE]"`` -> DONE;
        ``'data: {"id": "c1", "choices": []}'`` -> FRAME;
        ``"data: {oops"`` -> MALFORMED.
    """
    if not line or not line.startswith(SSE_DATA_PREFIX):
        return _IGNORED
    payload = line[len(SSE_DATA_PREFIX):]
    if payload == SSE_DONE_SENTINEL:
        return _DONE
    try:
        frame = ChatStreamChunk.model_validate_json(payload)
    except ValidationError as exc:
        return DecodedLine(LineKind.MALFORMED, reason=exc.errors()[0]["type"] if exc.errors() else "invalid")
    return DecodedLine(LineKind.FRAME, frame=frame)


__all__ = ["LineKind", "DecodedLine", "decode_line"]
