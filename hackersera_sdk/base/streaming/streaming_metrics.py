"""Streaming metrics data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...models.chat import Usage


@dataclass
class StreamMetrics:
    """Counters collected by the stream worker for a single call.

    Attributes:
        emitted: Frames delivered to the frame channel.
        skipped: Data lines dropped because they did not decode.
        time_to_first_frame_ms: Delay between start and the first delivery.
        total_duration_ms: Worker lifetime, set at finalize.
        prompt_tokens / completion_tokens / total_tokens: Copied from the
            usage-bearing frame when the server sends one.
    """

    emitted: int = 0
    skipped: int = 0
    time_to_first_frame_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def apply_usage(self, usage: Usage) -> None:
        self.prompt_tokens = usage.prompt_tokens
        self.completion_tokens = usage.completion_tokens
        self.total_tokens = usage.total_tokens

    def tokens(self) -> Optional[Dict[str, Any]]:
        """Canonical token mapping for logs, ``None`` when no usage was seen."""
        if self.total_tokens is None:
            return None
        return {"prompt": self.prompt_tokens, "completion": self.completion_tokens, "total": self.total_tokens}


__all__ = ["StreamMetrics"]
