"""Layered request identity settings.

``RequestConfig`` holds the client-wide defaults and is frozen: the client
swaps in a new instance when a setter is called, so a call that already took
a snapshot keeps the values it started with. ``RequestOptions`` carries the
per-call overrides; each field falls back to the default independently.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class RequestConfig:
    """Client-wide header defaults.

    Attributes:
        api_key: Bearer token; empty means no ``Authorization`` header.
        user_id: Default ``X-User-ID``.
        conversation_id: Default ``X-Conversation-ID``.
        cognitive_disabled: Send ``X-Cognitive-Disabled: true`` by default.
    """

    api_key: str = ""
    user_id: str = ""
    conversation_id: str = ""
    cognitive_disabled: bool = False

    def with_user_id(self, user_id: str) -> "RequestConfig":
        return replace(self, user_id=user_id or "")

    def with_conversation_id(self, conversation_id: str) -> "RequestConfig":
        return replace(self, conversation_id=conversation_id or "")

    def with_cognitive_disabled(self, disabled: bool) -> "RequestConfig":
        return replace(self, cognitive_disabled=bool(disabled))

    def __repr__(self) -> str:
        return (
            f"RequestConfig(api_key={'***' if self.api_key else ''!r}, user_id={self.user_id!r}, "
            f"conversation_id={self.conversation_id!r}, cognitive_disabled={self.cognitive_disabled})"
        )


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides. ``None`` (or an empty string) defers to the default.

    ``cognitive_disabled=False`` is an explicit override and suppresses a
    client-wide ``True`` for that call only.
    """

    user_id: Optional[str] = None
    conversation_id: Optional[str] = None
    cognitive_disabled: Optional[bool] = None


__all__ = ["RequestConfig", "RequestOptions"]
