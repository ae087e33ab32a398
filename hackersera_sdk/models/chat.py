"""
Chat completion DTOs (request, response, streaming frames).

Optional generation parameters default to ``None`` and are omitted from the
serialized body, so ``temperature=0.0`` or ``seed=0`` are sent while an unset
value is not.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import WireModel

Role = Literal["system", "user", "assistant", "tool"]


class FunctionCall(WireModel):
    name: str = ""
    arguments: str = ""


class ToolCall(WireModel):
    """A tool invocation emitted by the assistant."""

    id: str = ""
    type: str = "function"
    function: FunctionCall = Field(default_factory=FunctionCall)


class FunctionDefinition(WireModel):
    name: str
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


class Tool(WireModel):
    """A tool the model may call."""

    type: str = "function"
    function: FunctionDefinition


class ResponseFormat(WireModel):
    type: str = "text"
    json_schema: Optional[Dict[str, Any]] = None


class Message(WireModel):
    """A single chat message.

    ``content`` may be ``None`` for assistant messages that only carry tool
    calls.
    """

    role: str
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None


class ChatRequest(WireModel):
    """Body of ``POST /v1/chat/completions``.

    ``stream`` is overwritten by the client according to the call variant
    (``False`` for ``chat_completion``, ``True`` for
    ``chat_completion_stream``); the value set here is never sent as-is.
    """

    model: str
    messages: List[Message]
    stream: bool = False
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    user: Optional[str] = None
    seed: Optional[int] = None
    response_format: Optional[ResponseFormat] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None


class Usage(WireModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Choice(WireModel):
    index: int = 0
    message: Message = Field(default_factory=lambda: Message(role="assistant"))
    finish_reason: Optional[str] = None


class ChatResponse(WireModel):
    """Non-streaming completion result."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
    system_fingerprint: Optional[str] = None
    conversation_id: Optional[str] = None

    @property
    def content(self) -> str:
        """Text of the first choice (empty when absent)."""
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


class ChunkDelta(WireModel):
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


class ChunkChoice(WireModel):
    index: int = 0
    delta: ChunkDelta = Field(default_factory=ChunkDelta)
    finish_reason: Optional[str] = None


class ChatStreamChunk(WireModel):
    """One decoded frame of a streaming completion.

    ``usage`` is populated only on the terminal content frame.
    """

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChunkChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None

    @property
    def content(self) -> str:
        """Delta text of choice 0 (empty when the frame carries none)."""
        for choice in self.choices:
            if choice.index == 0:
                return choice.delta.content or ""
        return ""


__all__ = [
    "Role",
    "FunctionCall",
    "ToolCall",
    "FunctionDefinition",
    "Tool",
    "ResponseFormat",
    "Message",
    "ChatRequest",
    "Usage",
    "Choice",
    "ChatResponse",
    "ChunkDelta",
    "ChunkChoice",
    "ChatStreamChunk",
]
