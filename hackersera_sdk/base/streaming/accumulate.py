"""Fold streaming frames back into a non-streaming response shape."""
from __future__ import annotations

from typing import Dict, Iterable, List

from ...models.chat import ChatResponse, ChatStreamChunk, Choice, Message, ToolCall, Usage


def join_content(frames: Iterable[ChatStreamChunk]) -> str:
    """Concatenate the choice-0 delta text of ``frames`` in the given order."""
    return "".join(frame.content for frame in frames)


def accumulate_chunks(frames: Iterable[ChatStreamChunk]) -> ChatResponse:
    """Accumulate a sequence of frames into a :class:`ChatResponse`.

    - Delta text is appended per choice index in receipt order.
    - The first role seen for a choice wins; the last finish reason wins.
    - Tool call deltas are collected in receipt order without merging.
    - ``id``, ``model`` and ``created`` come from the first frame, ``usage``
      from the frame that carried it.

    An empty sequence yields an empty response.
    """
    first: ChatStreamChunk | None = None
    usage: Usage | None = None
    texts: Dict[int, List[str]] = {}
    roles: Dict[int, str] = {}
    finish: Dict[int, str] = {}
    tools: Dict[int, List[ToolCall]] = {}

    for frame in frames:
        if first is None:
            first = frame
        if frame.usage is not None:
            usage = frame.usage
        for choice in frame.choices:
            texts.setdefault(choice.index, [])
            if choice.delta.role and choice.index not in roles:
                roles[choice.index] = choice.delta.role
            if choice.delta.content:
                texts[choice.index].append(choice.delta.content)
            if choice.delta.tool_calls:
                tools.setdefault(choice.index, []).extend(choice.delta.tool_calls)
            if choice.finish_reason:
                finish[choice.index] = choice.finish_reason

    if first is None:
        return ChatResponse()

    choices = [
        Choice(
            index=index,
            message=Message(
                role=roles.get(index, "assistant"),
                content="".join(texts[index]),
                tool_calls=tools.get(index),
            ),
            finish_reason=finish.get(index),
        )
        for index in sorted(texts)
    ]
    return ChatResponse(
        id=first.id,
        object="chat.completion",
        created=first.created,
        model=first.model,
        choices=choices,
        usage=usage or Usage(),
    )


__all__ = ["accumulate_chunks", "join_content"]
