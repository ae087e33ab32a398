"""Knowledge graph and learned fact DTOs."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import WireModel


class KnowledgeNode(WireModel):
    id: str = ""
    label: str = ""
    type: str = ""
    hit_count: int = 0


class KnowledgeEdge(WireModel):
    id: int = 0
    from_id: str = ""
    to_id: str = ""
    relation: str = ""
    weight: float = 0.0


class KnowledgeGraphResponse(WireModel):
    object: str = ""
    data: List[KnowledgeNode] = Field(default_factory=list)
    edges: List[KnowledgeEdge] = Field(default_factory=list)
    query: str = ""
    total: int = 0


class Fact(WireModel):
    id: int = 0
    content: str = ""
    source: str = ""
    confidence: float = 0.0
    verified: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class FactListResponse(WireModel):
    object: str = ""
    data: List[Fact] = Field(default_factory=list)
    total: int = 0


class FactCreateRequest(WireModel):
    content: str
    source: Optional[str] = None
    confidence: Optional[float] = None
    verified: Optional[bool] = None


class FactUpdateRequest(WireModel):
    """Partial update; fields left at ``None`` are not sent.

    ``confidence=0.0`` and ``verified=False`` are real updates.
    """

    content: Optional[str] = None
    confidence: Optional[float] = None
    verified: Optional[bool] = None


__all__ = [
    "KnowledgeNode",
    "KnowledgeEdge",
    "KnowledgeGraphResponse",
    "Fact",
    "FactListResponse",
    "FactCreateRequest",
    "FactUpdateRequest",
]
