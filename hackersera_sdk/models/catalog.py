"""Model catalog, embeddings and service probe DTOs."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import Field

from .base import WireModel


class Model(WireModel):
    id: str = ""
    object: str = ""
    created: int = 0
    owned_by: str = ""


class ModelList(WireModel):
    object: str = ""
    data: List[Model] = Field(default_factory=list)


class EmbeddingRequest(WireModel):
    """Body of ``POST /v1/embeddings``; ``input`` is one text or a batch."""

    input: Union[str, List[str]]
    model: str
    dimensions: Optional[int] = None
    encoding_format: Optional[str] = None


class EmbeddingData(WireModel):
    object: str = ""
    embedding: List[float] = Field(default_factory=list)
    index: int = 0


class EmbeddingUsage(WireModel):
    prompt_tokens: int = 0
    total_tokens: int = 0


class EmbeddingResponse(WireModel):
    object: str = ""
    data: List[EmbeddingData] = Field(default_factory=list)
    model: str = ""
    usage: EmbeddingUsage = Field(default_factory=EmbeddingUsage)


class HealthResponse(WireModel):
    status: str = ""
    claude_cli: str = ""
    version: str = ""


class ReadyResponse(WireModel):
    ready: bool = False
    version: str = ""
    checks: Dict[str, str] = Field(default_factory=dict)


__all__ = [
    "Model",
    "ModelList",
    "EmbeddingRequest",
    "EmbeddingData",
    "EmbeddingUsage",
    "EmbeddingResponse",
    "HealthResponse",
    "ReadyResponse",
]
