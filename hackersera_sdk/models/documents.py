"""Document ingestion and retrieval (RAG search) DTOs."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .base import WireModel


class DocumentUploadRequest(WireModel):
    """A document to index; ``tags`` can later scope searches."""

    content: str
    filename: str
    tags: Optional[Dict[str, str]] = None


class DocumentResponse(WireModel):
    id: str = ""
    filename: str = ""
    status: str = ""
    tags: Dict[str, str] = Field(default_factory=dict)
    chunk_count: int = 0
    error: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class DocumentListResponse(WireModel):
    object: str = ""
    data: List[DocumentResponse] = Field(default_factory=list)
    total: int = 0


class DocumentDeleteResponse(WireModel):
    id: str = ""
    deleted: bool = False


class SearchRequest(WireModel):
    """Body of ``POST /v1/search``."""

    query: str
    top_k: Optional[int] = None
    threshold: Optional[float] = None
    tags: Optional[Dict[str, str]] = None


class SearchResult(WireModel):
    chunk_id: str = ""
    document_id: str = ""
    filename: str = ""
    content: str = ""
    score: float = 0.0
    chunk_index: int = 0


class SearchResponse(WireModel):
    object: str = ""
    data: List[SearchResult] = Field(default_factory=list)
    query: str = ""
    total: int = 0


__all__ = [
    "DocumentUploadRequest",
    "DocumentResponse",
    "DocumentListResponse",
    "DocumentDeleteResponse",
    "SearchRequest",
    "SearchResult",
    "SearchResponse",
]
