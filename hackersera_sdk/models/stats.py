"""Usage, cache and cognitive statistics DTOs (read-only)."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import WireModel


class CognitiveStatsResponse(WireModel):
    total_conversations: int = 0
    total_turns: int = 0
    total_feedback: int = 0
    positive_feedback: int = 0
    negative_feedback: int = 0
    total_users: int = 0
    total_knowledge_nodes: int = 0
    total_knowledge_edges: int = 0
    total_learned_facts: int = 0
    verified_facts: int = 0
    avg_fact_confidence: float = 0.0


class UsageByModel(WireModel):
    model: str = ""
    requests: int = 0
    total_tokens: int = 0


class UsageResponse(WireModel):
    total_requests: int = 0
    total_tokens: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0
    avg_latency_ms: float = 0.0
    by_model: List[UsageByModel] = Field(default_factory=list)


class UsageRecord(WireModel):
    id: int = 0
    request_id: str = ""
    model: str = ""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    latency_ms: Optional[float] = None
    created_at: Optional[str] = None


class UsageRecentResponse(WireModel):
    object: str = ""
    count: int = 0
    data: List[UsageRecord] = Field(default_factory=list)


class CacheStatsResponse(WireModel):
    total_entries: int = 0
    total_hits: int = 0
    active_entries: int = 0
    tokens_saved: int = 0
    avg_hit_count: float = 0.0


__all__ = [
    "CognitiveStatsResponse",
    "UsageByModel",
    "UsageResponse",
    "UsageRecord",
    "UsageRecentResponse",
    "CacheStatsResponse",
]
