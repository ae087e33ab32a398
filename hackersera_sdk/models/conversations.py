"""Conversation history, feedback and user profile DTOs."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .base import WireModel


class Conversation(WireModel):
    id: str = ""
    title: str = ""
    turn_count: int = 0
    model: str = ""
    user_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ConversationListResponse(WireModel):
    object: str = ""
    data: List[Conversation] = Field(default_factory=list)
    total: int = 0


class ConversationTurn(WireModel):
    id: int = 0
    role: str = ""
    content: str = ""
    model: Optional[str] = None
    created_at: Optional[str] = None


class ConversationDetail(WireModel):
    id: str = ""
    title: str = ""
    turn_count: int = 0
    model: str = ""
    turns: List[ConversationTurn] = Field(default_factory=list)


class ConversationSearchResult(WireModel):
    conversation_id: str = ""
    turn_id: int = 0
    role: str = ""
    content: str = ""
    created_at: Optional[str] = None


class ConversationSearchResponse(WireModel):
    object: str = ""
    data: List[ConversationSearchResult] = Field(default_factory=list)
    query: str = ""
    total: int = 0


class ConversationDeleteResponse(WireModel):
    id: str = ""
    deleted: bool = False


class FeedbackRequest(WireModel):
    """Rating for an assistant turn; ``correction`` feeds the learned facts."""

    conversation_id: str
    rating: int
    turn_id: Optional[int] = None
    comment: Optional[str] = None
    correction: Optional[str] = None
    chunk_ids: Optional[List[str]] = None


class FeedbackResponse(WireModel):
    id: int = 0
    conversation_id: str = ""
    turn_id: Optional[int] = None
    rating: int = 0
    comment: Optional[str] = None
    correction: Optional[str] = None
    created_at: Optional[str] = None


class UserProfile(WireModel):
    user_id: str = ""
    display_name: str = ""
    preferences: Dict[str, str] = Field(default_factory=dict)
    expertise: Dict[str, float] = Field(default_factory=dict)
    topics: Dict[str, int] = Field(default_factory=dict)
    total_queries: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProfileUpdateRequest(WireModel):
    display_name: Optional[str] = None
    preferences: Optional[Dict[str, str]] = None


__all__ = [
    "Conversation",
    "ConversationListResponse",
    "ConversationTurn",
    "ConversationDetail",
    "ConversationSearchResult",
    "ConversationSearchResponse",
    "ConversationDeleteResponse",
    "FeedbackRequest",
    "FeedbackResponse",
    "UserProfile",
    "ProfileUpdateRequest",
]
