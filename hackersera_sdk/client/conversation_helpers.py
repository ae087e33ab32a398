"""Conversation history, feedback and user profile helpers."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional

from ..base.cancellation import CancellationToken
from ..base.request import RequestOptions
from ..models.conversations import (
    ConversationDeleteResponse,
    ConversationDetail,
    ConversationListResponse,
    ConversationSearchResponse,
    FeedbackRequest,
    FeedbackResponse,
    ProfileUpdateRequest,
    UserProfile,
)
from .helpers import path_segment

CONVERSATIONS_PATH = "/v1/conversations"
PROFILE_PATH = "/v1/profile"


def _profile_options(user_id: str, options: Optional[RequestOptions]) -> RequestOptions:
    """Per-call options whose ``X-User-ID`` is pinned to ``user_id``."""
    return replace(options or RequestOptions(), user_id=user_id)


class HackersEraConversationMixin:
    """Mixin for ``/v1/conversations``, ``/v1/feedback`` and ``/v1/profile``."""

    def list_conversations(
        self,
        limit: int = 0,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ConversationListResponse:
        """List conversations; ``limit`` is sent only when positive."""
        params: Dict[str, Any] = {"limit": limit} if limit > 0 else {}
        return self._call(
            "GET", CONVERSATIONS_PATH, ConversationListResponse, params=params or None, options=options, token=token
        )

    def get_conversation(
        self,
        conversation_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ConversationDetail:
        return self._call(
            "GET",
            f"{CONVERSATIONS_PATH}/{path_segment(conversation_id)}",
            ConversationDetail,
            options=options,
            token=token,
        )

    def search_conversations(
        self,
        query: str,
        limit: int = 0,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ConversationSearchResponse:
        """Full-text search over past turns."""
        params: Dict[str, Any] = {"query": query}
        if limit > 0:
            params["limit"] = limit
        return self._call(
            "GET",
            f"{CONVERSATIONS_PATH}/search",
            ConversationSearchResponse,
            params=params,
            options=options,
            token=token,
        )

    def delete_conversation(
        self,
        conversation_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ConversationDeleteResponse:
        return self._call(
            "DELETE",
            f"{CONVERSATIONS_PATH}/{path_segment(conversation_id)}",
            ConversationDeleteResponse,
            options=options,
            token=token,
        )

    def submit_feedback(
        self,
        request: FeedbackRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FeedbackResponse:
        """Rate a response (1 or -1), optionally with a correction."""
        return self._call("POST", "/v1/feedback", FeedbackResponse, body=request, options=options, token=token)

    def get_profile(
        self,
        user_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> UserProfile:
        """Fetch the profile of ``user_id`` (sent as ``X-User-ID``)."""
        return self._call(
            "GET", PROFILE_PATH, UserProfile, options=_profile_options(user_id, options), token=token
        )

    def update_profile(
        self,
        user_id: str,
        request: ProfileUpdateRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> UserProfile:
        return self._call(
            "PUT",
            PROFILE_PATH,
            UserProfile,
            body=request,
            options=_profile_options(user_id, options),
            token=token,
        )


__all__ = ["HackersEraConversationMixin"]
