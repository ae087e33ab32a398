"""Knowledge graph and learned facts helpers."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.request import RequestOptions
from ..models.knowledge import Fact, FactCreateRequest, FactListResponse, FactUpdateRequest, KnowledgeGraphResponse
from .helpers import path_segment

FACTS_PATH = "/v1/knowledge/facts"
_CREATE_ACCEPT = (httpx.codes.OK, httpx.codes.CREATED)


class HackersEraKnowledgeMixin:
    """Mixin for ``/v1/knowledge``."""

    def query_knowledge_graph(
        self,
        query: str = "",
        limit: int = 0,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> KnowledgeGraphResponse:
        """Return entities matching ``query`` with the edges between them."""
        params: Dict[str, Any] = {"query": query}
        if limit > 0:
            params["limit"] = limit
        return self._call(
            "GET", "/v1/knowledge/graph", KnowledgeGraphResponse, params=params, options=options, token=token
        )

    def list_facts(
        self,
        limit: int = 0,
        verified: Optional[bool] = None,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FactListResponse:
        """List learned facts, optionally filtered by verification status."""
        params: Dict[str, Any] = {}
        if limit > 0:
            params["limit"] = limit
        if verified is not None:
            params["verified"] = "true" if verified else "false"
        return self._call("GET", FACTS_PATH, FactListResponse, params=params or None, options=options, token=token)

    def create_fact(
        self,
        request: FactCreateRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Fact:
        return self._call(
            "POST", FACTS_PATH, Fact, body=request, accept=_CREATE_ACCEPT, options=options, token=token
        )

    def create_facts(
        self,
        facts: Iterable[FactCreateRequest],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FactListResponse:
        return self._call(
            "POST",
            FACTS_PATH,
            FactListResponse,
            body={"facts": list(facts)},
            accept=_CREATE_ACCEPT,
            options=options,
            token=token,
        )

    def update_fact(
        self,
        fact_id: int,
        request: FactUpdateRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Fact:
        """Partially update a fact; fields left as ``None`` are not sent."""
        return self._call(
            "PUT", f"{FACTS_PATH}/{path_segment(fact_id)}", Fact, body=request, options=options, token=token
        )


__all__ = ["HackersEraKnowledgeMixin"]
