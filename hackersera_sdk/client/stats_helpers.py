"""Read-only statistics endpoints."""

from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.request import RequestOptions
from ..models.stats import CacheStatsResponse, CognitiveStatsResponse, UsageRecentResponse, UsageResponse


class HackersEraStatsMixin:
    def get_cognitive_stats(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> CognitiveStatsResponse:
        return self._call("GET", "/v1/cognitive/stats", CognitiveStatsResponse, options=options, token=token)

    def get_usage(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> UsageResponse:
        """Aggregate token usage, broken down per model."""
        return self._call("GET", "/v1/usage", UsageResponse, options=options, token=token)

    def get_recent_usage(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> UsageRecentResponse:
        return self._call("GET", "/v1/usage/recent", UsageRecentResponse, options=options, token=token)

    def get_cache_stats(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> CacheStatsResponse:
        return self._call("GET", "/v1/cache/stats", CacheStatsResponse, options=options, token=token)


__all__ = ["HackersEraStatsMixin"]
