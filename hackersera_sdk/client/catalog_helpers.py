"""Model catalog, embeddings and service probes."""

from __future__ import annotations

from typing import Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.request import RequestOptions
from ..models.catalog import EmbeddingRequest, EmbeddingResponse, HealthResponse, Model, ModelList, ReadyResponse
from .helpers import path_segment

# Probes report a degraded service with 503 and a regular body.
_PROBE_ACCEPT = (httpx.codes.OK, httpx.codes.SERVICE_UNAVAILABLE)


class HackersEraCatalogMixin:
    """Mixin for ``/v1/models``, ``/v1/embeddings``, ``/health``, ``/ready`` and ``/metrics``."""

    def list_models(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ModelList:
        return self._call("GET", "/v1/models", ModelList, options=options, token=token)

    def get_model(
        self,
        model_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Model:
        return self._call("GET", f"/v1/models/{path_segment(model_id)}", Model, options=options, token=token)

    def create_embedding(
        self,
        request: EmbeddingRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> EmbeddingResponse:
        """Embed one string or a batch; ``data`` follows the input order."""
        return self._call("POST", "/v1/embeddings", EmbeddingResponse, body=request, options=options, token=token)

    def health(self, *, token: Optional[CancellationToken] = None) -> HealthResponse:
        """Liveness probe. Sent without credentials; 503 still decodes."""
        return self._call("GET", "/health", HealthResponse, identity=False, accept=_PROBE_ACCEPT, token=token)

    def ready(self, *, token: Optional[CancellationToken] = None) -> ReadyResponse:
        """Readiness probe with per-dependency ``checks``; 503 still decodes."""
        return self._call("GET", "/ready", ReadyResponse, identity=False, accept=_PROBE_ACCEPT, token=token)

    def get_metrics(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> str:
        """Return the Prometheus text exposition verbatim."""
        return self._call_text("GET", "/metrics", options=options, token=token)


__all__ = ["HackersEraCatalogMixin"]
