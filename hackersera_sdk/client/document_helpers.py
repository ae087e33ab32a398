"""Document ingestion and semantic search helpers.

Uploads are asynchronous on the server side: the service answers
``202 Accepted`` with ``status="processing"`` and indexing continues in the
background. Poll :meth:`get_document` to see when it completes.
"""

from __future__ import annotations

from typing import Iterable, Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.request import RequestOptions
from ..models.documents import (
    DocumentDeleteResponse,
    DocumentListResponse,
    DocumentResponse,
    DocumentUploadRequest,
    SearchRequest,
    SearchResponse,
)
from .helpers import path_segment

DOCUMENTS_PATH = "/v1/documents"
_UPLOAD_ACCEPT = (httpx.codes.OK, httpx.codes.ACCEPTED)


class HackersEraDocumentMixin:
    """Mixin for ``/v1/documents`` and ``/v1/search``."""

    def upload_document(
        self,
        request: DocumentUploadRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> DocumentResponse:
        return self._call(
            "POST", DOCUMENTS_PATH, DocumentResponse, body=request, accept=_UPLOAD_ACCEPT, options=options, token=token
        )

    def upload_documents(
        self,
        documents: Iterable[DocumentUploadRequest],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> DocumentListResponse:
        """Upload several documents in one request."""
        return self._call(
            "POST",
            DOCUMENTS_PATH,
            DocumentListResponse,
            body={"documents": list(documents)},
            accept=_UPLOAD_ACCEPT,
            options=options,
            token=token,
        )

    def list_documents(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> DocumentListResponse:
        return self._call("GET", DOCUMENTS_PATH, DocumentListResponse, options=options, token=token)

    def get_document(
        self,
        document_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> DocumentResponse:
        return self._call(
            "GET", f"{DOCUMENTS_PATH}/{path_segment(document_id)}", DocumentResponse, options=options, token=token
        )

    def delete_document(
        self,
        document_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> DocumentDeleteResponse:
        """Delete a document together with its chunks and embeddings."""
        return self._call(
            "DELETE",
            f"{DOCUMENTS_PATH}/{path_segment(document_id)}",
            DocumentDeleteResponse,
            options=options,
            token=token,
        )

    def search(
        self,
        request: SearchRequest,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> SearchResponse:
        return self._call("POST", "/v1/search", SearchResponse, body=request, options=options, token=token)


__all__ = ["HackersEraDocumentMixin"]
