"""Tests for the non-chat endpoints.

Each call is checked for method, path, query parameters, accepted statuses
and decoding into the expected DTO.
"""
from __future__ import annotations

import httpx
import pytest

from hackersera_sdk.base.errors import APIError, DecodeError
from hackersera_sdk.models import (
    DocumentUploadRequest,
    EmbeddingRequest,
    FactCreateRequest,
    FactUpdateRequest,
    FeedbackRequest,
    ProfileUpdateRequest,
    SearchRequest,
)
from hackersera_sdk.tests.helpers import Recorder, ScriptedStream, json_response, make_client


def _client(body, status=200):
    rec = Recorder(lambda req: json_response(body, status=status))
    return make_client(rec), rec


def test_models_and_get_model_path_encoding():
    client, rec = _client({"object": "list", "data": [{"id": "hackersera-ai", "owned_by": "hackersera"}]})
    models = client.list_models()
    assert models.data[0].id == "hackersera-ai"  # nosec B101
    assert rec.last.method == "GET" and rec.last.url.path == "/v1/models"  # nosec B101

    client, rec = _client({"id": "a/b"})
    assert client.get_model("a/b").id == "a/b"  # nosec B101
    assert rec.last.url.raw_path == b"/v1/models/a%2Fb"  # nosec B101


def test_create_embedding_batch():
    body = {
        "object": "list",
        "data": [{"object": "embedding", "embedding": [0.1, 0.2], "index": 0}, {"embedding": [0.3], "index": 1}],
        "model": "hackersera-ai-embedding",
        "usage": {"prompt_tokens": 4, "total_tokens": 4},
    }
    client, rec = _client(body)
    resp = client.create_embedding(EmbeddingRequest(input=["a", "b"], model="hackersera-ai-embedding"))
    assert [d.index for d in resp.data] == [0, 1]  # nosec B101
    assert rec.last_json() == {"input": ["a", "b"], "model": "hackersera-ai-embedding"}  # nosec B101


@pytest.mark.parametrize("status", [200, 503])
def test_health_accepts_503_and_sends_no_credentials(status):
    client, rec = _client({"status": "degraded", "claude_cli": "missing", "version": "1.2.0"}, status=status)
    client.set_user_id("U1")
    health = client.health()
    assert health.status == "degraded" and health.version == "1.2.0"  # nosec B101
    assert "Authorization" not in rec.last.headers  # nosec B101
    assert "X-User-ID" not in rec.last.headers  # nosec B101


def test_ready_rejects_other_statuses():
    client, _ = _client({"error": {"message": "nope", "type": "server_error"}}, status=500)
    with pytest.raises(APIError) as info:
        client.ready()
    assert info.value.status_code == 500  # nosec B101


def test_ready_decodes_checks():
    client, rec = _client({"ready": True, "version": "1", "checks": {"db": "ok"}})
    assert client.ready().checks == {"db": "ok"}  # nosec B101
    assert rec.last.url.path == "/ready"  # nosec B101


def test_get_metrics_returns_text():
    text = "# HELP requests_total Total\nrequests_total 3\n"
    rec = Recorder(lambda req: httpx.Response(200, text=text))
    assert make_client(rec).get_metrics() == text  # nosec B101
    assert rec.last.url.path == "/metrics"  # nosec B101


def test_body_read_failure_is_decode_error():
    def handler(req):
        return httpx.Response(200, stream=ScriptedStream([b'{"obj', httpx.ReadError("reset", request=req)]))

    with pytest.raises(DecodeError) as info:
        make_client(handler).list_models()
    assert info.value.action == "read response"  # nosec B101


def test_upload_documents_accepts_202():
    client, rec = _client({"id": "doc-1", "filename": "a.txt", "status": "processing"}, status=202)
    doc = client.upload_document(DocumentUploadRequest(content="hello", filename="a.txt"))
    assert doc.status == "processing"  # nosec B101
    assert rec.last_json() == {"content": "hello", "filename": "a.txt"}  # nosec B101

    client, rec = _client({"object": "list", "data": [{"id": "d1"}, {"id": "d2"}], "total": 2}, status=202)
    docs = client.upload_documents(
        [DocumentUploadRequest(content="a", filename="a.txt"), DocumentUploadRequest(content="b", filename="b.txt")]
    )
    assert docs.total == 2  # nosec B101
    assert [d["filename"] for d in rec.last_json()["documents"]] == ["a.txt", "b.txt"]  # nosec B101


def test_document_get_delete_and_search():
    client, rec = _client({"id": "doc 1", "deleted": True})
    assert client.delete_document("doc 1").deleted  # nosec B101
    assert rec.last.method == "DELETE" and rec.last.url.raw_path == b"/v1/documents/doc%201"  # nosec B101

    client, rec = _client({"object": "list", "data": [{"chunk_id": "c1", "score": 0.9}], "query": "q", "total": 1})
    resp = client.search(SearchRequest(query="q", top_k=3))
    assert resp.data[0].score == 0.9  # nosec B101
    assert rec.last_json() == {"query": "q", "top_k": 3}  # nosec B101


def test_conversations_query_params():
    client, rec = _client({"object": "list", "data": [], "total": 0})
    client.list_conversations()
    assert rec.last.url.query == b""  # nosec B101
    client.list_conversations(limit=5)
    assert rec.last.url.params["limit"] == "5"  # nosec B101

    client, rec = _client({"object": "list", "data": [{"turn_id": 3}], "query": "a b", "total": 1})
    resp = client.search_conversations("a b&c", limit=2)
    assert resp.data[0].turn_id == 3  # nosec B101
    assert rec.last.url.params["query"] == "a b&c" and rec.last.url.params["limit"] == "2"  # nosec B101


def test_get_and_delete_conversation():
    client, rec = _client({"id": "c1", "turns": [{"id": 1, "role": "user", "content": "hi"}]})
    detail = client.get_conversation("c1")
    assert detail.turns[0].id == 1  # nosec B101
    client, rec = _client({"id": "c1", "deleted": True})
    assert client.delete_conversation("c1").deleted  # nosec B101
    assert rec.last.method == "DELETE"  # nosec B101


def test_submit_feedback_accepts_only_200():
    client, rec = _client({"id": 11, "conversation_id": "c1", "rating": 1})
    assert client.submit_feedback(FeedbackRequest(conversation_id="c1", rating=1)).id == 11  # nosec B101
    assert rec.last_json() == {"conversation_id": "c1", "rating": 1}  # nosec B101

    client, _ = _client({"id": 11}, status=201)
    with pytest.raises(APIError):
        client.submit_feedback(FeedbackRequest(conversation_id="c1", rating=-1))


def test_profile_forces_user_header():
    client, rec = _client({"user_id": "alice", "display_name": "Alice"})
    client.set_user_id("default-user")
    assert client.get_profile("alice").display_name == "Alice"  # nosec B101
    assert rec.last.headers["X-User-ID"] == "alice"  # nosec B101
    client.update_profile("alice", ProfileUpdateRequest(display_name="Al"))
    assert rec.last.method == "PUT" and rec.last_json() == {"display_name": "Al"}  # nosec B101
    assert rec.last.headers["X-User-ID"] == "alice"  # nosec B101


def test_knowledge_graph_and_facts():
    client, rec = _client({"object": "graph", "data": [{"id": "n1"}], "edges": [{"id": 1, "from_id": "n1", "to_id": "n2"}]})
    graph = client.query_knowledge_graph("python", limit=10)
    assert graph.edges[0].to_id == "n2"  # nosec B101
    assert rec.last.url.params["query"] == "python" and rec.last.url.params["limit"] == "10"  # nosec B101

    client, rec = _client({"object": "list", "data": [{"id": 1, "content": "x", "verified": False}], "total": 1})
    client.list_facts(limit=3, verified=False)
    assert rec.last.url.params["verified"] == "false"  # nosec B101
    client.list_facts()
    assert rec.last.url.query == b""  # nosec B101


def test_fact_create_and_update():
    client, rec = _client({"id": 7, "content": "sky is blue"}, status=201)
    fact = client.create_fact(FactCreateRequest(content="sky is blue", confidence=0.0))
    assert fact.id == 7  # nosec B101
    assert rec.last_json() == {"content": "sky is blue", "confidence": 0.0}  # nosec B101

    client, rec = _client({"object": "list", "data": [{"id": 1}, {"id": 2}], "total": 2}, status=201)
    client.create_facts([FactCreateRequest(content="a"), FactCreateRequest(content="b")])
    assert rec.last_json() == {"facts": [{"content": "a"}, {"content": "b"}]}  # nosec B101

    client, rec = _client({"id": 7, "verified": True})
    client.update_fact(7, FactUpdateRequest(verified=True))
    assert rec.last.url.path == "/v1/knowledge/facts/7"  # nosec B101
    assert rec.last_json() == {"verified": True}  # nosec B101


@pytest.mark.parametrize(
    "method_name,path,body,check",
    [
        ("get_cognitive_stats", "/v1/cognitive/stats", {"total_turns": 9}, lambda r: r.total_turns == 9),
        ("get_usage", "/v1/usage", {"by_model": [{"model": "m", "requests": 2}]}, lambda r: r.by_model[0].requests == 2),
        ("get_recent_usage", "/v1/usage/recent", {"count": 1, "data": [{"id": 1}]}, lambda r: r.data[0].id == 1),
        ("get_cache_stats", "/v1/cache/stats", {"tokens_saved": 100}, lambda r: r.tokens_saved == 100),
    ],
)
def test_stats_endpoints(method_name, path, body, check):
    client, rec = _client(body)
    result = getattr(client, method_name)()
    assert check(result)  # nosec B101
    assert rec.last.url.path == path  # nosec B101
