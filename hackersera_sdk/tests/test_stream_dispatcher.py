"""Streaming engine tests through ``chat_completion_stream``.

Covers:
- sentinel-terminated stream: ordered frames, joined text, no error
- a corrupt line between two frames is skipped and counted
- non-success status: no frames, exactly one APIError
- cancellation before sending: the server is never contacted
- cancellation mid-stream: no further frames, no error, FAILED state
- connection drop mid-body: frames so far, then one StreamReadError
- slow consumer with an offer timeout: StreamStalledError
- over-long line, EOF without sentinel, response always closed
- ``stream: true`` forced on the wire and identity headers applied
"""
from __future__ import annotations

import threading

import httpx

from hackersera_sdk.base.cancellation import CancellationToken
from hackersera_sdk.base.errors import (
    APIError,
    ErrorCode,
    StreamReadError,
    StreamStalledError,
    TransportError,
)
from hackersera_sdk.base.request import RequestOptions
from hackersera_sdk.base.streaming import ChannelClosed, StreamState
from hackersera_sdk.models import ChatRequest, Message
from hackersera_sdk.tests.helpers import DONE, Recorder, ScriptedStream, chunk, make_client, sse, sse_response

WAIT = 5.0


def _request(stream: bool = False) -> ChatRequest:
    return ChatRequest(model="hackersera-ai", messages=[Message(role="user", content="hi")], stream=stream)


def _drain(stream):
    frames = list(stream.frames)
    return frames, stream.error(timeout=WAIT)


def test_sentinel_terminated_stream_delivers_all_frames():
    print("TEST: Hello + '' + ' world' + [DONE] -> 'Hello world', no error")
    usage = {"prompt_tokens": 4, "completion_tokens": 2, "total_tokens": 6}
    items = [
        sse(chunk("Hello", role="assistant")),
        sse(chunk("")),
        sse(chunk(" world", finish_reason="stop", usage=usage)),
        DONE,
    ]
    rec = Recorder(lambda req: sse_response(items))
    client = make_client(rec)
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert err is None  # nosec B101
    assert "".join(f.content for f in frames) == "Hello world"  # nosec B101
    assert len(frames) == 3  # nosec B101
    assert stream.wait(WAIT)  # nosec B101
    assert stream.state is StreamState.DONE  # nosec B101
    assert not stream.cancelled  # nosec B101
    assert stream.metrics.emitted == 3 and stream.metrics.total_tokens == 6  # nosec B101
    assert stream.metrics.time_to_first_frame_ms is not None  # nosec B101
    assert rec.last_json()["stream"] is True  # nosec B101
    assert rec.last.url.path == "/v1/chat/completions"  # nosec B101


def test_stream_flag_forced_true_even_when_request_says_false():
    rec = Recorder(lambda req: sse_response([DONE]))
    client = make_client(rec)
    req = _request(stream=False)
    client.chat_completion_stream(req).wait(WAIT)
    assert rec.last_json()["stream"] is True  # nosec B101
    assert req.stream is False  # nosec B101


def test_iterating_handle_and_text_helper():
    items = [sse(chunk("a")), sse(chunk("b")), DONE]
    client = make_client(lambda req: sse_response(items))
    with client.chat_completion_stream(_request()) as stream:
        assert stream.text() == "ab"  # nosec B101


def test_corrupt_line_between_frames_is_skipped():
    items = [sse(chunk("one")), "data: {not json\n\n", ": comment\n", sse(chunk("two")), DONE]
    client = make_client(lambda req: sse_response(items))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert [f.content for f in frames] == ["one", "two"]  # nosec B101
    assert err is None  # nosec B101
    assert stream.metrics.skipped == 1  # nosec B101


def test_frames_with_null_fields_are_still_delivered():
    print("TEST: null id/choices/delta fields decode to defaults, no delta text lost")
    first = chunk("Hello", role="assistant")
    first["id"] = None
    first["created"] = None
    bare = {"id": "x", "object": None, "choices": None}
    empty_delta = {"id": "x", "choices": [{"index": None, "delta": None, "finish_reason": None}]}
    items = [sse(first), sse(bare), sse(empty_delta), sse(chunk(" world")), DONE]
    client = make_client(lambda req: sse_response(items))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert err is None  # nosec B101
    assert len(frames) == 4 and stream.metrics.skipped == 0  # nosec B101
    assert "".join(f.content for f in frames) == "Hello world"  # nosec B101
    assert frames[0].id == "" and frames[0].created == 0  # nosec B101
    assert frames[1].choices == []  # nosec B101
    assert frames[2].choices[0].index == 0 and frames[2].choices[0].delta.content is None  # nosec B101


def test_non_success_status_yields_single_api_error():
    print("TEST: 401 before the stream -> zero frames, exactly one APIError, both channels closed")
    body = b'{"error":{"message":"bad key","type":"invalid_request_error"}}'
    client = make_client(lambda req: httpx.Response(401, content=body))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert frames == []  # nosec B101
    assert isinstance(err, APIError)  # nosec B101
    assert err.status_code == 401 and err.message == "bad key"  # nosec B101
    assert err.code is ErrorCode.AUTH  # nosec B101
    assert stream.wait(WAIT)  # nosec B101
    assert stream.state is StreamState.FAILED  # nosec B101
    assert stream.frames.closed and stream.errors.closed  # nosec B101


def test_iteration_raises_stream_error_after_frames():
    client = make_client(lambda req: httpx.Response(500, content=b"internal server error"))
    stream = client.chat_completion_stream(_request())
    try:
        for _ in stream:
            raise AssertionError("no frames expected")
    except APIError as err:
        assert err.status_code == 500 and err.kind == "unknown_error"  # nosec B101
    else:
        raise AssertionError("expected APIError")


def test_cancel_before_send_never_contacts_server():
    called = threading.Event()

    def handler(req):
        called.set()
        return sse_response([sse(chunk("x")), DONE])

    client = make_client(handler)
    tok = CancellationToken()
    tok.cancel("caller gave up")
    stream = client.chat_completion_stream(_request(), token=tok)
    frames, err = _drain(stream)
    assert frames == []  # nosec B101
    assert isinstance(err, TransportError) and err.code is ErrorCode.CANCELLED  # nosec B101
    assert not called.is_set()  # nosec B101


def test_cancel_mid_stream_stops_without_error():
    print("TEST: cancel after first frame -> no further frames, no error, response closed")
    gate = threading.Event()
    body = ScriptedStream([sse(chunk("first")), gate, sse(chunk("second")), DONE])
    client = make_client(lambda req: httpx.Response(200, stream=body))
    stream = client.chat_completion_stream(_request())
    first = stream.frames.receive(timeout=WAIT)
    assert first.content == "first"  # nosec B101
    stream.cancel("enough")
    gate.set()
    rest, err = _drain(stream)
    assert rest == []  # nosec B101
    assert err is None  # nosec B101
    assert stream.wait(WAIT)  # nosec B101
    assert stream.cancelled  # nosec B101
    assert stream.state is StreamState.FAILED  # nosec B101
    assert body.closed  # nosec B101


def test_cancel_unblocks_read_on_silent_server():
    print("TEST: body stalls after first frame -> close() returns promptly, no error")
    silent = threading.Event()
    body = ScriptedStream([sse(chunk("first")), silent, sse(chunk("never")), DONE])
    client = make_client(lambda req: httpx.Response(200, stream=body))
    stream = client.chat_completion_stream(_request())
    assert stream.frames.receive(timeout=WAIT).content == "first"  # nosec B101
    assert stream.close(timeout=1.0)  # nosec B101
    assert not silent.is_set()  # nosec B101
    assert stream.error(timeout=WAIT) is None  # nosec B101
    assert stream.cancelled and stream.state is StreamState.FAILED  # nosec B101
    assert list(stream.frames) == []  # nosec B101
    assert body.closed  # nosec B101


def test_read_failure_mid_stream_emits_one_stream_read_error():
    req = httpx.Request("POST", "http://hackersera.test/v1/chat/completions")
    body = ScriptedStream([sse(chunk("partial")), httpx.ReadError("connection reset", request=req)])
    client = make_client(lambda r: httpx.Response(200, stream=body))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert [f.content for f in frames] == ["partial"]  # nosec B101
    assert isinstance(err, StreamReadError)  # nosec B101
    assert err.action == "read stream" and err.code is ErrorCode.TRANSIENT  # nosec B101
    assert body.closed  # nosec B101
    try:
        stream.errors.receive(timeout=0.1)
    except ChannelClosed:
        pass
    else:
        raise AssertionError("error channel must carry exactly one error")


def test_slow_consumer_hits_offer_timeout():
    items = [sse(chunk("1")), sse(chunk("2")), sse(chunk("3")), DONE]
    client = make_client(lambda req: sse_response(items))
    stream = client.chat_completion_stream(_request(), frame_buffer=1, offer_timeout=0.05)
    assert stream.wait(WAIT)  # nosec B101
    frames, err = _drain(stream)
    assert [f.content for f in frames] == ["1"]  # nosec B101
    assert isinstance(err, StreamStalledError)  # nosec B101
    assert err.action == "deliver frame" and err.code is ErrorCode.TIMEOUT  # nosec B101


def test_over_long_line_fails_the_stream():
    huge = "data: " + "x" * (1024 * 1024 + 16) + "\n\n"
    client = make_client(lambda req: sse_response([sse(chunk("ok")), huge, DONE]))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert [f.content for f in frames] == ["ok"]  # nosec B101
    assert isinstance(err, StreamReadError) and err.code is ErrorCode.VALIDATION  # nosec B101


def test_eof_without_sentinel_is_normal_end():
    body = ScriptedStream([sse(chunk("only"))])
    client = make_client(lambda req: httpx.Response(200, stream=body))
    stream = client.chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert [f.content for f in frames] == ["only"] and err is None  # nosec B101
    assert stream.wait(WAIT) and stream.state is StreamState.DONE  # nosec B101
    assert body.closed  # nosec B101


def test_connect_failure_arrives_on_error_channel():
    def handler(req):
        raise httpx.ConnectError("refused", request=req)

    stream = make_client(handler).chat_completion_stream(_request())
    frames, err = _drain(stream)
    assert frames == []  # nosec B101
    assert isinstance(err, TransportError)  # nosec B101
    assert err.action == "send request" and err.code is ErrorCode.UNAVAILABLE  # nosec B101


def test_identity_headers_follow_snapshot_and_options():
    rec = Recorder(lambda req: sse_response([DONE]))
    client = make_client(rec).set_user_id("U1")
    stream = client.chat_completion_stream(_request(), options=RequestOptions(conversation_id="C1"))
    client.set_user_id("U2")
    stream.wait(WAIT)
    headers = rec.last.headers
    assert headers["Authorization"] == "Bearer sk-test-123"  # nosec B101
    assert headers["X-User-ID"] == "U1"  # nosec B101
    assert headers["X-Conversation-ID"] == "C1"  # nosec B101


def test_collect_accumulates_response():
    usage = {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}
    items = [
        sse(chunk("Hi", role="assistant", chunk_id="c9")),
        sse(chunk(" there", finish_reason="stop", usage=usage, chunk_id="c9")),
        DONE,
    ]
    client = make_client(lambda req: sse_response(items))
    resp = client.chat_completion_stream(_request()).collect()
    assert resp.id == "c9" and resp.content == "Hi there"  # nosec B101
    assert resp.choices[0].finish_reason == "stop"  # nosec B101
    assert resp.usage.total_tokens == 3  # nosec B101


def test_finalize_logs_stream_end(log_capture):
    client = make_client(lambda req: sse_response([sse(chunk("a")), DONE]))
    stream = client.chat_completion_stream(_request())
    _drain(stream)
    stream.wait(WAIT)
    events = [e for e in log_capture.events() if e.get("event") == "stream.end"]
    assert len(events) == 1  # nosec B101
    ev = events[0]
    for key in ("phase", "emitted", "tokens"):
        assert key in ev  # nosec B101
    assert ev["emitted_count"] == 1 and ev["model"] == "hackersera-ai"  # nosec B101
