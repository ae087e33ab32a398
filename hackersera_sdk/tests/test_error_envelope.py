"""Tests for ``parse_error_response``.

Covers:
- a JSON envelope populates status, message, type, param and server code
- a non-JSON body becomes the message with type ``unknown_error``
- an empty JSON object parses to an empty detail
- a body whose read fails mid-way is treated as empty
- `null` in place of the error object or its text fields reads as empty
"""
from __future__ import annotations

import httpx

from hackersera_sdk.base.errors import APIError, ErrorCode, parse_error_response
from hackersera_sdk.tests.helpers import ScriptedStream


def test_envelope_is_parsed():
    resp = httpx.Response(
        401,
        json={"error": {"message": "bad key", "type": "invalid_request_error", "param": "auth", "code": "E1"}},
    )
    err = parse_error_response(resp)
    assert isinstance(err, APIError)  # nosec B101
    assert err.status_code == 401  # nosec B101
    assert err.message == "bad key" and str(err) == "bad key"  # nosec B101
    assert err.kind == "invalid_request_error"  # nosec B101
    assert err.param == "auth" and err.server_code == "E1"  # nosec B101
    assert err.code is ErrorCode.AUTH  # nosec B101


def test_non_json_body_becomes_message():
    resp = httpx.Response(500, content=b"internal server error")
    err = parse_error_response(resp)
    assert err.status_code == 500  # nosec B101
    assert err.message == "internal server error"  # nosec B101
    assert err.kind == "unknown_error"  # nosec B101
    assert err.code is ErrorCode.SERVER_ERROR  # nosec B101


def test_empty_object_parses_to_empty_detail():
    err = parse_error_response(httpx.Response(404, content=b"{}"))
    assert err.message == "" and err.kind == ""  # nosec B101
    assert err.code is ErrorCode.NOT_FOUND  # nosec B101


def test_unreadable_body_is_treated_as_empty():
    req = httpx.Request("GET", "http://x.test")
    stream = ScriptedStream([httpx.ReadError("reset", request=req)])
    err = parse_error_response(httpx.Response(502, stream=stream))
    assert err.status_code == 502  # nosec B101
    assert err.message == "" and err.kind == "unknown_error"  # nosec B101


def test_null_error_object_parses_to_empty_detail():
    err = parse_error_response(httpx.Response(400, content=b'{"error": null}'))
    assert err.message == "" and err.kind == ""  # nosec B101
    assert err.code is ErrorCode.VALIDATION  # nosec B101
    err = parse_error_response(httpx.Response(500, json={"error": {"message": None, "type": None, "code": 7}}))
    assert err.message == "" and err.kind == "" and err.server_code == 7  # nosec B101
