"""Unit tests for shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base_url yields different instances.
- A closed pooled client is replaced on the next lookup.
- Clients built on the same base URL share one pooled client.
"""
from __future__ import annotations

from hackersera_sdk import HackersEraClient
from hackersera_sdk.base.http import close_all_clients, get_httpx_client


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("http://svc.test", purpose="api")
    c2 = get_httpx_client("http://svc.test", purpose="api")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"  # nosec B101


def test_different_keys_return_different_instances():
    assert get_httpx_client("http://svc.test", purpose="api") is not get_httpx_client(  # nosec B101
        "http://svc.test", purpose="probe"
    )
    assert get_httpx_client("http://a.test") is not get_httpx_client("http://b.test")  # nosec B101


def test_closed_client_is_replaced():
    c1 = get_httpx_client("http://svc.test")
    c1.close()
    c2 = get_httpx_client("http://svc.test")
    assert c2 is not c1 and not c2.is_closed  # nosec B101


def test_clients_share_pooled_http_client():
    a = HackersEraClient("http://svc.test", "k1")
    b = HackersEraClient("http://svc.test/", "k2")
    assert a.http_client is b.http_client  # nosec B101
