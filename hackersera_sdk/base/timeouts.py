"""Unified timeout settings for the SDK.

Centralizes every deadline the transport and the streaming worker use so no
call site hard-codes a number.

Key Components
--------------
TimeoutConfig
    Frozen dataclass of normalized values (seconds).

get_timeout_config()
    Process-cached configuration, refreshed when the relevant environment
    variables change. Supported variables (all optional):
        HACKERSERA_HTTP_TIMEOUT_SECONDS
        HACKERSERA_CONNECT_TIMEOUT_SECONDS
        HACKERSERA_STREAM_OFFER_TIMEOUT_SECONDS
        HACKERSERA_STREAM_POLL_SECONDS

bounded_timeout() / streaming_timeout()
    ``httpx.Timeout`` objects for the two transport modes. Streaming keeps the
    connect, write and pool phases bounded but has no read deadline, since a
    generation may run far longer than any fixed limit while still producing
    output.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config.defaults import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_STREAM_OFFER_TIMEOUT_SECONDS,
    DEFAULT_STREAM_POLL_SECONDS,
)
from ..config.env import parse_env_float

_ENV_VARS = (
    "HACKERSERA_HTTP_TIMEOUT_SECONDS",
    "HACKERSERA_CONNECT_TIMEOUT_SECONDS",
    "HACKERSERA_STREAM_OFFER_TIMEOUT_SECONDS",
    "HACKERSERA_STREAM_POLL_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-phase deadline for synchronous calls.
        connect_timeout_seconds: Connection establishment deadline used by
            streaming calls (synchronous calls use ``http_timeout_seconds``).
        stream_offer_timeout_seconds: How long the streaming worker waits for
            room in a full frame channel before abandoning delivery. ``None``
            waits indefinitely (cancellation is still observed).
        stream_poll_seconds: Maximum interval between cancellation checks
            while the worker is parked on a full channel.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS
    stream_offer_timeout_seconds: Optional[float] = DEFAULT_STREAM_OFFER_TIMEOUT_SECONDS
    stream_poll_seconds: float = DEFAULT_STREAM_POLL_SECONDS

    def bounded_timeout(self) -> httpx.Timeout:
        """Timeout for synchronous (bounded mode) exchanges."""
        return httpx.Timeout(self.http_timeout_seconds)

    def streaming_timeout(self) -> httpx.Timeout:
        """Timeout for streaming (unbounded mode) exchanges: no read deadline."""
        return httpx.Timeout(
            self.http_timeout_seconds,
            connect=self.connect_timeout_seconds,
            read=None,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    The cache is rebuilt whenever one of the ``HACKERSERA_*`` timeout
    variables changed since the last call, so tests can adjust them with
    ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_VARS)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=float(
            parse_env_float("HACKERSERA_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS)
        ),
        connect_timeout_seconds=float(
            parse_env_float("HACKERSERA_CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS)
        ),
        stream_offer_timeout_seconds=parse_env_float(
            "HACKERSERA_STREAM_OFFER_TIMEOUT_SECONDS", DEFAULT_STREAM_OFFER_TIMEOUT_SECONDS
        ),
        stream_poll_seconds=float(
            parse_env_float("HACKERSERA_STREAM_POLL_SECONDS", DEFAULT_STREAM_POLL_SECONDS)
        ),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
