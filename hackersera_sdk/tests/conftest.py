"""Fixtures shared by the SDK test suite.

Isolates every test from the developer's environment: ``HACKERSERA_*``
variables are removed, the config-file and timeout caches are reset, and
pooled HTTP clients are closed afterwards.
"""
from __future__ import annotations

import json
import logging
import os
from typing import List

import pytest

from hackersera_sdk.base.http import close_all_clients
from hackersera_sdk.base.logging import BASE_LOGGER_NAME, get_logger
from hackersera_sdk.config import reset_config_cache


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("HACKERSERA_"):
            monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        """Decoded JSON payloads of the captured records."""
        out = []
        for r in self.records:
            try:
                out.append(json.loads(r.getMessage()))
            except ValueError:
                continue
        return out


@pytest.fixture()
def log_capture():
    """Capture SDK log events at DEBUG (the SDK logger does not propagate)."""
    logger = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    prev = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(prev)
