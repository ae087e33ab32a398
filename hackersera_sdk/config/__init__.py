"""Unified configuration layer for the SDK.

Goals
-----
* Centralize defaults (base URL, model, timeouts).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by HACKERSERA_CONFIG_FILE
    3. Environment variables (HACKERSERA_BASE_URL, HACKERSERA_API_KEY, ...)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_client_config()``.

External Config File (Optional)
-------------------------------
The file is parsed as JSON first and as YAML otherwise; a file that is
neither is logged and treated as empty. Settings may sit at the top level or
under a ``hackersera`` section::

    hackersera:
      base_url: https://api.hackersera.example
      api_key: sk-...
      user_id: analyst-7
      cognitive_disabled: true

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .defaults import DEFAULT_BASE_URL, MODEL_DEFAULT
from ..base.logging import get_logger, log_event
from .env import CONFIG_FILE_ENV, is_placeholder, parse_bool, read_env_settings

DEFAULTS: Dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "api_key": "",
    "model": MODEL_DEFAULT,
    "user_id": "",
    "conversation_id": "",
    "cognitive_disabled": False,
}

_SECTION = "hackersera"
_FILE_CACHE: Optional[Tuple[str, Dict[str, Any]]] = None


def _parse_config_text(path: Path, text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        log_event(get_logger("config"), "config.file.invalid", level=logging.WARNING, path=str(path), error=str(exc))
        return {}


def _normalize(layer: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce ``cognitive_disabled`` to a bool; drop it when unrecognized."""
    flag = layer.get("cognitive_disabled")
    if flag is None or isinstance(flag, bool):
        return layer
    out = dict(layer)
    parsed = parse_bool(str(flag))
    if parsed is None:
        out.pop("cognitive_disabled")
    else:
        out["cognitive_disabled"] = parsed
    return out


def _load_external_config() -> Dict[str, Any]:
    """Load (and cache per path) the optional external config file."""
    global _FILE_CACHE  # noqa: PLW0603 - documented module cache
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    if _FILE_CACHE is not None and _FILE_CACHE[0] == path:
        return _FILE_CACHE[1]
    p = Path(path).expanduser()
    data: Any = {}
    if p.is_file():
        data = _parse_config_text(p, p.read_text(encoding="utf-8")) or {}
    if isinstance(data, dict) and isinstance(data.get(_SECTION), dict):
        data = data[_SECTION]
    if not isinstance(data, dict):
        data = {}
    section = _normalize({k: v for k, v in data.items() if k in DEFAULTS})
    _FILE_CACHE = (path, section)
    return section


def reset_config_cache() -> None:
    """Forget the cached config file contents (tests, hot reload)."""
    global _FILE_CACHE  # noqa: PLW0603 - documented module cache
    _FILE_CACHE = None


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` valued overrides are ignored. ``cognitive_disabled`` accepts the
    same spellings as its environment variable in every source. A placeholder
    API key is replaced by the empty string so no ``Authorization`` header is
    sent.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= read_env_settings()
    if overrides:
        cfg |= _normalize({k: v for k, v in overrides.items() if v is not None})
    if is_placeholder(cfg.get("api_key")):
        cfg["api_key"] = ""
    cfg["base_url"] = str(cfg.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
    return cfg


__all__ = ["DEFAULTS", "get_client_config", "reset_config_cache"]
