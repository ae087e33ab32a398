"""hackersera_sdk.config.env
=========================

Environment variable names and small parsing helpers for client settings.

Purpose
-------
- Single source of truth for the ``HACKERSERA_*`` variables the SDK reads.
- Placeholder detection so sample ``.env`` values (``changeme``...) are not
  sent to the service as real credentials.

Helpers never raise on unset or malformed variables; they return ``None`` and
let the caller fall back to defaults.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_PREFIX = "HACKERSERA_"

# config field -> environment variable
ENV_MAP: Dict[str, str] = {
    "base_url": "HACKERSERA_BASE_URL",
    "api_key": "HACKERSERA_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "model": "HACKERSERA_MODEL",
    "user_id": "HACKERSERA_USER_ID",
    "conversation_id": "HACKERSERA_CONVERSATION_ID",
    "cognitive_disabled": "HACKERSERA_COGNITIVE_DISABLED",
}

CONFIG_FILE_ENV = "HACKERSERA_CONFIG_FILE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder rather than a secret.

    Heuristics (case-insensitive): contains ``placeholder``, ``changeme``,
    ``example`` or ``your-api-key``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return any(marker in v for marker in ("placeholder", "changeme", "example", "your-api-key"))


def parse_bool(raw: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish env value; ``None`` when unset or unrecognized."""
    if raw is None:
        return None
    v = raw.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return None


def parse_env_float(name: str, default: Optional[float]) -> Optional[float]:
    """Read a positive float from ``name``; ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def read_env_settings() -> Dict[str, object]:
    """Collect every set ``HACKERSERA_*`` client setting from the environment."""
    out: Dict[str, object] = {}
    for field, var in ENV_MAP.items():
        raw = os.getenv(var)
        if raw is None:
            continue
        if field == "cognitive_disabled":
            flag = parse_bool(raw)
            if flag is not None:
                out[field] = flag
            continue
        out[field] = raw.strip()
    return out


__all__ = [
    "ENV_PREFIX",
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "parse_bool",
    "parse_env_float",
    "read_env_settings",
]
