"""Header composition with per-field precedence (override > default > absent)."""

from __future__ import annotations

from typing import Dict, Optional

from ..constants import (
    BEARER_PREFIX,
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_COGNITIVE_DISABLED,
    HEADER_CONTENT_TYPE,
    HEADER_CONVERSATION_ID,
    HEADER_USER_ID,
)
from .request_config import RequestConfig, RequestOptions


def _resolve_text(override: Optional[str], default: str) -> str:
    return override if override else default


def _resolve_flag(override: Optional[bool], default: bool) -> bool:
    return default if override is None else override


def compose_headers(
    config: RequestConfig,
    options: Optional[RequestOptions] = None,
    *,
    identity: bool = True,
) -> Dict[str, str]:
    """Build the outbound header map.

    Parameters:
        config: Snapshot of the client-wide defaults.
        options: Per-call overrides; each field resolves on its own so an
            override on one header never clears the default of another.
        identity: When ``False`` only the fixed headers are produced (used by
            the unauthenticated health probes).

    Returns:
        ``Content-Type`` always; ``Authorization`` iff the key is non-empty;
        each identity header iff its resolved value is non-empty / true.
    """
    headers: Dict[str, str] = {HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON}
    if not identity:
        return headers
    if config.api_key:
        headers[HEADER_AUTHORIZATION] = BEARER_PREFIX + config.api_key
    opts = options or RequestOptions()
    user_id = _resolve_text(opts.user_id, config.user_id)
    if user_id:
        headers[HEADER_USER_ID] = user_id
    conversation_id = _resolve_text(opts.conversation_id, config.conversation_id)
    if conversation_id:
        headers[HEADER_CONVERSATION_ID] = conversation_id
    if _resolve_flag(opts.cognitive_disabled, config.cognitive_disabled):
        headers[HEADER_COGNITIVE_DISABLED] = "true"
    return headers


__all__ = ["compose_headers"]
