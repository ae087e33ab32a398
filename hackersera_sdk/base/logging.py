"""Structured logging utilities for the SDK.

Rationale:
- One place configures the shared ``hackersera_sdk`` logger (stderr handler,
  JSON formatter, level from ``HACKERSERA_LOG_LEVEL``).
- Modules obtain children through :func:`get_logger` and emit single-line JSON
  events through :func:`log_event` / :func:`normalized_log_event`.
- The default level is ``WARNING`` so an embedding application sees nothing
  unless it opts in; request and stream lifecycle events are ``INFO``.

API keys and request bodies are never passed to these helpers.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "hackersera_sdk"
LOG_LEVEL_ENV = "HACKERSERA_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_hackersera_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_hackersera_console_handler"
_FILE_HANDLER_ATTR = "_hackersera_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Parse a logging level name into its integer constant.

    Accepts DEBUG, INFO, WARN/WARNING, ERROR, CRITICAL case-insensitively and
    falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    """Initialize (once) and return the shared ``hackersera_sdk`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    level = _parse_level(os.getenv(LOG_LEVEL_ENV))
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True) -> logging.Logger:
    """Return the shared SDK logger or one of its children.

    Children (``hackersera_sdk.http``, ``hackersera_sdk.stream``...) carry no
    handlers of their own and propagate to the configured base logger.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared SDK logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level (number or name). ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, attach (or retarget) a rotating file handler writing to
        this path. When ``None``, remove any file handler added here earlier.
    json_mode: bool
        JSON formatter when true, plain text otherwise. Applies to the console
        handler and to the managed file handler.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers attached by the application are
        left untouched.
    """
    logger = _ensure_base_logger(json_mode=json_mode)
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)

    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            handler.setFormatter(_make_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in managed:
        if abs_path is not None and getattr(handler, "baseFilename", None) == abs_path:
            handler.setFormatter(_make_formatter(json_mode))
            continue
        logger.removeHandler(handler)
        with contextlib.suppress(OSError):
            handler.close()
    if abs_path is None or any(getattr(h, "baseFilename", None) == abs_path for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    # 10MB x 5 backups
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setFormatter(_make_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from :func:`get_logger`.
    event: str
        Event name (e.g. ``stream.start``).
    ctx: LogContext | None
        Correlation context merged shallowly into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve ``None`` valued keys (encoded as ``null``) instead of dropping.
    **fields: Any
        Arbitrary JSON-serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a lifecycle event that always carries the normalized key set.

    ``phase``, ``emitted`` and ``tokens`` are always present (possibly
    ``null``); ``error_code`` is present only on failures. Extra fields never
    overwrite normalized values.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
