"""
Base exception type for every failure surfaced by the SDK.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ClientError(Exception):
    """Structured SDK error with a normalized code and an action tag.

    Attributes:
        message: Human-readable description of the failure.
        action: Short tag naming the step that failed (``"send request"``,
            ``"decode response"``...). ``None`` for protocol errors, which
            carry an HTTP status instead.
        code: Normalized :class:`ErrorCode` classification.
        raw: Original exception, when the failure wraps one.
    """

    message: str
    action: Optional[str] = None
    code: ErrorCode = ErrorCode.UNKNOWN
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.action:
            return f"{self.action}: {self.message}"
        return self.message


__all__ = ["ClientError"]
