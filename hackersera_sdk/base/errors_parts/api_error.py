"""
Protocol error produced for non-success HTTP statuses.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .client_error import ClientError
from .envelope import ErrorDetail


@dataclass(eq=False)
class APIError(ClientError):
    """The service answered with a status the call does not accept.

    Attributes:
        status_code: HTTP status of the response.
        detail: Parsed (or synthesized) error envelope body.

    ``str(err)`` is the server message alone, so callers can surface it
    verbatim. ``code`` is derived from ``status_code`` by the classifier.
    """

    status_code: int = 0
    detail: Optional[ErrorDetail] = None

    @property
    def kind(self) -> str:
        """Envelope ``type`` (``"unknown_error"`` when the body was not JSON)."""
        return self.detail.type if self.detail is not None else ""

    @property
    def param(self) -> Optional[str]:
        return self.detail.param if self.detail is not None else None

    @property
    def server_code(self) -> Optional[Union[str, int]]:
        return self.detail.code if self.detail is not None else None

    def __str__(self) -> str:
        return self.message


__all__ = ["APIError"]
