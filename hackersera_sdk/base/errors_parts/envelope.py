"""
Pydantic schema of the JSON error envelope returned on non-success statuses::

    {"error": {"message": "...", "type": "...", "param": "...", "code": "..."}}

Every field has a default so a syntactically valid but sparse object (for
example ``{}`` or ``{"error": null}``) still parses; only non-JSON or wrongly
shaped bodies fail.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorDetail(BaseModel):
    """Inner ``error`` object of the envelope."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str = ""
    type: str = ""
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None

    @field_validator("message", "type", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error: ErrorDetail = Field(default_factory=ErrorDetail)

    @field_validator("error", mode="before")
    @classmethod
    def _null_detail(cls, value: Any) -> Any:
        return ErrorDetail() if value is None else value


__all__ = ["ErrorDetail", "ErrorResponse"]
