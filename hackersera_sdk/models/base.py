"""Common pydantic base for wire DTOs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class WireModel(BaseModel):
    """Base class for request and response bodies.

    Unknown fields sent by newer servers are ignored so older clients keep
    decoding. Response models default every field, mirroring the lenient
    decoding the service relies on: an explicit JSON ``null`` in a field that
    has a default decodes to that default instead of failing the object.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if field.is_required():
                continue
            defaulted.add(name)
            if field.alias:
                defaulted.add(field.alias)
        return {k: v for k, v in data.items() if v is not None or k not in defaulted}


__all__ = ["WireModel"]
