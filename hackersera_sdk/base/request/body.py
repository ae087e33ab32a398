"""JSON body serialization for outbound requests.

Pydantic models are dumped with ``exclude_none=True``: an optional field left
at ``None`` is omitted from the wire, while a zero or ``False`` value is sent.
That is how "unset" stays distinguishable from zero for parameters such as
``temperature``, ``seed`` or the penalties.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from ..constants import ACTION_MARSHAL_REQUEST
from ..errors import RequestBuildError

Payload = Union[BaseModel, Mapping[str, Any], Sequence[Any]]


def _to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_none=True)
    if isinstance(payload, Mapping):
        return {k: _to_jsonable(v) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_to_jsonable(v) for v in payload]
    return payload


def encode_json_body(payload: Payload, *, forced: Optional[Mapping[str, Any]] = None) -> bytes:
    """Serialize ``payload`` to UTF-8 JSON bytes.

    Parameters:
        payload: A pydantic model, a mapping, or a sequence of either.
        forced: Top-level keys written over the serialized object. The caller's
            model is not mutated.

    Raises:
        RequestBuildError: ``"marshal request"`` when the payload cannot be
            represented as JSON.
    """
    try:
        data = _to_jsonable(payload)
        if forced:
            if not isinstance(data, dict):
                raise TypeError("forced fields require an object payload")
            data.update(forced)
        return json.dumps(data, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RequestBuildError(str(exc), action=ACTION_MARSHAL_REQUEST, raw=exc) from exc


__all__ = ["encode_json_body", "Payload"]
