"""Common helpers for the HackersEra client.

Purpose:
    Provide the request plumbing shared by every endpoint mixin: compose
    headers from a config snapshot, send through the transport, check the
    status against the accepted set and decode the body into a DTO.

Notes:
    Consumers must define ``_base_url`` (str), ``_config``
    (:class:`RequestConfig`), ``_transport`` (:class:`Transport`) and
    ``_logger``.

Failure modes (all :class:`ClientError` subclasses):
    - ``RequestBuildError`` for bodies that do not serialize or bad URLs;
    - ``TransportError`` when no response arrives;
    - ``APIError`` for statuses outside ``accept``;
    - ``DecodeError`` when the success body cannot be read or decoded.
"""

from __future__ import annotations

from typing import Any, Collection, Mapping, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..base.cancellation import CancellationToken
from ..base.constants import ACTION_DECODE_RESPONSE, ACTION_READ_RESPONSE
from ..base.errors import DecodeError, classify_exception, parse_error_response
from ..base.request import RequestConfig, RequestOptions, compose_headers, encode_json_body
from ..base.request.body import Payload

M = TypeVar("M", bound=BaseModel)

_OK = (httpx.codes.OK,)


def path_segment(value: Any) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(str(value), safe="")


class HackersEraCommonMixin:
    """Mixin offering request composition, sending and decoding."""

    def _url(self, path: str) -> str:
        return self._base_url + path

    def _open(
        self,
        method: str,
        path: str,
        *,
        content: Optional[bytes] = None,
        params: Optional[Mapping[str, Any]] = None,
        config: Optional[RequestConfig] = None,
        options: Optional[RequestOptions] = None,
        identity: bool = True,
        token: Optional[CancellationToken] = None,
        streaming: bool = False,
    ) -> httpx.Response:
        """Compose and send one request; the caller closes the response."""
        headers = compose_headers(config or self._config, options, identity=identity)
        request = self._transport.build(
            method,
            self._url(path),
            headers=headers,
            content=content,
            params=params,
            streaming=streaming,
        )
        return self._transport.send(request, token=token)

    def _call(
        self,
        method: str,
        path: str,
        model: Type[M],
        *,
        body: Optional[Payload] = None,
        forced: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
        identity: bool = True,
        accept: Collection[int] = _OK,
        token: Optional[CancellationToken] = None,
    ) -> M:
        """Run a bounded exchange and decode the success body into ``model``."""
        content = encode_json_body(body, forced=forced) if body is not None else None
        response = self._open(
            method,
            path,
            content=content,
            params=params,
            options=options,
            identity=identity,
            token=token,
        )
        try:
            if response.status_code not in accept:
                raise parse_error_response(response)
            return self._decode(self._read_body(response), model)
        finally:
            response.close()

    def _call_text(
        self,
        method: str,
        path: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> str:
        """Run a bounded exchange returning the success body as text."""
        response = self._open(method, path, options=options, token=token)
        try:
            if response.status_code != httpx.codes.OK:
                raise parse_error_response(response)
            self._read_body(response)
            return response.text
        finally:
            response.close()

    @staticmethod
    def _read_body(response: httpx.Response) -> bytes:
        try:
            return response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise DecodeError(
                str(exc) or exc.__class__.__name__,
                action=ACTION_READ_RESPONSE,
                code=classify_exception(exc),
                raw=exc,
            ) from exc

    @staticmethod
    def _decode(raw: bytes, model: Type[M]) -> M:
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(str(exc), action=ACTION_DECODE_RESPONSE, raw=exc) from exc


__all__ = ["HackersEraCommonMixin", "path_segment"]
