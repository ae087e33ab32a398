"""Request composer: layered identity headers and JSON body encoding."""

from .request_config import RequestConfig, RequestOptions
from .headers import compose_headers
from .body import encode_json_body

__all__ = ["RequestConfig", "RequestOptions", "compose_headers", "encode_json_body"]
