"""HTTP layer: pooled ``httpx`` clients and the single-exchange transport."""

from .client import get_httpx_client, close_all_clients
from .transport import Transport

__all__ = ["get_httpx_client", "close_all_clients", "Transport"]
