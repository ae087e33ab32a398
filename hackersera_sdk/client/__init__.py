"""HackersEra client package.

Exposes :class:`HackersEraClient`; the endpoint families live in separate
mixin modules (chat, streaming, catalog, documents, conversations,
knowledge, stats) sharing the plumbing in :mod:`.helpers`.
"""

from .client import HackersEraClient

__all__ = ["HackersEraClient"]
