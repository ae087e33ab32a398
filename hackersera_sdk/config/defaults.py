"""hackersera_sdk.config.defaults
==============================

Central place for small, stable default values used across the SDK. They can
be overridden through environment variables, an external config file or
explicit constructor arguments, but provide sensible fallbacks for local
development and tests.

Only plain constants live here (no I/O, no imports from other SDK packages).
"""

from __future__ import annotations

# ---- Service ----
# Local development server started by the service's own tooling.
DEFAULT_BASE_URL = "http://localhost:8080"

# ---- Models served by the platform ----
MODEL_DEFAULT = "hackersera-ai"
MODEL_PRO = "hackersera-ai-pro"
MODEL_LITE = "hackersera-ai-lite"
MODEL_EMBEDDING = "hackersera-ai-embedding"

# ---- Timeouts (seconds) ----
# Deadline for synchronous calls; generation can legitimately take minutes.
DEFAULT_HTTP_TIMEOUT_SECONDS = 300.0
# Connection establishment bound, applied to streaming calls as well.
DEFAULT_CONNECT_TIMEOUT_SECONDS = 30.0
# None = a streaming worker waits on a slow consumer indefinitely.
DEFAULT_STREAM_OFFER_TIMEOUT_SECONDS = None
# Upper bound on how long a parked worker goes without re-checking cancellation.
DEFAULT_STREAM_POLL_SECONDS = 0.05

__all__ = [
    "DEFAULT_BASE_URL",
    "MODEL_DEFAULT",
    "MODEL_PRO",
    "MODEL_LITE",
    "MODEL_EMBEDDING",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_STREAM_OFFER_TIMEOUT_SECONDS",
    "DEFAULT_STREAM_POLL_SECONDS",
]
