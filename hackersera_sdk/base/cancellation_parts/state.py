"""Internal state holder for cancellation tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class State:
    """Mutable token state guarded by the owning token's lock.

    Attributes:
        cancelled: Whether cancellation was requested.
        reason: Optional reason captured on the first ``cancel`` call.
        callbacks: Wake-up hooks keyed by registration id; cleared once fired.
        next_id: Monotonic counter used to mint registration ids.
    """

    cancelled: bool = False
    reason: Optional[str] = None
    callbacks: Dict[int, Callable[[Optional[str]], None]] = field(default_factory=dict)
    next_id: int = 0


__all__ = ["State"]
