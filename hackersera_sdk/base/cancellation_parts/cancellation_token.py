"""Cooperative cancellation token implementation.

The token is the Python stand-in for a request context: callers hand one to
``chat_completion`` / ``chat_completion_stream`` and cancel it from any thread.
Blocking points inside the SDK poll ``cancelled`` and, where they park on a
condition variable, register a wake-up callback so cancellation is noticed
without waiting for the next poll tick.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """A thread-safe cooperative cancellation token with cascading children.

    Child tokens inherit cancellation when the parent is cancelled. Callbacks
    registered through :meth:`register` fire exactly once, on the thread that
    calls :meth:`cancel`.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, fire registered callbacks, cascade to children.

        Repeated calls are no-ops; the first reason wins.
        """
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._state.callbacks.values())
            self._state.callbacks.clear()
            children = list(self._children)
        for callback in callbacks:
            callback(reason)
        for child in children:
            child.cancel(reason)

    def register(self, callback: Callable[[Optional[str]], None]) -> Callable[[], None]:
        """Register ``callback`` to run when the token is cancelled.

        If the token is already cancelled the callback runs immediately on the
        calling thread.

        Returns:
            A zero-argument function that unregisters the callback. Calling it
            after the callback fired is harmless.
        """
        with self._lock:
            if not self._state.cancelled:
                key = self._state.next_id
                self._state.next_id += 1
                self._state.callbacks[key] = callback

                def _unregister() -> None:
                    with self._lock:
                        self._state.callbacks.pop(key, None)

                return _unregister
            reason = self._state.reason
        callback(reason)
        return lambda: None

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
