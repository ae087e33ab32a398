"""Bounded, close-once FIFO used between the stream worker and its consumer.

``queue.Queue`` has no notion of closing, and a consumer blocked on ``get``
cannot tell "nothing yet" from "nothing ever again". ``Channel`` adds that:

- ``send`` blocks while the channel is full, racing the wait against an
  optional :class:`CancellationToken` and an optional timeout;
- ``close`` may be called exactly once, by the producer, after its last send;
- ``receive`` returns items in send order and raises :class:`ChannelClosed`
  once the channel is closed and drained.
"""

from __future__ import annotations

import enum
import threading
import time
from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

from ..cancellation import CancellationToken

T = TypeVar("T")


class ChannelClosed(Exception):
    """Raised by ``receive`` on a closed, drained channel."""


class SendResult(enum.Enum):
    """Outcome of :meth:`Channel.send`."""

    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"


class Channel(Generic[T]):
    """Thread-safe bounded channel with Go-like close semantics.

    Parameters:
        capacity: Maximum number of pending items (must be >= 1).
        poll_interval: Upper bound on a single wait; a blocked sender
            re-checks its token at least this often. Cancelling the token also
            wakes the sender directly through a registered callback.
    """

    def __init__(self, capacity: int, *, poll_interval: float = 0.05) -> None:
        if capacity < 1:
            raise ValueError("channel capacity must be >= 1")
        self._capacity = capacity
        self._poll = poll_interval
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def _wake(self, _reason: Optional[str] = None) -> None:
        with self._cond:
            self._cond.notify_all()

    def send(
        self,
        item: T,
        *,
        token: Optional[CancellationToken] = None,
        timeout: Optional[float] = None,
    ) -> SendResult:
        """Enqueue ``item``, waiting for room if the channel is full.

        Returns:
            ``DELIVERED`` once enqueued, ``CANCELLED`` if ``token`` was (or
            became) cancelled first, ``TIMED_OUT`` if ``timeout`` seconds
            elapsed without room.

        Raises:
            RuntimeError: The channel is already closed.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        unregister = token.register(self._wake) if token is not None else None
        try:
            with self._cond:
                while True:
                    if self._closed:
                        raise RuntimeError("send on closed channel")
                    if token is not None and token.cancelled:
                        return SendResult.CANCELLED
                    if len(self._items) < self._capacity:
                        self._items.append(item)
                        self._cond.notify_all()
                        return SendResult.DELIVERED
                    wait_for = self._poll
                    if deadline is not None:
                        remaining = deadline - time.monotonic()
                        if remaining <= 0:
                            return SendResult.TIMED_OUT
                        wait_for = min(wait_for, remaining)
                    self._cond.wait(wait_for)
        finally:
            if unregister is not None:
                unregister()

    def close(self) -> None:
        """Mark the channel closed; pending items remain receivable.

        Raises:
            RuntimeError: The channel was already closed.
        """
        with self._cond:
            if self._closed:
                raise RuntimeError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def receive(self, timeout: Optional[float] = None) -> T:
        """Dequeue the oldest item, blocking until one arrives.

        Raises:
            ChannelClosed: The channel is closed and empty.
            TimeoutError: ``timeout`` elapsed with nothing to receive.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while not self._items:
                if self._closed:
                    raise ChannelClosed()
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("no item received before timeout")
                self._cond.wait(remaining)
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def __iter__(self) -> Iterator[T]:
        """Yield items until the channel is closed and drained."""
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return


__all__ = ["Channel", "ChannelClosed", "SendResult"]
