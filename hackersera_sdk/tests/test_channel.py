"""Unit tests for the bounded close-once Channel."""
from __future__ import annotations

import threading
import time

import pytest

from hackersera_sdk.base.cancellation import CancellationToken
from hackersera_sdk.base.streaming import Channel, ChannelClosed, SendResult


def test_fifo_order_and_drain_after_close():
    ch: Channel[int] = Channel(3)
    for i in range(3):
        assert ch.send(i) is SendResult.DELIVERED  # nosec B101
    ch.close()
    assert list(ch) == [0, 1, 2]  # nosec B101
    with pytest.raises(ChannelClosed):
        ch.receive()


def test_close_twice_and_send_after_close_raise():
    ch: Channel[int] = Channel(1)
    ch.close()
    with pytest.raises(RuntimeError):
        ch.close()
    with pytest.raises(RuntimeError):
        ch.send(1)


def test_full_channel_times_out():
    ch: Channel[int] = Channel(1, poll_interval=0.01)
    ch.send(1)
    t0 = time.monotonic()
    assert ch.send(2, timeout=0.05) is SendResult.TIMED_OUT  # nosec B101
    assert time.monotonic() - t0 >= 0.04  # nosec B101
    assert len(ch) == 1  # nosec B101


def test_blocked_send_wakes_on_cancel():
    print("TEST: a sender parked on a full channel returns CANCELLED when the token fires")
    ch: Channel[int] = Channel(1, poll_interval=10.0)
    ch.send(1)
    tok = CancellationToken()
    result = {}

    def _sender():
        result["r"] = ch.send(2, token=tok)

    t = threading.Thread(target=_sender)
    t.start()
    time.sleep(0.05)
    tok.cancel("stop")
    t.join(2.0)
    if t.is_alive():
        raise AssertionError("sender did not wake on cancellation")
    assert result["r"] is SendResult.CANCELLED  # nosec B101


def test_blocked_send_proceeds_when_consumer_receives():
    ch: Channel[int] = Channel(1)
    ch.send(1)
    done = threading.Event()

    def _sender():
        ch.send(2)
        done.set()

    threading.Thread(target=_sender, daemon=True).start()
    assert ch.receive(timeout=1.0) == 1  # nosec B101
    assert done.wait(1.0)  # nosec B101
    assert ch.receive(timeout=1.0) == 2  # nosec B101


def test_receive_timeout():
    ch: Channel[int] = Channel(1)
    with pytest.raises(TimeoutError):
        ch.receive(timeout=0.01)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Channel(0)
