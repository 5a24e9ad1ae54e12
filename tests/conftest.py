"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ringbuf import RingBuffer


@pytest.fixture
def empty_buffer() -> RingBuffer[int]:
    return RingBuffer[int](3)


@pytest.fixture
def wrapped_buffer() -> RingBuffer[int]:
    """Capacity 4 holding [3, 4, 5] with the occupied region split across the end."""
    buf = RingBuffer[int](4)
    for value in range(6):
        buf.push(value)
    buf.poll()
    return buf


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Isolated config directory wired through RINGBUF_CONFIG_DIR."""
    monkeypatch.setenv("RINGBUF_CONFIG_DIR", str(tmp_path))
    return tmp_path
