from __future__ import annotations

import itertools
import threading

import pytest


class _SequentialIds:
    """Deterministic identifier source: evt-1, evt-2, ... and a frozen clock."""

    def __init__(self, now_ms: int) -> None:
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._now_ms = now_ms

    def new_id(self) -> str:
        with self._lock:
            return f"evt-{next(self._counter)}"

    def now_ms(self) -> int:
        return self._now_ms


@pytest.fixture
def fixed_now_ms() -> int:
    return 1_700_000_000_123


@pytest.fixture
def ids(fixed_now_ms: int) -> _SequentialIds:
    """Identifier source with predictable ids and a clock stuck at `fixed_now_ms`."""
    return _SequentialIds(fixed_now_ms)
