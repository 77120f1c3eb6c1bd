from __future__ import annotations

import threading
from typing import Any

import pytest


class RecordingWriter:
    """Writer that keeps every ``printf`` call for inspection."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._lock = threading.Lock()

    def printf(self, format: str, *args: Any) -> None:  # noqa: A002
        with self._lock:
            self.calls.append((format, args))

    @property
    def lines(self) -> list[str]:
        return [fmt % args for fmt, args in self.calls]


class FakeClock:
    """Nanosecond clock that only moves when told to."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
