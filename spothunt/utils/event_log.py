"""Thread-safe event log for hunt events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HuntEvent:
    """A single hunt event for the API event feed."""

    tick: int
    category: str
    message: str


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice."""

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 1000) -> None:
        self._buffer: deque[HuntEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: HuntEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_tick(self, tick: int) -> list[HuntEvent]:
        """Return all events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int = 50) -> list[HuntEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
