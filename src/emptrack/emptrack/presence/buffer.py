from __future__ import annotations

import threading
from collections import deque
from typing import Iterable, Optional

from ..core.constants import RECENT_EVENTS_LIMIT
from .model import PresenceEvent


class EventBuffer:
    """Bounded, most-recent-first window over the presence event stream.

    Pushing past ``capacity`` drops the oldest event.
    """

    def __init__(self, capacity: int = RECENT_EVENTS_LIMIT):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._lock = threading.Lock()
        self._events: deque[PresenceEvent] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def push(self, event: PresenceEvent) -> None:
        with self._lock:
            self._events.appendleft(event)

    def load(self, events: Iterable[PresenceEvent]) -> None:
        """Replace the contents, newest first regardless of input order."""
        ordered = sorted(events, key=lambda e: e.timestamp, reverse=True)
        with self._lock:
            self._events.clear()
            self._events.extend(ordered[: self.capacity])

    def recent(self, limit: Optional[int] = None) -> list[PresenceEvent]:
        with self._lock:
            items = list(self._events)
        return items if limit is None else items[:limit]

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
