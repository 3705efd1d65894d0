from __future__ import annotations

import logging
import random
import threading
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import FEED_EXIT_PROBABILITY, FEED_INTERVAL_SECONDS
from ..core.enums import EventType
from .buffer import EventBuffer
from .model import Location, PresenceEvent

logger = logging.getLogger(__name__)


class LiveFeedSimulator:
    """Periodic producer of simulated heartbeats for one employee/store.

    Every ``interval`` seconds one event is pushed into the buffer: a
    HEARTBEAT, or an EXIT with ``exit_probability``, with an RSSI in
    -60..-51 dBm and a random floor position. ``start``/``stop`` bound the
    background thread's lifetime; after ``stop`` returns no further event is
    produced.
    """

    def __init__(
        self,
        buffer: EventBuffer,
        *,
        employee_id: str,
        store_id: str,
        ssid: str,
        bssid: str,
        interval: float = FEED_INTERVAL_SECONDS,
        exit_probability: float = FEED_EXIT_PROBABILITY,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._buffer = buffer
        self._employee_id = employee_id
        self._store_id = store_id
        self._ssid = ssid
        self._bssid = bssid
        self._interval = float(interval)
        self._exit_probability = float(exit_probability)
        self._rng = rng or random.Random()
        self._clock = clock

        self._lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            stop_event = threading.Event()
            thread = threading.Thread(target=self._run, args=(stop_event,), name="live-feed", daemon=True)
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        logger.info("Live feed started (every %.1fs)", self._interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        with self._lock:
            stop_event, thread = self._stop_event, self._thread
            self._stop_event = None
            self._thread = None
        if stop_event is None or thread is None:
            return
        stop_event.set()
        if thread is not threading.current_thread():
            thread.join(timeout if timeout is not None else max(self._interval * 2, 1.0))
        logger.info("Live feed stopped")

    def tick(self, now: Optional[datetime] = None) -> PresenceEvent:
        """Produce and buffer one event."""
        now = now or self._clock()
        event_type = EventType.EXIT if self._rng.random() < self._exit_probability else EventType.HEARTBEAT
        event = PresenceEvent(
            id=f"evt-live-{int(now.timestamp() * 1000)}",
            employee_id=self._employee_id,
            store_id=self._store_id,
            event_type=event_type,
            timestamp=now,
            ssid=self._ssid,
            bssid=self._bssid,
            rssi=-60 + self._rng.randint(0, 9),
            location=Location(x=self._rng.random() * 100, y=self._rng.random() * 100),
        )
        self._buffer.push(event)
        logger.debug("Feed %s for %s rssi=%s", event.event_type.value, event.employee_id, event.rssi)
        return event

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self.tick()
