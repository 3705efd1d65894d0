from datetime import datetime, timedelta

from src.emptrack.emptrack.core.enums import EventType
from src.emptrack.emptrack.presence.buffer import EventBuffer
from src.emptrack.emptrack.presence.model import PresenceEvent


def _event(i: int, base=datetime(2026, 1, 1, 9, 0)) -> PresenceEvent:
    return PresenceEvent(
        id=f"evt-{i}",
        employee_id="emp-101",
        store_id="store-001",
        event_type=EventType.HEARTBEAT,
        timestamp=base + timedelta(seconds=5 * i),
        ssid="ShopNet_Staff",
        bssid="aa:bb:cc:dd:ee:01",
        rssi=-55,
    )


def test_push_keeps_newest_first_and_caps_length():
    buf = EventBuffer(3)
    for i in range(5):
        buf.push(_event(i))

    assert [e.id for e in buf.recent()] == ["evt-4", "evt-3", "evt-2"]
    assert len(buf) == 3


def test_load_sorts_by_timestamp_descending():
    buf = EventBuffer(50)
    buf.load([_event(1), _event(3), _event(2)])

    assert [e.id for e in buf.recent()] == ["evt-3", "evt-2", "evt-1"]
    assert [e.id for e in buf.recent(1)] == ["evt-3"]
