from datetime import datetime

from src.emptrack.emptrack.attendance.model import AttendanceSession
from src.emptrack.emptrack.core.enums import EventType
from src.emptrack.emptrack.insights.generator import SimulatedInsightGenerator
from src.emptrack.emptrack.insights.service import FALLBACK_MESSAGE, InsightService
from src.emptrack.emptrack.presence.model import PresenceEvent


def _event(i: int, rssi: int, event_type=EventType.HEARTBEAT) -> PresenceEvent:
    return PresenceEvent(
        id=f"e{i}",
        employee_id="emp-101",
        store_id="store-001",
        event_type=event_type,
        timestamp=datetime(2026, 1, 1, 9, i),
        ssid="ShopNet_Staff",
        bssid="",
        rssi=rssi,
    )


def test_summary_counts_and_samples_ten_events(stores):
    sessions = [
        AttendanceSession(id="a", employee_id="x", store_id="store-001", entry_time=datetime(2026, 1, 1, 8)),
        AttendanceSession(
            id="b",
            employee_id="y",
            store_id="store-002",
            entry_time=datetime(2026, 1, 1, 8),
            exit_time=datetime(2026, 1, 1, 9),
            dwell_minutes=60,
        ),
    ]
    events = [_event(i, -55) for i in range(12)]

    summary = InsightService().build_summary(sessions, events, stores)

    assert summary["total_active_sessions"] == 1
    assert summary["completed_sessions_today"] == 1
    assert summary["store_count"] == 2
    assert len(summary["sample_recent_events"]) == 10
    assert summary["sample_recent_events"][0] == {"type": "HEARTBEAT", "rssi": -55, "store": "Downtown Flagship"}


def test_simulated_generator_waits_then_reports(stores):
    waited = []
    svc = InsightService(SimulatedInsightGenerator(latency=2.0, sleep=waited.append))

    text = svc.generate([], [_event(0, -80), _event(1, -50, EventType.EXIT)], stores)

    assert waited == [2.0]
    assert len(text.splitlines()) == 3
    assert "-80 dBm" in text
    assert "1 exit(s)" in text


class _Broken:
    def generate(self, summary):
        raise RuntimeError("model unavailable")


def test_generator_failure_falls_back_to_message(stores):
    assert InsightService(_Broken()).generate([], [], stores) == FALLBACK_MESSAGE
