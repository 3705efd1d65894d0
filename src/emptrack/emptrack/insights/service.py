from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import AttendanceSession
from ..core.constants import INSIGHT_SAMPLE_EVENTS
from ..presence.model import PresenceEvent
from ..stores.model import Store
from .generator import InsightGenerator, SimulatedInsightGenerator

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Unable to generate insights at this time. Please try again later."


class InsightService:
    """Summarize presence data and ask the generator for a short analysis."""

    def __init__(self, generator: Optional[InsightGenerator] = None):
        self._generator = generator or SimulatedInsightGenerator()

    def build_summary(
        self,
        sessions: Sequence[AttendanceSession],
        events: Sequence[PresenceEvent],
        stores: Sequence[Store],
    ) -> dict:
        names = {s.id: s.name for s in stores}
        return {
            "total_active_sessions": sum(1 for s in sessions if s.is_open),
            "completed_sessions_today": sum(1 for s in sessions if not s.is_open),
            "store_count": len(stores),
            "sample_recent_events": [
                {"type": e.event_type.value, "rssi": e.rssi, "store": names.get(e.store_id)}
                for e in events[:INSIGHT_SAMPLE_EVENTS]
            ],
        }

    def generate(
        self,
        sessions: Sequence[AttendanceSession],
        events: Sequence[PresenceEvent],
        stores: Sequence[Store],
    ) -> str:
        summary = self.build_summary(sessions, events, stores)
        try:
            text = self._generator.generate(summary)
        except Exception:
            logger.exception("Insight generation failed")
            return FALLBACK_MESSAGE
        return text or "No insight generated."
