from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventType


@dataclass(frozen=True)
class Location:
    """Position on the store floor plan, 0-100 percent of width/height."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class PresenceEvent:
    """Immutable network presence observation."""

    id: str
    employee_id: str
    store_id: str
    event_type: EventType
    timestamp: datetime
    ssid: str
    bssid: str
    rssi: Optional[int]
    location: Optional[Location] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "store_id": self.store_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "ssid": self.ssid,
            "bssid": self.bssid,
            "rssi": self.rssi,
            "location": self.location.to_dict() if self.location else None,
        }
