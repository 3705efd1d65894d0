from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import DEFAULT_GEOFENCE_RADIUS, DEFAULT_RSSI_THRESHOLD


@dataclass(frozen=True)
class Geofence:
    """Circle around the store. Stored and editable, never evaluated."""

    lat: float = 0.0
    lng: float = 0.0
    radius: float = DEFAULT_GEOFENCE_RADIUS


@dataclass(frozen=True)
class Store:
    """Domain entity: a store and the Wi-Fi networks that prove presence in it.

    ``ssids`` / ``bssids`` keep the operator's order (the first SSID is the
    one a phone auto-connects to) but are matched with set semantics.
    ``rssi_threshold`` is advisory and only displayed.
    """

    id: str
    tenant_id: str
    name: str
    ssids: tuple[str, ...] = ()
    bssids: tuple[str, ...] = ()
    rssi_threshold: int = DEFAULT_RSSI_THRESHOLD
    geofence: Geofence = field(default_factory=Geofence)
    floor_plan_url: Optional[str] = None
    floor_plan_aspect_ratio: Optional[float] = None

    def broadcasts(self, ssid: str) -> bool:
        return bool(ssid) and ssid in self.ssids

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tenant_id": self.tenant_id,
            "name": self.name,
            "ssids": list(self.ssids),
            "bssids": list(self.bssids),
            "rssi_threshold": self.rssi_threshold,
            "geofence": {"lat": self.geofence.lat, "lng": self.geofence.lng, "radius": self.geofence.radius},
            "floor_plan_url": self.floor_plan_url,
            "floor_plan_aspect_ratio": self.floor_plan_aspect_ratio,
        }
