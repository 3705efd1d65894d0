from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional, Sequence, Union

from ..common.validators import require_float, require_int, require_non_empty, split_identifiers
from ..core.constants import DEFAULT_FLOOR_PLAN_ASPECT_RATIO, DEFAULT_GEOFENCE_RADIUS, DEFAULT_RSSI_THRESHOLD
from ..core.exceptions import ValidationError
from .model import Geofence, Store
from .repository import StoreRepository

logger = logging.getLogger(__name__)

Identifiers = Union[str, Iterable[str], None]


class StoreService:
    """Use case: manage the store registry (admin)."""

    def __init__(self, stores: StoreRepository):
        self._stores = stores

    def list_stores(self) -> Sequence[Store]:
        return self._stores.list_all()

    def get_store(self, store_id: str) -> Store:
        store = self._stores.get_by_id(store_id)
        if not store:
            raise ValidationError("Store not found")
        return store

    def available_networks(self) -> list[str]:
        """Every distinct SSID across the registry, in registry order."""
        seen: list[str] = []
        for store in self._stores.list_all():
            for ssid in store.ssids:
                if ssid not in seen:
                    seen.append(ssid)
        return seen

    def create_store(
        self,
        *,
        tenant_id: str,
        name: Optional[str],
        ssids: Identifiers = None,
        bssids: Identifiers = None,
        rssi_threshold=None,
        geofence: Optional[dict] = None,
        floor_plan_url: Optional[str] = None,
        floor_plan_aspect_ratio=None,
    ) -> Store:
        store = self._build(
            store_id=f"store-{uuid.uuid4().hex[:8]}",
            tenant_id=tenant_id,
            name=name,
            ssids=ssids,
            bssids=bssids,
            rssi_threshold=rssi_threshold,
            geofence=geofence,
            floor_plan_url=floor_plan_url,
            floor_plan_aspect_ratio=floor_plan_aspect_ratio,
        )
        self._stores.add(store)
        logger.info("Store %s (%s) registered with %d SSID(s)", store.id, store.name, len(store.ssids))
        return store

    def update_store(
        self,
        store_id: str,
        *,
        name: Optional[str],
        ssids: Identifiers = None,
        bssids: Identifiers = None,
        rssi_threshold=None,
        geofence: Optional[dict] = None,
        floor_plan_url: Optional[str] = None,
        floor_plan_aspect_ratio=None,
    ) -> Store:
        existing = self.get_store(store_id)
        store = self._build(
            store_id=existing.id,
            tenant_id=existing.tenant_id,
            name=name,
            ssids=ssids,
            bssids=bssids,
            rssi_threshold=rssi_threshold,
            geofence=geofence,
            floor_plan_url=floor_plan_url,
            floor_plan_aspect_ratio=floor_plan_aspect_ratio,
        )
        if not self._stores.replace(store):
            raise ValidationError("Store update failed")
        logger.info("Store %s updated", store.id)
        return store

    def delete_store(self, store_id: str) -> None:
        if not self._stores.delete_by_id(store_id):
            raise ValidationError("Store not found")
        logger.info("Store %s deleted", store_id)

    def _build(
        self,
        *,
        store_id: str,
        tenant_id: str,
        name: Optional[str],
        ssids: Identifiers,
        bssids: Identifiers,
        rssi_threshold,
        geofence: Optional[dict],
        floor_plan_url: Optional[str],
        floor_plan_aspect_ratio,
    ) -> Store:
        geofence = geofence or {}
        return Store(
            id=store_id,
            tenant_id=tenant_id,
            name=require_non_empty(name, "Store name"),
            ssids=split_identifiers(ssids),
            bssids=split_identifiers(bssids),
            rssi_threshold=require_int(rssi_threshold, "RSSI threshold", default=DEFAULT_RSSI_THRESHOLD),
            geofence=Geofence(
                lat=require_float(geofence.get("lat"), "Latitude", default=0.0),
                lng=require_float(geofence.get("lng"), "Longitude", default=0.0),
                radius=require_float(geofence.get("radius"), "Radius", default=DEFAULT_GEOFENCE_RADIUS),
            ),
            floor_plan_url=(floor_plan_url or None),
            floor_plan_aspect_ratio=require_float(
                floor_plan_aspect_ratio, "Floor plan aspect ratio", default=DEFAULT_FLOOR_PLAN_ASPECT_RATIO
            ),
        )
