from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import DeniedReason
from ..stores.model import Store
from .model import AuthorizationDecision


class PresenceAuthorizer:
    """Decide whether an observed network proves presence at an assigned store.

    The first store (in the order given) broadcasting ``observed_ssid`` wins;
    matching is exact and case-sensitive. RSSI threshold and geofence are not
    consulted.
    """

    def authorize(self, my_stores: Iterable[Store], observed_ssid: Optional[str]) -> AuthorizationDecision:
        if observed_ssid:
            for store in my_stores:
                if store.broadcasts(observed_ssid):
                    return AuthorizationDecision(store=store)
        return AuthorizationDecision(reason=DeniedReason.NOT_ON_AUTHORIZED_NETWORK)
