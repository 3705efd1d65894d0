"""Demo data loaded at startup when SEED_DEMO_DATA is enabled."""
from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..attendance.model import AttendanceSession
from ..auth.model import UserProfile
from ..core.constants import DEFAULT_TENANT_ID, DEFAULT_TENANT_NAME
from ..core.enums import EventType, Role, ShiftStatus
from ..employees.model import Employee
from ..presence.model import Location, PresenceEvent
from ..shifts.model import Shift
from ..stores.model import Geofence, Store

AVATAR = "https://api.dicebear.com/7.x/avataaars/svg?seed={}"

# Simulated feed target.
FEED_EMPLOYEE_ID = "emp-101"
FEED_STORE_ID = "store-001"
FEED_SSID = "ShopNet_Staff"
FEED_BSSID = "aa:bb:cc:dd:ee:01"


def admin_profile(tenant_id: str = DEFAULT_TENANT_ID, tenant_name: str = DEFAULT_TENANT_NAME) -> UserProfile:
    return UserProfile(
        id="admin-001",
        name="Issac Samuel Paul",
        email="admin@techcorp.com",
        role=Role.SUPER_ADMIN,
        avatar_url=AVATAR.format("Sarah"),
        tenant_id=tenant_id,
        tenant_name=tenant_name,
    )


def demo_stores(tenant_id: str = DEFAULT_TENANT_ID) -> list[Store]:
    return [
        Store(
            id="store-001",
            tenant_id=tenant_id,
            name="Downtown Flagship",
            # Intelense_5G first so auto-connect picks it by default.
            ssids=("Intelense_5G", "ShopNet_Staff", "ShopNet_Guest"),
            bssids=("d8:b0:20:f4:14:3d", "aa:bb:cc:dd:ee:01", "aa:bb:cc:dd:ee:02"),
            rssi_threshold=-75,
            geofence=Geofence(lat=40.7128, lng=-74.0060, radius=50),
            floor_plan_aspect_ratio=1.5,
            floor_plan_url="https://images.unsplash.com/photo-1555679427-1f6dfcce943b?q=80&w=1000&auto=format&fit=crop",
        ),
        Store(
            id="store-002",
            tenant_id=tenant_id,
            name="Mall Boutique",
            ssids=("Boutique_Secure",),
            bssids=("11:22:33:44:55:66",),
            rssi_threshold=-80,
            geofence=Geofence(lat=34.0522, lng=-118.2437, radius=30),
            floor_plan_aspect_ratio=1.0,
        ),
        Store(
            id="store-003",
            tenant_id=tenant_id,
            name="Airport Kiosk",
            ssids=("Airport_Public", "Kiosk_Mgmt"),
            bssids=("99:88:77:66:55:44",),
            rssi_threshold=-65,
            geofence=Geofence(lat=51.5074, lng=-0.1278, radius=15),
            floor_plan_aspect_ratio=2.0,
        ),
    ]


def demo_employees() -> list[Employee]:
    return [
        Employee(
            id="emp-101",
            name="Gouthami",
            email="gouthami@example.com",
            role=Role.STORE_MANAGER,
            assigned_store_ids=("store-001",),
            avatar_url=AVATAR.format("Alice"),
        ),
        Employee(
            id="emp-102",
            name="Spandana",
            email="quack@example.com",
            role=Role.AUDITOR,
            assigned_store_ids=("store-001", "store-002", "store-003"),
            avatar_url=AVATAR.format("Bob"),
        ),
        Employee(
            id="emp-103",
            name="Syed",
            email="syed@example.com",
            role=Role.ASSISTANT_MANAGER,
            assigned_store_ids=("store-002",),
            avatar_url=AVATAR.format("Charlie"),
        ),
    ]


def demo_sessions(now: datetime) -> list[AttendanceSession]:
    """Two staff already on-site: emp-101 for 2h, emp-102 for 30m."""
    return [
        AttendanceSession(
            id="sess-1",
            employee_id="emp-101",
            store_id="store-001",
            entry_time=now - timedelta(hours=2),
            dwell_minutes=120,
            last_known_location=Location(x=45, y=40),
        ),
        AttendanceSession(
            id="sess-2",
            employee_id="emp-102",
            store_id="store-002",
            entry_time=now - timedelta(minutes=30),
            dwell_minutes=30,
            last_known_location=Location(x=80, y=80),
        ),
    ]


def demo_shifts(today: date) -> list[Shift]:
    return [
        Shift(
            id="shift-1",
            employee_id="emp-101",
            date=today,
            start_time=time(9, 0),
            end_time=time(17, 0),
            status=ShiftStatus.SCHEDULED,
        ),
        Shift(
            id="shift-2",
            employee_id="emp-101",
            date=today + timedelta(days=1),
            start_time=time(10, 0),
            end_time=time(18, 0),
            status=ShiftStatus.SCHEDULED,
        ),
    ]


def demo_events(now: datetime, rng: Optional[random.Random] = None) -> list[PresenceEvent]:
    """An entry plus quarter-hourly heartbeats for emp-101 and a recent entry for emp-102."""
    rng = rng or random.Random()
    entered = now - timedelta(hours=2)

    events = [
        PresenceEvent(
            id="evt-1",
            employee_id="emp-101",
            store_id="store-001",
            event_type=EventType.ENTRY,
            timestamp=entered,
            ssid=FEED_SSID,
            bssid=FEED_BSSID,
            rssi=-55,
            location=Location(x=20, y=30),
        )
    ]
    for i in range(5):
        events.append(
            PresenceEvent(
                id=f"evt-1-hb-{i}",
                employee_id="emp-101",
                store_id="store-001",
                event_type=EventType.HEARTBEAT,
                timestamp=entered + timedelta(minutes=15 * i),
                ssid=FEED_SSID,
                bssid=FEED_BSSID,
                rssi=-58 + rng.randint(0, 9),
                location=Location(x=20 + i * 5, y=30 + i * 2),
            )
        )
    events.append(
        PresenceEvent(
            id="evt-2",
            employee_id="emp-102",
            store_id="store-002",
            event_type=EventType.ENTRY,
            timestamp=now - timedelta(minutes=30),
            ssid="Boutique_Secure",
            bssid="11:22:33:44:55:66",
            rssi=-62,
            location=Location(x=80, y=80),
        )
    )
    events.sort(key=lambda e: e.timestamp, reverse=True)
    return events
