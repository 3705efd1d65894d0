"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FEED_INTERVAL_SECONDS = 5.0
RECENT_EVENTS_LIMIT = 50
FEED_EXIT_PROBABILITY = 0.05

DEFAULT_RSSI_THRESHOLD = -75
DEFAULT_GEOFENCE_RADIUS = 50.0
DEFAULT_FLOOR_PLAN_ASPECT_RATIO = 1.5

DEFAULT_TENANT_ID = "tenant-alpha"
DEFAULT_TENANT_NAME = "Alpha Retail Corp"
DEFAULT_EMPLOYEE_LOGIN_ID = "emp-101"

INSIGHT_LATENCY_SECONDS = 1.5
INSIGHT_SAMPLE_EVENTS = 10

UNKNOWN_LABEL = "Unknown"
ACTIVE_TIME_OUT = "Active"
