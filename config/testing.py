SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

TENANT_ID = "tenant-alpha"
TENANT_NAME = "Alpha Retail Corp"

SEED_DEMO_DATA = True

# No background thread or artificial latency under test
FEED_ENABLED = False
FEED_INTERVAL_SECONDS = 5.0
RECENT_EVENTS_LIMIT = 50

INSIGHT_LATENCY_SECONDS = 0.0
