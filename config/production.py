import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

TENANT_ID = os.getenv("TENANT_ID", "tenant-alpha")
TENANT_NAME = os.getenv("TENANT_NAME", "Alpha Retail Corp")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

FEED_ENABLED = bool(int(os.getenv("FEED_ENABLED", "1")))
FEED_INTERVAL_SECONDS = float(os.getenv("FEED_INTERVAL_SECONDS", "5"))
RECENT_EVENTS_LIMIT = int(os.getenv("RECENT_EVENTS_LIMIT", "50"))

INSIGHT_LATENCY_SECONDS = float(os.getenv("INSIGHT_LATENCY_SECONDS", "1.5"))
