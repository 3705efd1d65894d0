from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .employees.controller import register as register_employees
from .insights.controller import register as register_insights
from .presence.controller import register as register_presence
from .shifts.controller import register as register_shifts
from .stores.controller import register as register_stores

logger = logging.getLogger("emptrack")


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        feed_enabled=bool(getattr(settings, "FEED_ENABLED", True)),
        feed_interval=float(getattr(settings, "FEED_INTERVAL_SECONDS", 5.0)),
        recent_events_limit=int(getattr(settings, "RECENT_EVENTS_LIMIT", 50)),
        insight_latency=float(getattr(settings, "INSIGHT_LATENCY_SECONDS", 1.5)),
        tenant_id=str(getattr(settings, "TENANT_ID", "tenant-alpha")),
        tenant_name=str(getattr(settings, "TENANT_NAME", "Alpha Retail Corp")),
    )
    app.extensions["emptrack"] = container
    logger.info(
        "settings=%s stores=%d employees=%d feed=%s",
        settings_module,
        len(container.store_service.list_stores()),
        len(container.employee_service.list_employees()),
        "on" if container.feed else "off",
    )

    register_auth(app, container)
    register_stores(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_presence(app, container)
    register_shifts(app, container)
    register_insights(app, container)

    return app
