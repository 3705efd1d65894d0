from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/insights", methods=["POST"], endpoint="insights")
    @admin_required
    def insights():
        text = container.insight_service.generate(
            container.attendance_service.all_sessions(),
            container.events.recent(),
            container.store_service.list_stores(),
        )
        return jsonify({"insight": text})
