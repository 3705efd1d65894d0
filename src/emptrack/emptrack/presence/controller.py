from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["GET"], endpoint="events_recent")
    @login_required
    def events_recent():
        limit = request.args.get("limit", type=int)
        return jsonify(
            {
                "live": bool(container.feed and container.feed.is_running),
                "events": [e.to_dict() for e in container.events.recent(limit)],
            }
        )
