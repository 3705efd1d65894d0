from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import json_error, login_required, payload
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    @login_required
    def shifts_list():
        return jsonify([s.to_dict() for s in container.shift_service.list_for_employee(session["user_id"])])

    @app.route("/api/shifts", methods=["POST"], endpoint="shifts_create")
    @login_required
    def shifts_create():
        data = payload()
        try:
            shift = container.shift_service.add_shift(
                session["user_id"],
                work_date=data.get("date"),
                start_time=data.get("start_time"),
                end_time=data.get("end_time"),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Shift creation failed")
            return json_error("System error while saving the shift", 500)
        return jsonify({"success": True, "shift": shift.to_dict()}), 201
