from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, session

from ..common.web import admin_required, json_error, login_required, payload
from ..container import Container
from ..core.exceptions import NetworkAccessDenied, ValidationError

logger = logging.getLogger(__name__)


def _optional_rssi(value):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("RSSI must be a whole number") from None


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/api/attendance/authorize", methods=["POST"], endpoint="attendance_authorize")
    @login_required
    def attendance_authorize():
        data = payload()
        try:
            decision = attendance.authorize(session["user_id"], data.get("ssid"))
        except ValidationError as e:
            return json_error(str(e))
        return jsonify(
            {
                "allowed": decision.allowed,
                "store": decision.store.to_dict() if decision.store else None,
                "reason": decision.reason.value if decision.reason else None,
            }
        )

    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @login_required
    def clock_in():
        data = payload()
        try:
            s = attendance.clock_in(
                session["user_id"],
                data.get("ssid"),
                bssid=data.get("bssid") or "",
                rssi=_optional_rssi(data.get("rssi")),
            )
        except NetworkAccessDenied as e:
            return jsonify({"success": False, "reason": e.reason.value, "message": str(e)}), 403
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Clock-in failed")
            return json_error("System error while clocking in", 500)
        return jsonify({"success": True, "message": "Clocked in.", "session": s.to_dict()})

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @login_required
    def clock_out():
        data = payload()
        try:
            closed = attendance.clock_out(
                session["user_id"],
                ssid=data.get("ssid") or "",
                bssid=data.get("bssid") or "",
                rssi=_optional_rssi(data.get("rssi")),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Clock-out failed")
            return json_error("System error while clocking out", 500)
        return jsonify({"success": True, "session": closed.to_dict() if closed else None})

    @app.route("/api/attendance/current", methods=["GET"], endpoint="attendance_current")
    @login_required
    def attendance_current():
        user_id = session["user_id"]
        current = attendance.current_session(user_id)
        return jsonify(
            {
                "duty_state": attendance.duty_state(user_id).value,
                "session": current.to_dict() if current else None,
                "elapsed": attendance.elapsed_label(user_id),
            }
        )

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        return jsonify([s.to_dict() for s in attendance.history(session["user_id"])])

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @admin_required
    def attendance_report():
        return jsonify(
            {
                "stats": container.report_service.dashboard_stats().to_dict(),
                "rows": [r.to_dict() for r in container.report_service.export_rows()],
            }
        )

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @admin_required
    def attendance_report_csv():
        csv_bytes = container.report_service.build_csv().encode("utf-8-sig")
        filename = f"attendance_report_{date.today().strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
