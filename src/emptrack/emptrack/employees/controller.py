from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import admin_required, json_error, payload
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _employee_fields(data: dict) -> dict:
    return {
        "name": data.get("name"),
        "email": data.get("email"),
        "role": data.get("role"),
        "assigned_store_ids": data.get("assigned_store_ids"),
        "avatar_url": data.get("avatar_url"),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @admin_required
    def employees_list():
        return jsonify([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @admin_required
    def employees_create():
        try:
            employee = container.employee_service.create_employee(**_employee_fields(payload()))
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Employee creation failed")
            return json_error("System error while saving the employee", 500)
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    @admin_required
    def employees_update(employee_id: str):
        try:
            employee = container.employee_service.update_employee(employee_id, **_employee_fields(payload()))
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Employee update failed")
            return json_error("System error while saving the employee", 500)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @admin_required
    def employees_delete(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
        except ValidationError as e:
            return json_error(str(e), 404)
        return jsonify({"success": True, "message": "Employee removed."})
