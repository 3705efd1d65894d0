from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import admin_required, json_error, login_required, payload
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _store_fields(data: dict) -> dict:
    geofence = data.get("geofence")
    if not isinstance(geofence, dict):
        geofence = {"lat": data.get("lat"), "lng": data.get("lng"), "radius": data.get("radius")}
    return {
        "name": data.get("name"),
        "ssids": data.get("ssids"),
        "bssids": data.get("bssids"),
        "rssi_threshold": data.get("rssi_threshold"),
        "geofence": geofence,
        "floor_plan_url": data.get("floor_plan_url"),
        "floor_plan_aspect_ratio": data.get("floor_plan_aspect_ratio"),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stores", methods=["GET"], endpoint="stores_list")
    @login_required
    def stores_list():
        return jsonify([s.to_dict() for s in container.store_service.list_stores()])

    @app.route("/api/stores", methods=["POST"], endpoint="stores_create")
    @admin_required
    def stores_create():
        try:
            store = container.store_service.create_store(
                tenant_id=session.get("tenant_id") or container.admin_profile.tenant_id,
                **_store_fields(payload()),
            )
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Store creation failed")
            return json_error("System error while saving the store", 500)
        return jsonify({"success": True, "store": store.to_dict()}), 201

    @app.route("/api/stores/<store_id>", methods=["PUT"], endpoint="stores_update")
    @admin_required
    def stores_update(store_id: str):
        try:
            store = container.store_service.update_store(store_id, **_store_fields(payload()))
        except ValidationError as e:
            return json_error(str(e))
        except Exception:
            logger.exception("Store update failed")
            return json_error("System error while saving the store", 500)
        return jsonify({"success": True, "store": store.to_dict()})

    @app.route("/api/stores/<store_id>", methods=["DELETE"], endpoint="stores_delete")
    @admin_required
    def stores_delete(store_id: str):
        try:
            container.store_service.delete_store(store_id)
        except ValidationError as e:
            return json_error(str(e), 404)
        return jsonify({"success": True, "message": "Store deleted."})

    @app.route("/api/networks", methods=["GET"], endpoint="networks")
    @login_required
    def networks():
        return jsonify(container.store_service.available_networks())
