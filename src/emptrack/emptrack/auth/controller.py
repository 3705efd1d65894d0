from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import current_profile, json_error, login_required, payload, remember_profile
from ..container import Container
from ..core.exceptions import AuthenticationError
from ..portal.views import portal_for

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return jsonify({"success": True, "profile": current_profile().to_dict()})

        data = payload()
        try:
            profile = container.auth_service.login(data.get("role"), data.get("employee_id") or None)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except Exception:
            logger.exception("Login failed")
            return json_error("System error while signing in", 500)

        remember_profile(profile)
        return jsonify({"success": True, "profile": profile.to_dict()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        if "user_id" in session:
            container.auth_service.logout()
        session.clear()
        return jsonify({"success": True, "message": "Signed out."})

    @app.route("/profile", methods=["GET"], endpoint="profile")
    @login_required
    def profile():
        return jsonify(current_profile().to_dict())

    @app.route("/", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        user = current_profile()
        return jsonify(portal_for(user.role).build(container, user))
