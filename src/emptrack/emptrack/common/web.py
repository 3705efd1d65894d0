"""Shared helpers for the Flask controllers."""
from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, request, session

from ..auth.model import UserProfile
from ..core.enums import Role


def json_error(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def payload() -> dict:
    """Request body as a dict, whether it was sent as JSON or as a form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def remember_profile(profile: UserProfile) -> None:
    session["user_id"] = profile.id
    session["name"] = profile.name
    session["email"] = profile.email
    session["role"] = profile.role.value
    session["avatar_url"] = profile.avatar_url
    session["tenant_id"] = profile.tenant_id
    session["tenant_name"] = profile.tenant_name


def current_profile() -> Optional[UserProfile]:
    if "user_id" not in session:
        return None
    return UserProfile(
        id=session["user_id"],
        name=session.get("name", ""),
        email=session.get("email", ""),
        role=Role(session["role"]),
        avatar_url=session.get("avatar_url", ""),
        tenant_id=session.get("tenant_id", ""),
        tenant_name=session.get("tenant_name", ""),
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Please sign in to continue", 401)

        if session.get("role") != Role.SUPER_ADMIN.value:
            return json_error("You do not have permission to do this", 403)

        return view(*args, **kwargs)

    return wrapper
