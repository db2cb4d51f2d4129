from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required as _admin_required
from ..common.web import api_view, json_body
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User


def register(app: Flask, container: Container) -> None:
    api = container.api
    admin_required = _admin_required(api)

    @app.route("/auth/session", methods=["GET"], endpoint="auth_session")
    @api_view
    def auth_session():
        session = api.get_session()
        return jsonify(session.to_dict() if session else None)

    @app.route("/auth/login", methods=["POST"], endpoint="auth_login")
    @api_view
    def auth_login():
        data = json_body()
        session = api.login(str(data.get("email") or ""), str(data.get("password") or ""))
        return jsonify(session.to_dict())

    @app.route("/auth/demo", methods=["POST"], endpoint="auth_demo")
    @api_view
    def auth_demo():
        data = json_body()
        try:
            role = Role(data.get("role"))
        except ValueError:
            raise ValidationError("Role must be 'employee' or 'admin'")
        return jsonify(api.demo_login(role).to_dict())

    @app.route("/auth/logout", methods=["POST"], endpoint="auth_logout")
    @api_view
    def auth_logout():
        api.logout()
        return jsonify({"ok": True})

    @app.route("/admin/users", methods=["GET"], endpoint="admin_users")
    @api_view
    @admin_required
    def admin_users():
        return jsonify([u.to_dict() for u in api.list_users()])

    @app.route("/admin/users", methods=["POST"], endpoint="admin_upsert_user")
    @api_view
    @admin_required
    def admin_upsert_user():
        user = User.from_dict(json_body())
        return jsonify(api.upsert_user(user).to_dict())

    @app.route("/admin/users/<user_id>/toggle", methods=["POST"], endpoint="admin_toggle_user")
    @api_view
    @admin_required
    def admin_toggle_user(user_id: str):
        user = api.toggle_user(user_id)
        return jsonify(user.to_dict() if user else None)
