from __future__ import annotations

import io

import qrcode
from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import to_date_key
from ..common.web import admin_required as _admin_required
from ..common.web import api_view, json_body, json_error
from ..common.web import login_required as _login_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    api = container.api
    login_required = _login_required(api)
    admin_required = _admin_required(api)

    def _own_or_admin(user_id: str) -> bool:
        session = api.get_session()
        return session is not None and (session.user.id == user_id or session.user.role == Role.ADMIN)

    @app.route("/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    @api_view
    @login_required
    def attendance_scan():
        data = json_body()
        user_id = str(data.get("userId") or "")
        if not _own_or_admin(user_id):
            return json_error("You can only check in for yourself.", 403)
        day = api.scan_qr(user_id, str(data.get("code") or ""))
        return jsonify(day.to_dict())

    @app.route("/attendance/week", methods=["GET"], endpoint="attendance_week")
    @api_view
    @login_required
    def attendance_week():
        user_id = request.args.get("userId", "")
        if not _own_or_admin(user_id):
            return json_error("Access denied.", 403)
        return jsonify([d.to_dict() for d in api.get_week(user_id)])

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    @api_view
    @login_required
    def attendance_history():
        user_id = request.args.get("userId", "")
        if not _own_or_admin(user_id):
            return json_error("Access denied.", 403)
        month = request.args.get("month") or container.clock().strftime("%Y-%m")
        return jsonify([d.to_dict() for d in api.get_history(user_id, month)])

    @app.route("/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @api_view
    @admin_required
    def admin_attendance():
        date_key = request.args.get("date") or to_date_key(container.clock())
        return jsonify([r.to_dict() for r in api.get_admin_rows(date_key)])

    @app.route("/office/qr.png", methods=["GET"], endpoint="office_qr_image")
    def office_qr_image():
        """QR image of the office code, for printing or an entrance screen."""

        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=2,
        )
        qr.add_data(container.settings.office_qr_code)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return send_file(buf, mimetype="image/png")
