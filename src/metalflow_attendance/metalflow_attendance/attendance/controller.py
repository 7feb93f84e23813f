from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .service import record_as_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/kiosk", methods=["GET"], endpoint="attendance_kiosk")
    def kiosk():
        board = service.kiosk_board(now_local().date())
        return jsonify({"success": True, "data": [entry.as_dict() for entry in board]}), 200

    @app.route("/api/attendance/kiosk/<employee_id>", methods=["POST"], endpoint="attendance_kiosk_toggle")
    def kiosk_toggle(employee_id: str):
        """Single kiosk button: check-in when pending, check-out when working."""
        try:
            result = service.toggle(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": result}), 200

    @app.route("/api/attendance/logs", methods=["GET"], endpoint="attendance_logs")
    def daily_logs():
        try:
            day = parse_iso_date(request.args["date"]) if request.args.get("date") else now_local().date()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        records = service.daily_log(day)
        return jsonify({"success": True, "data": [record_as_dict(r) for r in records]}), 200

    @app.route("/api/attendance/logs/<record_id>", methods=["PATCH"], endpoint="attendance_log_update")
    def update_log(record_id: str):
        data = request.get_json(silent=True) or {}
        check_in = (data.get("check_in") or "").strip()
        if not check_in:
            return jsonify({"success": False, "message": "check_in is required"}), 400
        try:
            updated = service.correct_record(
                record_id,
                check_in=check_in,
                check_out=(data.get("check_out") or "").strip() or None,
                rederive_status=bool(data.get("rederive_status", False)),
            )
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            logger.warning("Rejected correction of record %s: %s", record_id, e)
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": record_as_dict(updated)}), 200

    @app.route("/api/attendance/logs/<record_id>", methods=["DELETE"], endpoint="attendance_log_delete")
    def delete_log(record_id: str):
        try:
            service.delete_record(record_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "message": "Record deleted"}), 200
