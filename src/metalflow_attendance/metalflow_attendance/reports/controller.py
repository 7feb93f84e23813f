from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.enums import WindowBy
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .service import WEEKDAY_LABELS


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def _today_arg():
        value = request.args.get("today")
        return parse_iso_date(value) if value else None

    @app.route("/api/reports/employees/<employee_id>/stats", methods=["GET"], endpoint="report_employee_stats")
    def employee_stats(employee_id: str):
        try:
            window_by = request.args.get("window_by")
            window = request.args.get("window")
            stats = service.employee_stats(
                employee_id,
                window_by=WindowBy(window_by) if window_by else None,
                window=int(window) if window else None,
                today=_today_arg(),
                count_missing_days_as_absent=request.args.get("count_missing") == "1",
            )
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "data": stats.as_dict()}), 200

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="report_weekly")
    def weekly():
        try:
            report = service.weekly_report(_today_arg())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(
            {
                "success": True,
                "data": {
                    "start": report.start.isoformat(),
                    "end": report.end.isoformat(),
                    "rows": [row.as_dict() for row in report.rows],
                },
            }
        ), 200

    @app.route("/api/reports/weekly.csv", methods=["GET"], endpoint="report_weekly_csv")
    def weekly_csv():
        try:
            report = service.weekly_report(_today_arg())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["employee", "role", *WEEKDAY_LABELS, "total_hours"])
        writer.writeheader()
        for row in service.weekly_report_csv_rows(report):
            writer.writerow(row)

        filename = f"attendance_week_{report.start.strftime('%Y%m%d')}_{report.end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
