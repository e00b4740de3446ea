from __future__ import annotations

import csv
import io
from datetime import MAXYEAR, MINYEAR

from flask import Flask, request

from ..common.datetime_utils import now_local, parse_date_arg
from ..common.http import api_errors, fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/reports/dashboard", methods=["GET"], endpoint="reports_dashboard")
    @api_errors
    def dashboard():
        today_s = request.args.get("date")
        today = parse_date_arg(today_s, "date") if today_s else now_local().date()
        return ok(service.dashboard(today=today).to_dict())

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="reports_attendance")
    @api_errors
    def attendance_stats():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if bool(start_s) != bool(end_s):
            return fail("start and end must be given together")
        stats = service.attendance_stats(
            employee_id=request.args.get("employeeId"),
            start=parse_date_arg(start_s, "start") if start_s else None,
            end=parse_date_arg(end_s, "end") if end_s else None,
        )
        return ok(stats.to_dict())

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="reports_monthly")
    @api_errors
    def monthly():
        try:
            year = int(request.args.get("year") or now_local().year)
        except ValueError:
            return fail("year must be a number")
        if not MINYEAR <= year <= MAXYEAR:
            return fail(f"year must be between {MINYEAR} and {MAXYEAR}")
        return ok(service.monthly_attendance(year=year))

    @app.route("/api/reports/departments", methods=["GET"], endpoint="reports_departments")
    @api_errors
    def departments():
        return ok(service.department_headcount())

    @app.route("/api/reports/leave-types", methods=["GET"], endpoint="reports_leave_types")
    @api_errors
    def leave_types():
        return ok(service.leave_type_breakdown())

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="reports_attendance_csv")
    @api_errors
    def attendance_csv():
        """Attendance rows in a date range as a CSV download."""
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if not start_s or not end_s:
            return fail("Missing start/end parameters")
        start = parse_date_arg(start_s, "start")
        end = parse_date_arg(end_s, "end")
        records = container.attendance_cycle.get_by_date_range(start, end)

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["date", "employeeId", "checkIn", "checkOut", "status", "workMode", "totalHours"],
            extrasaction="ignore",
        )
        writer.writeheader()
        for r in sorted(records, key=lambda r: (r.work_date, r.employee_id)):
            writer.writerow(r.to_dict())

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
