from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_date_arg
from ..common.http import api_errors, fail, json_body, ok
from ..container import Container
from ..core.constants import DEFAULT_WORK_MODE
from ..core.exceptions import NotFoundError
from .service import ensure_range


def register(app: Flask, container: Container) -> None:
    cycle = container.attendance_cycle

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @api_errors
    def check_in():
        data = json_body()
        record = cycle.check_in(data.get("employeeId"), data.get("workMode") or DEFAULT_WORK_MODE)
        return ok(record.to_dict(), 201)

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @api_errors
    def check_out():
        data = json_body()
        record = cycle.check_out(str(data.get("employeeId") or ""))
        return ok(record.to_dict())

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @api_errors
    def today():
        employee_id = request.args.get("employeeId")
        if not employee_id:
            return fail("employeeId is required")
        record = cycle.get_today_record(employee_id)
        return ok(record.to_dict() if record else None)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_errors
    def list_records():
        employee_id = request.args.get("employeeId")
        start_s = request.args.get("start")
        end_s = request.args.get("end")

        if start_s or end_s:
            start = parse_date_arg(start_s, "start")
            end = parse_date_arg(end_s, "end")
            ensure_range(start, end)
            records = cycle.get_by_date_range(start, end)
            if employee_id:
                records = [r for r in records if r.employee_id == employee_id]
        elif employee_id:
            records = cycle.get_by_employee_id(employee_id)
        else:
            records = cycle.get_all()
        return ok([r.to_dict() for r in records])

    @app.route("/api/attendance/<record_id>", methods=["GET"], endpoint="attendance_detail")
    @api_errors
    def detail(record_id: str):
        record = cycle.get_by_id(record_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return ok(record.to_dict())

    @app.route("/api/attendance/<record_id>/status", methods=["PATCH"], endpoint="attendance_status")
    @api_errors
    def correct_status(record_id: str):
        record = container.attendance_admin.correct_status(record_id, json_body().get("status"))
        return ok(record.to_dict())

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="attendance_delete")
    @api_errors
    def delete(record_id: str):
        return ok(container.attendance_admin.delete(record_id).to_dict())
