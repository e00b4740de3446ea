from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @api_errors
    def list_payroll():
        month = request.args.get("month")
        employee_id = request.args.get("employeeId")
        if month:
            records = service.get_by_month(month)
        elif employee_id:
            records = service.get_by_employee_id(employee_id)
        else:
            records = service.get_all()
        if month and employee_id:
            records = [r for r in records if r.employee_id == employee_id]
        return ok([r.to_dict() for r in records])

    @app.route("/api/payroll", methods=["POST"], endpoint="payroll_create")
    @api_errors
    def create_payroll():
        return ok(service.create(json_body()).to_dict(), 201)

    @app.route("/api/payroll/process", methods=["POST"], endpoint="payroll_process")
    @api_errors
    def process_payroll():
        data = json_body()
        record = service.process_payroll(
            data.get("employeeId"),
            data.get("month"),
            data.get("basicSalary"),
            data.get("allowances"),
            data.get("deductions"),
        )
        return ok(record.to_dict(), 201)

    @app.route("/api/payroll/summary", methods=["GET"], endpoint="payroll_summary")
    @api_errors
    def payroll_summary():
        month = request.args.get("month")
        if not month:
            return fail("month is required")
        return ok(service.month_summary(month).to_dict())

    @app.route("/api/payroll/<record_id>", methods=["GET"], endpoint="payroll_detail")
    @api_errors
    def payroll_detail(record_id: str):
        return ok(service.get_by_id(record_id).to_dict())

    @app.route("/api/payroll/<record_id>", methods=["PATCH"], endpoint="payroll_update")
    @api_errors
    def update_payroll(record_id: str):
        return ok(service.update(record_id, json_body()).to_dict())

    @app.route("/api/payroll/<record_id>", methods=["DELETE"], endpoint="payroll_delete")
    @api_errors
    def delete_payroll(record_id: str):
        return ok(service.delete(record_id).to_dict())
