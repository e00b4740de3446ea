from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_errors
    def list_employees():
        q = request.args.get("q")
        department = request.args.get("department")
        status = request.args.get("status")

        employees = service.search_by_name(q) if q else service.get_all()
        if department:
            employees = [e for e in employees if e.department == department]
        if status:
            employees = [e for e in employees if e.status.value == status]
        return ok([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @api_errors
    def create_employee():
        return ok(service.create(json_body()).to_dict(), 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_detail")
    @api_errors
    def employee_detail(employee_id: str):
        return ok(service.get_by_id(employee_id).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["PATCH", "PUT"], endpoint="employees_update")
    @api_errors
    def update_employee(employee_id: str):
        return ok(service.update(employee_id, json_body()).to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @api_errors
    def delete_employee(employee_id: str):
        return ok(service.delete(employee_id).to_dict())
