from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/api/leaves", methods=["GET"], endpoint="leaves_list")
    @api_errors
    def list_leaves():
        employee_id = request.args.get("employeeId")
        leaves = service.list_requests(status=request.args.get("status"), leave_type=request.args.get("type"))
        if employee_id:
            leaves = [l for l in leaves if l.employee_id == employee_id]
        return ok([l.to_dict() for l in leaves])

    @app.route("/api/leaves/summary", methods=["GET"], endpoint="leaves_summary")
    @api_errors
    def leave_summary():
        return ok(service.summary())

    @app.route("/api/leaves", methods=["POST"], endpoint="leaves_create")
    @api_errors
    def create_leave():
        return ok(service.create(json_body()).to_dict(), 201)

    @app.route("/api/leaves/<leave_id>", methods=["GET"], endpoint="leaves_detail")
    @api_errors
    def leave_detail(leave_id: str):
        return ok(service.get_by_id(leave_id).to_dict())

    @app.route("/api/leaves/<leave_id>", methods=["PATCH"], endpoint="leaves_update")
    @api_errors
    def update_leave(leave_id: str):
        return ok(service.update(leave_id, json_body()).to_dict())

    @app.route("/api/leaves/<leave_id>/approve", methods=["POST"], endpoint="leaves_approve")
    @api_errors
    def approve_leave(leave_id: str):
        return ok(service.approve(leave_id, json_body().get("approvedBy")).to_dict())

    @app.route("/api/leaves/<leave_id>/reject", methods=["POST"], endpoint="leaves_reject")
    @api_errors
    def reject_leave(leave_id: str):
        return ok(service.reject(leave_id, json_body().get("approvedBy")).to_dict())

    @app.route("/api/leaves/<leave_id>", methods=["DELETE"], endpoint="leaves_delete")
    @api_errors
    def delete_leave(leave_id: str):
        return ok(service.delete(leave_id).to_dict())
