from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import format_date, now_local, parse_date_arg
from ..common.validators import require_choice, require_non_empty
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def get_all(self) -> Sequence[LeaveRequest]:
        return self._leaves.get_all()

    def get_by_id(self, leave_id: str) -> LeaveRequest:
        leave = self._leaves.get_by_id(leave_id)
        if not leave:
            raise NotFoundError("Leave request not found")
        return leave

    def get_by_employee_id(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(employee_id)

    def list_requests(self, *, status: Optional[str] = None, leave_type: Optional[str] = None) -> Sequence[LeaveRequest]:
        """Filtered requests, most recently applied first."""
        items = list(self._leaves.get_all())
        if status:
            wanted_status = require_choice(status, LeaveStatus, "Status")
            items = [l for l in items if l.status == wanted_status]
        if leave_type:
            wanted_type = require_choice(leave_type, LeaveType, "Leave type")
            items = [l for l in items if l.leave_type == wanted_type]
        items.sort(key=lambda l: l.applied_on, reverse=True)
        return items

    def create(self, data: Dict[str, Any], *, now: datetime | None = None) -> LeaveRequest:
        employee_id = require_non_empty(data.get("employeeId"), "Employee id")
        leave_type = require_choice(data.get("leaveType"), LeaveType, "Leave type")
        start = parse_date_arg(data.get("startDate"), "Start date")
        end = parse_date_arg(data.get("endDate"), "End date")
        if end < start:
            raise ValidationError("End date must not be before start date")

        leave = self._leaves.create(
            LeaveRequest(
                id="",
                employee_id=employee_id,
                leave_type=leave_type,
                start_date=start,
                end_date=end,
                reason=(data.get("reason") or "").strip(),
                status=LeaveStatus.PENDING,
                applied_on=now or now_local(),
            )
        )
        logger.info("Leave %s requested by employee %s (%s days)", leave.id, employee_id, leave.days)
        return leave

    def _decide(self, leave_id: str, status: LeaveStatus, approved_by: str) -> LeaveRequest:
        leave = self.get_by_id(leave_id)
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError(f"Leave request is already {leave.status.value}")
        decided = self._leaves.update(
            leave_id,
            {"status": status.value, "approvedBy": require_non_empty(approved_by, "Approver")},
        )
        logger.info("Leave %s %s by %s", leave_id, status.value, approved_by)
        return decided

    def approve(self, leave_id: str, approved_by: str) -> LeaveRequest:
        return self._decide(leave_id, LeaveStatus.APPROVED, approved_by)

    def reject(self, leave_id: str, approved_by: str) -> LeaveRequest:
        return self._decide(leave_id, LeaveStatus.REJECTED, approved_by)

    def update(self, leave_id: str, data: Dict[str, Any]) -> LeaveRequest:
        current = self.get_by_id(leave_id)
        fields: Dict[str, Any] = {}
        if "leaveType" in data:
            fields["leaveType"] = require_choice(data["leaveType"], LeaveType, "Leave type").value
        start = parse_date_arg(data["startDate"], "Start date") if "startDate" in data else current.start_date
        end = parse_date_arg(data["endDate"], "End date") if "endDate" in data else current.end_date
        if end < start:
            raise ValidationError("End date must not be before start date")
        if "startDate" in data:
            fields["startDate"] = format_date(start)
        if "endDate" in data:
            fields["endDate"] = format_date(end)
        if "reason" in data:
            fields["reason"] = (data["reason"] or "").strip()
        return self._leaves.update(leave_id, fields)

    def delete(self, leave_id: str) -> LeaveRequest:
        return self._leaves.delete(leave_id)

    def summary(self) -> Dict[str, int]:
        items = self._leaves.get_all()
        out = {"total": len(items)}
        for s in LeaveStatus:
            out[s.value] = sum(1 for l in items if l.status == s)
        return out
