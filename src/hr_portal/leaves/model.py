from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_date, parse_iso_date
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    """Domain entity: a leave request going through approval."""

    id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    applied_on: datetime
    approved_by: Optional[str] = None

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "leaveType": self.leave_type.value,
            "startDate": format_date(self.start_date),
            "endDate": format_date(self.end_date),
            "reason": self.reason,
            "status": self.status.value,
            "appliedOn": self.applied_on.isoformat(),
            "approvedBy": self.approved_by,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaveRequest":
        return cls(
            id=str(data.get("id") or ""),
            employee_id=str(data["employeeId"]),
            leave_type=LeaveType(data["leaveType"]),
            start_date=parse_iso_date(data["startDate"]),
            end_date=parse_iso_date(data["endDate"]),
            reason=str(data.get("reason") or ""),
            status=LeaveStatus(data.get("status") or LeaveStatus.PENDING.value),
            applied_on=datetime.fromisoformat(data["appliedOn"]),
            approved_by=data.get("approvedBy"),
        )
