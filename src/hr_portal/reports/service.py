from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from ..attendance.repository import AttendanceRepository
from ..attendance.service import ensure_range, summarize
from ..core.enums import AttendanceStatus, LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    present_today: int
    absent_today: int
    pending_leaves: int

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "presentToday": self.present_today,
            "absentToday": self.absent_today,
            "pendingLeaves": self.pending_leaves,
        }


class ReportService:
    """Read-only aggregations behind the dashboard and reports pages."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        leaves: LeaveRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._leaves = leaves

    def dashboard(self, *, today: date) -> DashboardStats:
        today_records = self._attendance.list_between(today, today)
        return DashboardStats(
            total_employees=len(self._employees.get_all()),
            present_today=sum(1 for r in today_records if r.status == AttendanceStatus.PRESENT),
            absent_today=sum(1 for r in today_records if r.status == AttendanceStatus.ABSENT),
            pending_leaves=sum(1 for l in self._leaves.get_all() if l.status == LeaveStatus.PENDING),
        )

    def attendance_stats(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ):
        if bool(start) != bool(end):
            raise ValidationError("start and end must be given together")
        if start and end:
            ensure_range(start, end)
            records = list(self._attendance.list_between(start, end))
        else:
            records = list(self._attendance.get_all())
        if employee_id:
            records = [r for r in records if r.employee_id == employee_id]
        return summarize(records)

    def monthly_attendance(self, *, year: int) -> List[dict]:
        records = self._attendance.list_between(date(year, 1, 1), date(year, 12, 31))

        out: List[dict] = []
        for month in range(1, 13):
            month_records = [r for r in records if r.work_date.month == month]
            present = sum(1 for r in month_records if r.status == AttendanceStatus.PRESENT)
            absent = sum(1 for r in month_records if r.status == AttendanceStatus.ABSENT)
            total = len(month_records)
            out.append(
                {
                    "month": calendar.month_abbr[month],
                    "present": present,
                    "absent": absent,
                    "total": total,
                    "rate": round(present / total * 100) if total else 0,
                }
            )
        return out

    def department_headcount(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for e in self._employees.get_all():
            key = e.department or "Unassigned"
            counts[key] = counts.get(key, 0) + 1
        return counts

    def leave_type_breakdown(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for l in self._leaves.get_all():
            counts[l.leave_type.value] = counts.get(l.leave_type.value, 0) + 1
        return counts
