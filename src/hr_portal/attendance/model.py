from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, time
from decimal import Decimal
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_date, format_hhmm, parse_hhmm, parse_iso_date
from ..core.enums import AttendanceStatus, WorkMode


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    id: str
    employee_id: str
    work_date: date
    check_in: time
    check_out: Optional[time]
    status: AttendanceStatus
    work_mode: WorkMode
    total_hours: Decimal = Decimal("0")

    @property
    def is_checked_out(self) -> bool:
        return self.check_out is not None

    def with_check_out(self, check_out: time, total_hours: Decimal) -> "AttendanceRecord":
        return replace(self, check_out=check_out, total_hours=total_hours)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": format_date(self.work_date),
            "checkIn": format_hhmm(self.check_in),
            "checkOut": format_hhmm(self.check_out) if self.check_out else None,
            "status": self.status.value,
            "workMode": self.work_mode.value,
            "totalHours": float(self.total_hours),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttendanceRecord":
        check_out = data.get("checkOut")
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            work_date=parse_iso_date(data["date"]),
            check_in=parse_hhmm(data["checkIn"]),
            check_out=parse_hhmm(check_out) if check_out else None,
            status=AttendanceStatus(data.get("status") or AttendanceStatus.PRESENT.value),
            work_mode=WorkMode(data.get("workMode") or WorkMode.OFFICE.value),
            total_hours=Decimal(str(data.get("totalHours") or 0)),
        )


@dataclass(frozen=True)
class AttendanceStats:
    """Aggregates over a set of attendance records (attendance page header)."""

    total_days: int
    present_days: int
    absent_days: int
    late_days: int
    total_hours: float
    attendance_rate: float
    avg_hours_per_day: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "lateDays": self.late_days,
            "totalHours": self.total_hours,
            "attendanceRate": self.attendance_rate,
            "avgHoursPerDay": self.avg_hours_per_day,
        }
