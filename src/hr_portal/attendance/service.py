from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between, now_local
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_WORK_MODE
from ..core.enums import AttendanceStatus, WorkMode
from ..core.exceptions import DuplicateCheckInError, NoActiveCheckInError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceDayCycle:
    """Check-in / check-out lifecycle of one record per employee per day.

    States per (employee, date): no record -> checked in -> checked out.
    Every precondition is verified before the repository is written to, so a
    failed call leaves stored state untouched.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository | None = None):
        self._attendance = attendance
        self._employees = employees

    def check_in(
        self,
        employee_id: str,
        work_mode: str | WorkMode = DEFAULT_WORK_MODE,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()
        employee_id = require_non_empty(employee_id, "Employee id")
        mode = work_mode if isinstance(work_mode, WorkMode) else require_choice(work_mode, WorkMode, "Work mode")

        if self._employees is not None and not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        if self._attendance.get_for_employee_and_date(employee_id, today):
            logger.warning("Duplicate check-in rejected for employee %s on %s", employee_id, today)
            raise DuplicateCheckInError()

        record = self._attendance.create_checkin(
            AttendanceRecord(
                id="",
                employee_id=employee_id,
                work_date=today,
                check_in=now.time().replace(second=0, microsecond=0),
                check_out=None,
                status=AttendanceStatus.PRESENT,
                work_mode=mode,
                total_hours=Decimal("0"),
            )
        )
        logger.info("Employee %s checked in at %s (%s)", employee_id, now.strftime("%H:%M"), mode.value)
        return record

    def check_out(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()
        employee_id = require_non_empty(employee_id, "Employee id")

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record or record.is_checked_out:
            logger.warning("Check-out rejected for employee %s on %s", employee_id, today)
            raise NoActiveCheckInError()

        check_out = now.time().replace(second=0, microsecond=0)
        total_hours = hours_between(today, record.check_in, check_out)
        if total_hours < 0:
            logger.warning(
                "Check-out %s before check-in %s for employee %s, recording 0 hours",
                check_out, record.check_in, employee_id,
            )
            total_hours = Decimal("0.00")

        updated = self._attendance.update_checkout(record.with_check_out(check_out, total_hours))
        logger.info("Employee %s checked out at %s (%s h)", employee_id, now.strftime("%H:%M"), total_hours)
        return updated

    def get_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.get_all()

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._attendance.get_by_id(record_id)

    def get_by_employee_id(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(employee_id)

    def get_by_date_range(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records with start_date <= date <= end_date."""
        return self._attendance.list_between(start_date, end_date)

    def get_today_record(self, employee_id: str, today: date | None = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, today or now_local().date())


class AttendanceAdminService:
    """Administrative operations that sit outside the day cycle."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def correct_status(self, record_id: str, status: str) -> AttendanceRecord:
        new_status = require_choice(status, AttendanceStatus, "Status")
        record = self._attendance.update_status(record_id, new_status)
        logger.info("Attendance %s status corrected to %s", record_id, new_status.value)
        return record

    def delete(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.delete(record_id)
        logger.info("Attendance %s deleted", record_id)
        return record


def summarize(records: Sequence[AttendanceRecord]) -> AttendanceStats:
    """Day counts, total hours and rates over a set of records."""
    total = len(records)
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
    late = sum(1 for r in records if r.status == AttendanceStatus.LATE)
    hours = float(sum((r.total_hours for r in records), Decimal("0")))

    return AttendanceStats(
        total_days=total,
        present_days=present,
        absent_days=absent,
        late_days=late,
        total_hours=round(hours, 2),
        attendance_rate=round(present / total * 100, 1) if total else 0.0,
        avg_hours_per_day=round(hours / present, 1) if present else 0.0,
    )


def ensure_range(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise ValidationError("End date must not be before start date")
