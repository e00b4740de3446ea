from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import format_date, parse_iso_date
from ..core.enums import AttendanceStatus
from ..store.record_store import RecordStore
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkout(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update_status(self, record_id: str, status: AttendanceStatus) -> AttendanceRecord:
        """Admin-only correction, e.g. an absence marked retroactively."""

        raise NotImplementedError

    def delete(self, record_id: str) -> AttendanceRecord:
        raise NotImplementedError


class StoreAttendanceRepository(AttendanceRepository):
    """Maps AttendanceRecord entities onto a generic RecordStore collection."""

    def __init__(self, store: RecordStore):
        self._store = store

    def get_all(self) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_dict(r) for r in self._store.query()]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        r = self._store.get(str(record_id))
        return AttendanceRecord.from_dict(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        key = format_date(work_date)
        rows = self._store.query(lambda r: r.get("employeeId") == employee_id and r.get("date") == key)
        return AttendanceRecord.from_dict(rows[0]) if rows else None

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        rows = self._store.query(lambda r: r.get("employeeId") == employee_id)
        return [AttendanceRecord.from_dict(r) for r in rows]

    def list_between(self, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        # Compare as dates, not strings.
        rows = self._store.query(lambda r: start_date <= parse_iso_date(r["date"]) <= end_date)
        return [AttendanceRecord.from_dict(r) for r in rows]

    def create_checkin(self, record: AttendanceRecord) -> AttendanceRecord:
        data = record.to_dict()
        data.pop("id")
        return AttendanceRecord.from_dict(self._store.create(data))

    def update_checkout(self, record: AttendanceRecord) -> AttendanceRecord:
        data = record.to_dict()
        updated = self._store.update(record.id, {"checkOut": data["checkOut"], "totalHours": data["totalHours"]})
        return AttendanceRecord.from_dict(updated)

    def update_status(self, record_id: str, status: AttendanceStatus) -> AttendanceRecord:
        return AttendanceRecord.from_dict(self._store.update(str(record_id), {"status": status.value}))

    def delete(self, record_id: str) -> AttendanceRecord:
        return AttendanceRecord.from_dict(self._store.delete(str(record_id)))
