from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

from ..store.record_store import RecordStore
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get_by_id(self, leave_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create(self, leave: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def update(self, leave_id: str, fields: Dict[str, Any]) -> LeaveRequest:
        raise NotImplementedError

    def delete(self, leave_id: str) -> LeaveRequest:
        raise NotImplementedError


class StoreLeaveRepository(LeaveRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_all(self) -> Sequence[LeaveRequest]:
        return [LeaveRequest.from_dict(r) for r in self._store.query()]

    def get_by_id(self, leave_id: str) -> Optional[LeaveRequest]:
        r = self._store.get(str(leave_id))
        return LeaveRequest.from_dict(r) if r else None

    def list_for_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        return [LeaveRequest.from_dict(r) for r in self._store.query(lambda r: r.get("employeeId") == employee_id)]

    def create(self, leave: LeaveRequest) -> LeaveRequest:
        data = leave.to_dict()
        data.pop("id")
        return LeaveRequest.from_dict(self._store.create(data))

    def update(self, leave_id: str, fields: Dict[str, Any]) -> LeaveRequest:
        return LeaveRequest.from_dict(self._store.update(str(leave_id), fields))

    def delete(self, leave_id: str) -> LeaveRequest:
        return LeaveRequest.from_dict(self._store.delete(str(leave_id)))
