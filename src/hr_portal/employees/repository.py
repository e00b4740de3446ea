from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

from ..store.record_store import RecordStore
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: str, fields: Dict[str, Any]) -> Employee:
        raise NotImplementedError

    def delete(self, employee_id: str) -> Employee:
        raise NotImplementedError


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_all(self) -> Sequence[Employee]:
        return [Employee.from_dict(r) for r in self._store.query()]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        r = self._store.get(str(employee_id))
        return Employee.from_dict(r) if r else None

    def create(self, employee: Employee) -> Employee:
        data = employee.to_dict()
        data.pop("id")
        created = self._store.create(data)
        if not created.get("employeeCode"):
            code = f"EMP{created['id'][-4:].upper().zfill(4)}"
            created = self._store.update(created["id"], {"employeeCode": code})
        return Employee.from_dict(created)

    def update(self, employee_id: str, fields: Dict[str, Any]) -> Employee:
        return Employee.from_dict(self._store.update(str(employee_id), fields))

    def delete(self, employee_id: str) -> Employee:
        return Employee.from_dict(self._store.delete(str(employee_id)))
