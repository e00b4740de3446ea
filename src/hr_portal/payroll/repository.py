from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence

from ..store.record_store import RecordStore
from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def create(self, record: PayrollRecord) -> PayrollRecord:
        raise NotImplementedError

    def update(self, record_id: str, fields: Dict[str, Any]) -> PayrollRecord:
        raise NotImplementedError

    def delete(self, record_id: str) -> PayrollRecord:
        raise NotImplementedError


class StorePayrollRepository(PayrollRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_all(self) -> Sequence[PayrollRecord]:
        return [PayrollRecord.from_dict(r) for r in self._store.query()]

    def get_by_id(self, record_id: str) -> Optional[PayrollRecord]:
        r = self._store.get(str(record_id))
        return PayrollRecord.from_dict(r) if r else None

    def list_for_employee(self, employee_id: str) -> Sequence[PayrollRecord]:
        return [PayrollRecord.from_dict(r) for r in self._store.query(lambda r: r.get("employeeId") == employee_id)]

    def list_for_month(self, month: str) -> Sequence[PayrollRecord]:
        return [PayrollRecord.from_dict(r) for r in self._store.query(lambda r: r.get("month") == month)]

    def create(self, record: PayrollRecord) -> PayrollRecord:
        data = record.to_dict()
        data.pop("id")
        return PayrollRecord.from_dict(self._store.create(data))

    def update(self, record_id: str, fields: Dict[str, Any]) -> PayrollRecord:
        return PayrollRecord.from_dict(self._store.update(str(record_id), fields))

    def delete(self, record_id: str) -> PayrollRecord:
        return PayrollRecord.from_dict(self._store.delete(str(record_id)))
