from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from ..common.datetime_utils import parse_date_arg
from ..common.validators import require_choice, require_non_empty, require_non_negative
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("name", "email", "department", "position", "status", "joinDate", "salary")


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_all(self) -> Sequence[Employee]:
        return self._employees.get_all()

    def get_by_id(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _clean(self, data: Dict[str, Any], *, partial: bool) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key in _EDITABLE_FIELDS:
            if key not in data:
                continue
            value = data[key]
            if key == "name":
                value = require_non_empty(value, "Name")
            elif key == "status":
                value = require_choice(value, EmployeeStatus, "Status").value
            elif key == "joinDate" and value:
                parse_date_arg(value, "Join date")
            elif key == "salary":
                value = require_non_negative(value, "Salary")
            elif isinstance(value, str):
                value = value.strip()
            out[key] = value
        if not partial and "name" not in out:
            require_non_empty("", "Name")
        return out

    def create(self, data: Dict[str, Any]) -> Employee:
        fields = self._clean(data, partial=False)
        employee = self._employees.create(Employee.from_dict(fields))
        logger.info("Employee %s created (%s)", employee.id, employee.employee_code)
        return employee

    def update(self, employee_id: str, data: Dict[str, Any]) -> Employee:
        return self._employees.update(employee_id, self._clean(data, partial=True))

    def delete(self, employee_id: str) -> Employee:
        employee = self._employees.delete(employee_id)
        logger.info("Employee %s deleted", employee_id)
        return employee

    def search_by_name(self, query: str) -> Sequence[Employee]:
        """Case-insensitive match on name or employee code."""
        q = (query or "").strip().lower()
        return [
            e for e in self._employees.get_all()
            if q in e.name.lower() or q in e.employee_code.lower()
        ]

    def get_by_department(self, department: str) -> Sequence[Employee]:
        return [e for e in self._employees.get_all() if e.department == department]
