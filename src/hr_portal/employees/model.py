from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_date, parse_iso_date
from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee in the directory.

    Note: plain data object, storage access lives in the repository.
    """

    id: str
    employee_code: str
    name: str
    email: str
    department: str
    position: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    join_date: Optional[date] = None
    salary: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeCode": self.employee_code,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "status": self.status.value,
            "joinDate": format_date(self.join_date) if self.join_date else None,
            "salary": self.salary,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        join_date = data.get("joinDate")
        return cls(
            id=str(data.get("id") or ""),
            employee_code=str(data.get("employeeCode") or ""),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            department=str(data.get("department") or ""),
            position=str(data.get("position") or ""),
            status=EmployeeStatus(data.get("status") or EmployeeStatus.ACTIVE.value),
            join_date=parse_iso_date(join_date) if join_date else None,
            salary=float(data.get("salary") or 0),
        )
