from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: one employee's payslip for one month (YYYY-MM)."""

    id: str
    employee_id: str
    month: str
    basic_salary: float
    allowances: Dict[str, float] = field(default_factory=dict)
    deductions: Dict[str, float] = field(default_factory=dict)
    net_pay: float = 0.0
    status: PayrollStatus = PayrollStatus.PENDING

    @property
    def total_allowances(self) -> float:
        return float(sum(self.allowances.values()))

    @property
    def total_deductions(self) -> float:
        return float(sum(self.deductions.values()))

    @property
    def gross_pay(self) -> float:
        return self.basic_salary + self.total_allowances

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "month": self.month,
            "basicSalary": self.basic_salary,
            "allowances": dict(self.allowances),
            "deductions": dict(self.deductions),
            "netPay": self.net_pay,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PayrollRecord":
        return cls(
            id=str(data.get("id") or ""),
            employee_id=str(data["employeeId"]),
            month=str(data["month"]),
            basic_salary=float(data.get("basicSalary") or 0),
            allowances={k: float(v) for k, v in (data.get("allowances") or {}).items()},
            deductions={k: float(v) for k, v in (data.get("deductions") or {}).items()},
            net_pay=float(data.get("netPay") or 0),
            status=PayrollStatus(data.get("status") or PayrollStatus.PENDING.value),
        )


@dataclass(frozen=True)
class PayrollSummary:
    month: str
    total_employees: int
    total_gross_pay: float
    total_deductions: float
    total_net_pay: float
    processed: int
    pending: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "totalEmployees": self.total_employees,
            "totalGrossPay": self.total_gross_pay,
            "totalDeductions": self.total_deductions,
            "totalNetPay": self.total_net_pay,
            "processed": self.processed,
            "pending": self.pending,
        }
