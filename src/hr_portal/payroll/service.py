from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_month
from ..common.validators import require_choice, require_non_empty, require_non_negative
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord, PayrollSummary
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def _amounts(values: Optional[Mapping[str, Any]], field_name: str) -> Dict[str, float]:
    return {str(k): require_non_negative(v, f"{field_name} '{k}'") for k, v in (values or {}).items()}


class PayrollService:
    def __init__(self, payroll: PayrollRepository, *, calculator: Optional[PayrollCalculator] = None):
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()

    def get_all(self) -> Sequence[PayrollRecord]:
        return self._payroll.get_all()

    def get_by_id(self, record_id: str) -> PayrollRecord:
        record = self._payroll.get_by_id(record_id)
        if not record:
            raise NotFoundError("Payroll record not found")
        return record

    def get_by_employee_id(self, employee_id: str) -> Sequence[PayrollRecord]:
        return self._payroll.list_for_employee(employee_id)

    def get_by_month(self, month: str) -> Sequence[PayrollRecord]:
        return self._payroll.list_for_month(parse_month(month))

    def create(self, data: Dict[str, Any]) -> PayrollRecord:
        basic = require_non_negative(data.get("basicSalary", 0), "Basic salary")
        allowances = _amounts(data.get("allowances"), "Allowance")
        deductions = _amounts(data.get("deductions"), "Deduction")
        return self._payroll.create(
            PayrollRecord(
                id="",
                employee_id=require_non_empty(data.get("employeeId"), "Employee id"),
                month=parse_month(data.get("month")),
                basic_salary=basic,
                allowances=allowances,
                deductions=deductions,
                net_pay=self._calculator.net_pay(basic, allowances, deductions),
                status=PayrollStatus.PENDING,
            )
        )

    def update(self, record_id: str, data: Dict[str, Any]) -> PayrollRecord:
        current = self.get_by_id(record_id)
        basic = require_non_negative(data.get("basicSalary", current.basic_salary), "Basic salary")
        allowances = _amounts(data.get("allowances", current.allowances), "Allowance")
        deductions = _amounts(data.get("deductions", current.deductions), "Deduction")
        fields: Dict[str, Any] = {
            "basicSalary": basic,
            "allowances": allowances,
            "deductions": deductions,
            "netPay": self._calculator.net_pay(basic, allowances, deductions),
        }
        if "status" in data:
            fields["status"] = require_choice(data["status"], PayrollStatus, "Status").value
        return self._payroll.update(record_id, fields)

    def delete(self, record_id: str) -> PayrollRecord:
        return self._payroll.delete(record_id)

    def process_payroll(
        self,
        employee_id: str,
        month: str,
        basic_salary: float,
        allowances: Optional[Mapping[str, float]] = None,
        deductions: Optional[Mapping[str, float]] = None,
    ) -> PayrollRecord:
        basic = require_non_negative(basic_salary, "Basic salary")
        allowances_ = _amounts(allowances, "Allowance")
        deductions_ = _amounts(deductions, "Deduction")
        net_pay = self._calculator.net_pay(basic, allowances_, deductions_)

        record = self._payroll.create(
            PayrollRecord(
                id="",
                employee_id=require_non_empty(employee_id, "Employee id"),
                month=parse_month(month),
                basic_salary=basic,
                allowances=allowances_,
                deductions=deductions_,
                net_pay=net_pay,
                status=PayrollStatus.PROCESSED,
            )
        )
        logger.info("Payroll processed for employee %s, month %s: net %.2f", employee_id, record.month, net_pay)
        return record

    def month_summary(self, month: str) -> PayrollSummary:
        records = self.get_by_month(month)
        return PayrollSummary(
            month=parse_month(month),
            total_employees=len(records),
            total_gross_pay=round(sum(r.gross_pay for r in records), 2),
            total_deductions=round(sum(r.total_deductions for r in records), 2),
            total_net_pay=round(sum(r.net_pay for r in records), 2),
            processed=sum(1 for r in records if r.status == PayrollStatus.PROCESSED),
            pending=sum(1 for r in records if r.status == PayrollStatus.PENDING),
        )
