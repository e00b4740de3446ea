from __future__ import annotations

from typing import Mapping

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: basic + allowances - deductions, no tax rules."""

    def net_pay(self, basic_salary: float, allowances: Mapping[str, float], deductions: Mapping[str, float]) -> float:
        total = float(basic_salary) + sum(allowances.values()) - sum(deductions.values())
        return round(total, 2)
