from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_pay(self, basic_salary: float, allowances: Mapping[str, float], deductions: Mapping[str, float]) -> float:
        raise NotImplementedError
