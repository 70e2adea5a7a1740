from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import SalaryStructure
from ..model import DayTally, PayComputation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        *,
        structure: SalaryStructure,
        tally: DayTally,
        total_days: int,
        reimbursements: float,
    ) -> PayComputation:
        raise NotImplementedError
