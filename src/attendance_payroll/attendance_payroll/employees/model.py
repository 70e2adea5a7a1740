from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class SalaryStructure:
    """Monthly decomposition of an annual CTC.

    basic + hra + allowances is the monthly gross; the engine trusts the stored
    figures and never re-derives them from `annual_ctc`.
    """

    annual_ctc: float
    basic: float
    hra: float
    allowances: float
    pf_employee: float
    esi_employee: float
    professional_tax: float
    tds: float
    pf_rate: Optional[float] = None
    esi_rate: Optional[float] = None

    @property
    def monthly_gross(self) -> float:
        return self.basic + self.hra + self.allowances

    @property
    def statutory_deductions(self) -> float:
        return self.pf_employee + self.professional_tax + self.tds + (self.esi_employee or 0)


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, the engine only reads it.
    """

    employee_id: str
    name: str
    manager_id: Optional[str] = None
    shift_id: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    salary: Optional[float] = None
    salary_structure: Optional[SalaryStructure] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
