"""Salary structure helpers.

Payroll never fails on a missing structure: one is synthesised from the
employee's flat annual CTC (or the policy default) using fixed percentages.
"""

from __future__ import annotations

from ..common.money import require_finite_amount, round_half_up
from ..core import constants
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from .model import Employee, SalaryStructure


def generate_structure(annual_ctc: float) -> SalaryStructure:
    monthly_gross = round_half_up(annual_ctc / 12)
    basic = round_half_up(monthly_gross * constants.BASIC_RATE)
    hra = round_half_up(monthly_gross * constants.HRA_RATE)
    allowances = round_half_up(monthly_gross * constants.ALLOWANCES_RATE)
    pf_employee = round_half_up(basic * constants.PF_RATE)
    esi_employee = (
        round_half_up(monthly_gross * constants.ESI_RATE) if monthly_gross < constants.ESI_GROSS_CEILING else 0
    )

    return SalaryStructure(
        annual_ctc=annual_ctc,
        basic=basic,
        hra=hra,
        allowances=allowances,
        pf_employee=pf_employee,
        esi_employee=esi_employee,
        professional_tax=constants.PROFESSIONAL_TAX,
        tds=round_half_up(monthly_gross * constants.TDS_RATE),
    )


def structure_for(employee: Employee, policy: PayrollPolicy = DEFAULT_POLICY) -> SalaryStructure:
    if employee.salary_structure is not None:
        return employee.salary_structure
    if employee.salary:
        return generate_structure(employee.salary)
    return generate_structure(policy.default_annual_ctc)


def validate_structure(structure: SalaryStructure) -> SalaryStructure:
    """Raise ValidationError on non-finite or negative monetary fields."""
    for name in ("basic", "hra", "allowances", "pf_employee", "esi_employee", "professional_tax", "tds"):
        require_finite_amount(getattr(structure, name) or 0, name)
    return structure
