from __future__ import annotations

from ...common.money import round_half_up
from ...core import constants
from ...employees.model import SalaryStructure
from ..model import DayTally, PayComputation
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Pro-rata LOP plus a penalty day for every N late/early-exit infractions."""

    def __init__(self, *, infractions_per_penalty_day: int = constants.INFRACTIONS_PER_PENALTY_DAY):
        self._infractions_per_penalty_day = int(infractions_per_penalty_day)

    def penalty_days(self, infraction_count: int) -> int:
        if self._infractions_per_penalty_day <= 0:
            return 0
        return infraction_count // self._infractions_per_penalty_day

    def compute(
        self,
        *,
        structure: SalaryStructure,
        tally: DayTally,
        total_days: int,
        reimbursements: float,
    ) -> PayComputation:
        assert total_days > 0, "month without days"

        penalty_days = self.penalty_days(tally.infraction_count)
        payable_days = total_days - tally.unpaid_days - penalty_days

        monthly_gross = structure.monthly_gross
        per_day_salary = monthly_gross / total_days
        lop_deduction = round_half_up(per_day_salary * tally.unpaid_days)
        penalty_deduction = round_half_up(per_day_salary * penalty_days)

        statutory = structure.statutory_deductions
        total_deductions = statutory + lop_deduction + penalty_deduction
        net_pay = round_half_up(monthly_gross - total_deductions + reimbursements)

        return PayComputation(
            monthly_gross=monthly_gross,
            per_day_salary=per_day_salary,
            penalty_days=penalty_days,
            payable_days=payable_days,
            unpaid_days=tally.unpaid_days + penalty_days,
            lop_deduction=lop_deduction,
            penalty_deduction=penalty_deduction,
            statutory_deductions=statutory,
            total_deductions=total_deductions,
            reimbursements=reimbursements,
            net_pay=net_pay,
        )
