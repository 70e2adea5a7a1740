"""Monthly payroll batch.

For each employee, every day of the month is either free (weekend, holiday,
approved leave) or classified from punches; the tallies then go through the
payroll calculator together with the month's approved reimbursements.

The run is a pure pass over the given collections. One employee failing does
not stop the others: the failure is logged and reported on the batch.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from ..attendance.daybook import AttendanceSnapshot, month_days
from ..attendance.model import Punch
from ..common.datetime_utils import days_in_month, month_label, now_local, to_epoch_ms
from ..core.exceptions import DomainError
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..employees.salary import structure_for, validate_structure
from ..expenses.model import ExpenseClaim
from ..expenses.reimbursement import reimbursements_for
from ..leave.model import Holiday, LeaveRequest
from ..schedules.model import RosterAssignment
from ..shifts.model import Shift
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DayTally, PayrollBatch, PayrollFailure, PayrollRecord

logger = logging.getLogger(__name__)


def tally_month(snapshot: AttendanceSnapshot, employee_id: str, *, month: int, year: int) -> DayTally:
    tally = DayTally()
    for result in month_days(snapshot, employee_id, month=month, year=year):
        if result.is_free:
            tally.add_free_day()
        else:
            tally.add_outcome(result.outcome)
    return tally


def _build_record(
    employee: Employee,
    *,
    snapshot: AttendanceSnapshot,
    month: int,
    year: int,
    expenses: list[ExpenseClaim],
    calculator: PayrollCalculator,
    run_id: str,
    created_at: int,
    generated_by: str,
) -> PayrollRecord:
    structure = validate_structure(structure_for(employee, snapshot.policy))
    total_days = days_in_month(month, year)
    tally = tally_month(snapshot, employee.employee_id, month=month, year=year)
    reimbursements = reimbursements_for(employee.employee_id, month=month, year=year, claims=expenses)

    pay = calculator.compute(structure=structure, tally=tally, total_days=total_days, reimbursements=reimbursements)

    return PayrollRecord(
        record_id=f"pay_{employee.employee_id}_{run_id}",
        run_id=run_id,
        employee_id=employee.employee_id,
        month=month_label(month, year),
        month_number=month,
        year=year,
        total_days=total_days,
        payable_days=pay.payable_days,
        unpaid_days=pay.unpaid_days,
        penalty_days=pay.penalty_days,
        lop_deduction=pay.lop_deduction,
        penalty_deduction=pay.penalty_deduction,
        reimbursements=pay.reimbursements,
        gross_pay=pay.monthly_gross,
        statutory_deductions=pay.statutory_deductions,
        deductions=pay.total_deductions,
        net_pay=pay.net_pay,
        created_at=created_at,
        generated_by=generated_by,
    )


def run_payroll_batch(
    *,
    month: int,
    year: int,
    employees: Iterable[Employee],
    punches: Iterable[Punch],
    leaves: Iterable[LeaveRequest],
    holidays: Iterable[Holiday],
    expenses: Iterable[ExpenseClaim],
    shifts: Iterable[Shift],
    roster: Iterable[RosterAssignment],
    policy: PayrollPolicy = DEFAULT_POLICY,
    calculator: Optional[PayrollCalculator] = None,
    generated_by: Optional[str] = None,
    created_at: Optional[int] = None,
) -> PayrollBatch:
    """Run payroll for every employee given; the caller decides who is active."""
    employees = list(employees)
    expenses = list(expenses)
    calculator = calculator or StandardPayrollCalculator(infractions_per_penalty_day=policy.infractions_per_penalty_day)
    snapshot = AttendanceSnapshot.build(
        employees=employees,
        shifts=shifts,
        roster=roster,
        punches=punches,
        leaves=leaves,
        holidays=holidays,
        policy=policy,
    )

    run_id = uuid.uuid4().hex
    created_at = created_at if created_at is not None else to_epoch_ms(now_local())
    generated_by = generated_by or policy.generated_by
    label = month_label(month, year)

    records: list[PayrollRecord] = []
    failures: list[PayrollFailure] = []

    for employee in employees:
        try:
            records.append(
                _build_record(
                    employee,
                    snapshot=snapshot,
                    month=month,
                    year=year,
                    expenses=expenses,
                    calculator=calculator,
                    run_id=run_id,
                    created_at=created_at,
                    generated_by=generated_by,
                )
            )
        except (DomainError, ArithmeticError, AttributeError, KeyError, TypeError, ValueError) as e:
            employee_id = getattr(employee, "employee_id", repr(employee))
            logger.warning("Payroll %s: skipped employee %s: %s", label, employee_id, e, exc_info=True)
            failures.append(PayrollFailure(employee_id=str(employee_id), reason=str(e)))

    logger.info(
        "Payroll %s (run %s): %d records, %d failures", label, run_id, len(records), len(failures)
    )
    return PayrollBatch(run_id=run_id, month=label, records=records, failures=failures)


def run_payroll(**kwargs) -> list[PayrollRecord]:
    """Same as `run_payroll_batch`, returning only the generated records."""
    return run_payroll_batch(**kwargs).records
