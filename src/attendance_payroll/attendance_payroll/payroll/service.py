from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month, month_label, to_epoch_ms
from ..common.validators import require_month
from ..core.exceptions import PayrollAlreadyRunError, ValidationError
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.salary import structure_for, validate_structure
from ..expenses.repository import ExpenseRepository
from ..leave.repository import LeaveRepository
from ..schedules.repository import ScheduleRepository
from ..shifts.repository import ShiftRepository
from .calculator.base import PayrollCalculator
from .engine import run_payroll_batch
from .model import PayrollBatch, PayrollFailure, PayrollRecord
from .payslip import render_payslip
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def _month_bounds_ms(month: int, year: int) -> tuple[int, int]:
    start = datetime(year, month, 1)
    end = datetime(year + 1, 1, 1) if month == 12 else datetime(year, month + 1, 1)
    return to_epoch_ms(start), to_epoch_ms(end)


class PayrollService:
    """Caller side of the payroll engine.

    Loads a consistent snapshot, filters inactive employees, rejects malformed
    salary data, and decides whether a month may be run again.
    """

    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        schedules: ScheduleRepository,
        leave: LeaveRepository,
        expenses: ExpenseRepository,
        *,
        policy: PayrollPolicy = DEFAULT_POLICY,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._attendance = attendance
        self._shifts = shifts
        self._schedules = schedules
        self._leave = leave
        self._expenses = expenses
        self._policy = policy
        self._calculator = calculator

    def _screen(self, employees: Sequence[Employee]) -> tuple[list[Employee], list[PayrollFailure]]:
        eligible: list[Employee] = []
        rejected: list[PayrollFailure] = []
        for e in employees:
            if not e.is_active:
                continue
            try:
                validate_structure(structure_for(e, self._policy))
            except ValidationError as err:
                logger.warning("Payroll: rejected salary structure of %s: %s", e.employee_id, err)
                rejected.append(PayrollFailure(employee_id=e.employee_id, reason=str(err)))
                continue
            eligible.append(e)
        return eligible, rejected

    def run_month(
        self,
        *,
        month: int,
        year: int,
        force: bool = False,
        generated_by: Optional[str] = None,
    ) -> PayrollBatch:
        """Run and store payroll for (month, year).

        A month that already has records is refused unless `force` is set; a
        forced run appends a second, independent set of records.
        """
        month, year = require_month(month, year)
        label = month_label(month, year)

        if self._payroll.exists_for_month(label):
            if not force:
                raise PayrollAlreadyRunError(f"Payroll for {label} already exists; pass force to run it again")
            logger.warning("Payroll %s already exists; forced re-run appends new records", label)

        employees, rejected = self._screen(self._employees.list_all())

        start = date(year, month, 1)
        end = date(year, month, days_in_month(month, year))
        start_ms, end_ms = _month_bounds_ms(month, year)

        batch = run_payroll_batch(
            month=month,
            year=year,
            employees=employees,
            punches=self._attendance.list_range(start=start, end=end),
            leaves=self._leave.list_overlapping(start=start, end=end),
            holidays=self._leave.list_holidays(),
            expenses=self._expenses.list_approved_between(start_ms=start_ms, end_ms=end_ms),
            shifts=self._shifts.list_all(),
            roster=self._schedules.list_range(start=start, end=end),
            policy=self._policy,
            calculator=self._calculator,
            generated_by=generated_by,
        )

        self._payroll.save_many(batch.records)
        return replace(batch, failures=rejected + batch.failures)

    def history(self, employee_id: str) -> Sequence[PayrollRecord]:
        return self._payroll.list_for_employee(employee_id)

    def payslip(self, *, employee_id: str, record_id: str) -> str:
        employee = self._employees.get_by_id(employee_id)
        record = self._payroll.get(record_id)
        if not employee or not record or record.employee_id != employee.employee_id:
            raise ValidationError("Payroll record not found")
        return render_payslip(employee, record, policy=self._policy)
