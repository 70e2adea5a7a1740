"""Shift resolution: which shift governs an employee on a calendar day.

Resolution order, first match wins:

1. roster assignment for (employee, day);
2. the employee's default shift;
3. the general shift from the shift table;
4. the literal fallback shift from the policy.

Unknown shift ids degrade to the next step, so resolution never fails.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import calendar_date_of
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..schedules.model import RosterIndex
from .model import Shift, fallback_shift


def find_shift(
    employee_id: str,
    day: date,
    *,
    roster: RosterIndex,
    employees: Mapping[str, Employee],
    shifts: Mapping[str, Shift],
    policy: PayrollPolicy = DEFAULT_POLICY,
) -> Optional[Shift]:
    """Shift from stored data only; None when even the general shift is missing."""
    assigned = roster.shift_id_for(employee_id, day)
    if assigned and assigned in shifts:
        return shifts[assigned]

    employee = employees.get(employee_id)
    if employee and employee.shift_id and employee.shift_id in shifts:
        return shifts[employee.shift_id]

    return shifts.get(policy.general_shift_id)


def resolve_shift_for_date(
    employee_id: str,
    day: date,
    *,
    roster: RosterIndex,
    employees: Mapping[str, Employee],
    shifts: Mapping[str, Shift],
    policy: PayrollPolicy = DEFAULT_POLICY,
) -> Shift:
    found = find_shift(employee_id, day, roster=roster, employees=employees, shifts=shifts, policy=policy)
    return found or fallback_shift(policy)


def resolve_shift(
    employee_id: str,
    date_epoch_ms: int,
    *,
    roster: RosterIndex,
    employees: Mapping[str, Employee],
    shifts: Mapping[str, Shift],
    policy: PayrollPolicy = DEFAULT_POLICY,
) -> Shift:
    """Effective shift for the calendar day containing `date_epoch_ms`."""
    return resolve_shift_for_date(
        employee_id,
        calendar_date_of(date_epoch_ms),
        roster=roster,
        employees=employees,
        shifts=shifts,
        policy=policy,
    )
