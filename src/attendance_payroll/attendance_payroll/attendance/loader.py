from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..leave.repository import LeaveRepository
from ..schedules.repository import ScheduleRepository
from ..shifts.repository import ShiftRepository
from .daybook import AttendanceSnapshot
from .repository import AttendanceRepository


class SnapshotLoader:
    """Reads everything day evaluation needs for a date range, once."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        schedules: ScheduleRepository,
        leave: LeaveRepository,
        *,
        policy: PayrollPolicy = DEFAULT_POLICY,
    ):
        self._attendance = attendance
        self._shifts = shifts
        self._schedules = schedules
        self._leave = leave
        self._policy = policy

    def load(
        self,
        *,
        start: date,
        end: date,
        employees: Sequence[Employee],
        employee_id: Optional[str] = None,
    ) -> AttendanceSnapshot:
        return AttendanceSnapshot.build(
            employees=employees,
            shifts=self._shifts.list_all(),
            roster=self._schedules.list_range(start=start, end=end, employee_id=employee_id),
            punches=self._attendance.list_range(start=start, end=end, employee_id=employee_id),
            leaves=self._leave.list_overlapping(start=start, end=end, employee_id=employee_id),
            holidays=self._leave.list_holidays(),
            policy=self._policy,
        )
