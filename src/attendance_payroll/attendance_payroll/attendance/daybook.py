"""Per-day evaluation shared by the payroll run and the attendance calendar.

Everything here works on an in-memory snapshot; nothing touches storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import days_in_month
from ..core.enums import CalendarMark, DayOutcome
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..leave.gate import free_day_mark
from ..leave.model import Holiday, LeaveRequest
from ..schedules.model import RosterAssignment, RosterIndex
from ..shifts.model import Shift
from ..shifts.resolver import resolve_shift_for_date
from .classifier import classify_day
from .model import DayClassification, Punch, PunchIndex


@dataclass(frozen=True)
class AttendanceSnapshot:
    employees: Mapping[str, Employee]
    shifts: Mapping[str, Shift]
    roster: RosterIndex
    punches: PunchIndex
    leaves_by_employee: Mapping[str, Sequence[LeaveRequest]]
    holidays: Sequence[Holiday]
    policy: PayrollPolicy = field(default=DEFAULT_POLICY)

    @classmethod
    def build(
        cls,
        *,
        employees: Iterable[Employee],
        shifts: Iterable[Shift],
        roster: Iterable[RosterAssignment],
        punches: Iterable[Punch],
        leaves: Iterable[LeaveRequest],
        holidays: Iterable[Holiday],
        policy: PayrollPolicy = DEFAULT_POLICY,
    ) -> "AttendanceSnapshot":
        leaves_by_employee: dict[str, list[LeaveRequest]] = {}
        for lv in leaves:
            leaves_by_employee.setdefault(lv.employee_id, []).append(lv)

        return cls(
            employees={e.employee_id: e for e in employees},
            shifts={s.shift_id: s for s in shifts},
            roster=RosterIndex.build(roster),
            punches=PunchIndex.build(punches),
            leaves_by_employee=leaves_by_employee,
            holidays=tuple(holidays),
            policy=policy,
        )

    def leaves_for(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self.leaves_by_employee.get(employee_id, ())

    def shift_for(self, employee_id: str, day: date) -> Shift:
        return resolve_shift_for_date(
            employee_id,
            day,
            roster=self.roster,
            employees=self.employees,
            shifts=self.shifts,
            policy=self.policy,
        )


@dataclass(frozen=True)
class DayResult:
    work_date: date
    mark: CalendarMark
    classification: Optional[DayClassification] = None
    shift: Optional[Shift] = None

    @property
    def is_free(self) -> bool:
        """Paid without attendance: weekend, holiday or approved leave."""
        return self.mark != CalendarMark.WORKDAY

    @property
    def outcome(self) -> Optional[DayOutcome]:
        return self.classification.outcome if self.classification else None


def evaluate_day(
    snapshot: AttendanceSnapshot, employee_id: str, day: date, *, today: Optional[date] = None
) -> DayResult:
    """Evaluate one day.

    With `today` given, a workday on or after it without punches is left
    unclassified instead of Absent.
    """
    mark = free_day_mark(employee_id, day, leaves=snapshot.leaves_for(employee_id), holidays=snapshot.holidays)
    if mark is not None:
        return DayResult(work_date=day, mark=mark)

    shift = snapshot.shift_for(employee_id, day)
    punches = snapshot.punches.for_day(employee_id, day)
    if not punches and today is not None and day >= today:
        return DayResult(work_date=day, mark=CalendarMark.WORKDAY, shift=shift)

    classification = classify_day(punches, shift, day)
    return DayResult(work_date=day, mark=CalendarMark.WORKDAY, classification=classification, shift=shift)


def month_days(
    snapshot: AttendanceSnapshot, employee_id: str, *, month: int, year: int, today: Optional[date] = None
) -> list[DayResult]:
    return [
        evaluate_day(snapshot, employee_id, date(year, month, day), today=today)
        for day in range(1, days_in_month(month, year) + 1)
    ]
