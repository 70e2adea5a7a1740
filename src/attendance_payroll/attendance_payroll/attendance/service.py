from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import calendar_date_of, days_in_month, now_local, to_epoch_ms
from ..common.validators import require_month
from ..core.enums import DayOutcome, LiveStatus, PunchType
from ..core.exceptions import ValidationError
from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.repository import EmployeeRepository
from ..leave.gate import approved_leave_on
from .classifier import classify_day, first_in, is_late, last_out, shift_window
from .daybook import DayResult, month_days
from .factory import PunchStatusFactory
from .loader import SnapshotLoader
from .model import Punch
from .repository import AttendanceRepository


@dataclass(frozen=True)
class TeamMemberStatus:
    employee_id: str
    name: str
    status: LiveStatus
    shift: str
    punch_in: Optional[int] = None
    punch_out: Optional[int] = None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        loader: SnapshotLoader,
        *,
        policy: PayrollPolicy = DEFAULT_POLICY,
        status_factory: PunchStatusFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._loader = loader
        self._policy = policy
        self._factory = status_factory or PunchStatusFactory(cutoff_hour=policy.night_out_cutoff_hour)

    def record_punch(
        self,
        employee_id: str,
        punch_type: PunchType,
        *,
        now_ms: int | None = None,
        remarks: str | None = None,
    ) -> Punch:
        """Store a punch tagged with its live status and the shift it was judged against."""
        now_ms = now_ms if now_ms is not None else to_epoch_ms(now_local())

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError(f"Unknown employee: {employee_id}")

        today = calendar_date_of(now_ms)
        snapshot = self._loader.load(start=today, end=today, employees=[employee], employee_id=employee_id)
        shift = snapshot.shift_for(employee_id, today)

        punch = Punch(employee_id=employee_id, punch_type=punch_type, timestamp=now_ms, remarks=remarks)
        last_in = None
        if punch_type == PunchType.OUT:
            last_in = self._attendance.last_clock_in(employee_id=employee_id, before_ms=now_ms)

        decision = self._factory.decide(punch=punch, shift=shift, last_in=last_in)
        punch = replace(punch, status=decision.status, shift_id=shift.shift_id, remarks=remarks or decision.note)
        return replace(punch, punch_id=self._attendance.create(punch))

    def team_status(self, manager_id: str, *, now_ms: int | None = None) -> list[TeamMemberStatus]:
        """Live status of a manager's reports on the current day."""
        now_ms = now_ms if now_ms is not None else to_epoch_ms(now_local())
        today = calendar_date_of(now_ms)

        team = list(self._employees.list_team(manager_id))
        snapshot = self._loader.load(start=today, end=today, employees=team)

        out: list[TeamMemberStatus] = []
        for member in team:
            shift = snapshot.shift_for(member.employee_id, today)
            punches = snapshot.punches.for_day(member.employee_id, today)
            punch_in, punch_out = first_in(punches), last_out(punches)

            if approved_leave_on(member.employee_id, today, snapshot.leaves_for(member.employee_id)):
                status = LiveStatus.ON_LEAVE
            elif punch_in is None:
                status = LiveStatus.ABSENT
            elif punch_out is None:
                late = is_late(punch_in, shift, shift_window(shift, today))
                status = LiveStatus.LATE_IN if late else LiveStatus.WORKING
            else:
                status = _LIVE_BY_OUTCOME[classify_day(punches, shift, today).outcome]

            out.append(
                TeamMemberStatus(
                    employee_id=member.employee_id,
                    name=member.name,
                    status=status,
                    shift=shift.label,
                    punch_in=punch_in.timestamp if punch_in else None,
                    punch_out=punch_out.timestamp if punch_out else None,
                )
            )
        return out

    def month_calendar(
        self, employee_id: str, *, month: int, year: int, today: date | None = None
    ) -> list[DayResult]:
        """Per-day marks for one month; days from `today` on without punches carry no outcome."""
        month, year = require_month(month, year)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError(f"Unknown employee: {employee_id}")

        start = date(year, month, 1)
        end = date(year, month, days_in_month(month, year))
        snapshot = self._loader.load(start=start, end=end, employees=[employee], employee_id=employee_id)
        today = today if today is not None else now_local().date()
        return month_days(snapshot, employee_id, month=month, year=year, today=today)


_LIVE_BY_OUTCOME = {
    DayOutcome.PRESENT: LiveStatus.PRESENT,
    DayOutcome.LATE: LiveStatus.LATE,
    DayOutcome.EARLY_EXIT: LiveStatus.EARLY_EXIT,
    DayOutcome.HALF_DAY: LiveStatus.HALF_DAY,
    DayOutcome.ABSENT: LiveStatus.ABSENT,
}
