from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import calendar_date_of, to_epoch_ms
from ..core.enums import DayOutcome, PunchStatus, PunchType


@dataclass(frozen=True)
class Punch:
    """Domain entity: one clock-in or clock-out event."""

    employee_id: str
    punch_type: PunchType
    timestamp: int  # epoch milliseconds
    punch_id: Optional[str] = None
    status: Optional[PunchStatus] = None
    shift_id: Optional[str] = None
    remarks: Optional[str] = None

    @property
    def work_date(self) -> date:
        return calendar_date_of(self.timestamp)


@dataclass(frozen=True)
class ShiftWindow:
    """A shift's start/end anchored on concrete instants."""

    start: datetime
    end: datetime

    @property
    def start_ms(self) -> int:
        return to_epoch_ms(self.start)

    @property
    def end_ms(self) -> int:
        return to_epoch_ms(self.end)

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    def grace_limit_ms(self, grace_minutes: int) -> int:
        return to_epoch_ms(self.start + timedelta(minutes=grace_minutes))


@dataclass(frozen=True)
class DayClassification:
    outcome: DayOutcome
    punch_in: Optional[Punch] = None
    punch_out: Optional[Punch] = None

    @property
    def is_infraction(self) -> bool:
        return self.outcome in (DayOutcome.LATE, DayOutcome.EARLY_EXIT)


@dataclass(frozen=True)
class PunchIndex:
    """Punches grouped by (employee, local calendar day), oldest first."""

    by_day: Mapping[tuple[str, date], Sequence[Punch]] = field(default_factory=dict)

    @classmethod
    def build(cls, punches: Iterable[Punch]) -> "PunchIndex":
        by_day: dict[tuple[str, date], list[Punch]] = {}
        for p in punches:
            by_day.setdefault((p.employee_id, p.work_date), []).append(p)
        for items in by_day.values():
            items.sort(key=lambda p: p.timestamp)
        return cls(by_day=by_day)

    def for_day(self, employee_id: str, day: date) -> Sequence[Punch]:
        return self.by_day.get((employee_id, day), ())
