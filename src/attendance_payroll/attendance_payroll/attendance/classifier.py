"""Daily attendance classification.

This is the single implementation every consumer (payroll run, team view,
attendance calendar, punch tagging) goes through.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import from_epoch_ms
from ..core.enums import DayOutcome, PunchType
from ..shifts.model import Shift
from .model import DayClassification, Punch, ShiftWindow


def shift_window(shift: Shift, work_date: date) -> ShiftWindow:
    """Shift start/end on `work_date`; a night shift's end rolls to the next day."""
    start = datetime.combine(work_date, shift.start_time)
    end = datetime.combine(work_date, shift.end_time)
    if shift.night_shift and end < start:
        end += timedelta(days=1)
    return ShiftWindow(start=start, end=end)


def punch_window(shift: Shift, punch: Punch, *, cutoff_hour: int) -> ShiftWindow:
    """Shift window as seen by a single live punch.

    For a night shift, an OUT before `cutoff_hour` closes the shift that started
    the previous day, so the start moves back instead of the end moving forward.
    """
    at = from_epoch_ms(punch.timestamp)
    start = datetime.combine(at.date(), shift.start_time)
    end = datetime.combine(at.date(), shift.end_time)
    if shift.night_shift and end < start:
        if punch.punch_type == PunchType.OUT and at.hour < cutoff_hour:
            start -= timedelta(days=1)
        else:
            end += timedelta(days=1)
    return ShiftWindow(start=start, end=end)


def first_in(punches: Sequence[Punch]) -> Optional[Punch]:
    ins = [p for p in punches if p.punch_type == PunchType.IN]
    return min(ins, key=lambda p: p.timestamp) if ins else None


def last_out(punches: Sequence[Punch]) -> Optional[Punch]:
    outs = [p for p in punches if p.punch_type == PunchType.OUT]
    return max(outs, key=lambda p: p.timestamp) if outs else None


def is_late(punch_in: Punch, shift: Shift, window: ShiftWindow) -> bool:
    return punch_in.timestamp > window.grace_limit_ms(shift.grace_minutes)


def is_half_day(worked_ms: int, window: ShiftWindow) -> bool:
    # Strictly less than half: exactly 50% is not a half day.
    return worked_ms < window.duration_ms / 2


def classify_day(punches: Sequence[Punch], shift: Shift, work_date: date) -> DayClassification:
    """Classify one day's punches against the shift governing `work_date`.

    Only the earliest IN and the latest OUT matter. Half Day beats Late, and
    Late beats Early Exit.
    """
    if not punches:
        return DayClassification(outcome=DayOutcome.ABSENT)

    window = shift_window(shift, work_date)
    punch_in = first_in(punches)
    punch_out = last_out(punches)

    if punch_in is None or punch_out is None:
        return DayClassification(outcome=DayOutcome.HALF_DAY, punch_in=punch_in, punch_out=punch_out)

    if is_half_day(punch_out.timestamp - punch_in.timestamp, window):
        outcome = DayOutcome.HALF_DAY
    elif is_late(punch_in, shift, window):
        outcome = DayOutcome.LATE
    elif punch_out.timestamp < window.end_ms:
        outcome = DayOutcome.EARLY_EXIT
    else:
        outcome = DayOutcome.PRESENT

    return DayClassification(outcome=outcome, punch_in=punch_in, punch_out=punch_out)
