"""Leave/holiday day gate.

A gated day is paid in full without looking at punches.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import is_weekend
from ..core.enums import CalendarMark, RequestStatus
from .model import Holiday, LeaveRequest


def holiday_on(day: date, holidays: Iterable[Holiday]) -> Optional[Holiday]:
    return next((h for h in holidays if h.falls_on(day)), None)


def approved_leave_on(employee_id: str, day: date, leaves: Iterable[LeaveRequest]) -> Optional[LeaveRequest]:
    return next(
        (
            lv
            for lv in leaves
            if lv.employee_id == employee_id and lv.status == RequestStatus.APPROVED and lv.covers(day)
        ),
        None,
    )


def is_fully_paid_day(
    employee_id: str,
    day: date,
    *,
    leaves: Iterable[LeaveRequest],
    holidays: Iterable[Holiday],
) -> bool:
    return holiday_on(day, holidays) is not None or approved_leave_on(employee_id, day, leaves) is not None


def free_day_mark(
    employee_id: str,
    day: date,
    *,
    leaves: Iterable[LeaveRequest],
    holidays: Iterable[Holiday],
) -> Optional[CalendarMark]:
    """Why `day` needs no attendance: holiday, leave, weekend, or None for a workday."""
    if holiday_on(day, holidays) is not None:
        return CalendarMark.HOLIDAY
    if approved_leave_on(employee_id, day, leaves) is not None:
        return CalendarMark.LEAVE
    if is_weekend(day):
        return CalendarMark.WEEKEND
    return None
