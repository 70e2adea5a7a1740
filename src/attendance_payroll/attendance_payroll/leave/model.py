from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    employee_id: str
    start_date: date
    end_date: date
    status: RequestStatus
    request_id: Optional[str] = None
    leave_type: Optional[str] = None
    reason: Optional[str] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class Holiday:
    """A holiday recurs every year on the same day and month."""

    holiday_date: date
    name: str = ""
    holiday_id: Optional[str] = None

    def falls_on(self, day: date) -> bool:
        return self.holiday_date.day == day.day and self.holiday_date.month == day.month
