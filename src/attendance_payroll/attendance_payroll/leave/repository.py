from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday, LeaveRequest


class LeaveRepository(Protocol):
    def list_overlapping(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[LeaveRequest]:
        """Leave requests of any status whose range touches [start, end]."""

        raise NotImplementedError

    def list_holidays(self) -> Sequence[Holiday]:
        raise NotImplementedError
