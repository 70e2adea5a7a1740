from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import RosterAssignment


class ScheduleRepository(Protocol):
    def upsert(self, *, employee_id: str, work_date: date, shift_id: str) -> int:
        """Create or overwrite the assignment for (employee, date).

        Returns assignment_id.
        """

        raise NotImplementedError

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[RosterAssignment]:
        raise NotImplementedError
