from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Punch


class AttendanceRepository(Protocol):
    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Punch]:
        """Punches whose local calendar day lies in [start, end]."""

        raise NotImplementedError

    def last_clock_in(self, *, employee_id: str, before_ms: int) -> Optional[Punch]:
        raise NotImplementedError

    def create(self, punch: Punch) -> str:
        raise NotImplementedError
