from __future__ import annotations

from datetime import date

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftRepository
from .repository import ScheduleRepository


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository, shifts: ShiftRepository):
        self._schedules = schedules
        self._shifts = shifts

    def assign(self, *, employee_id: str, work_date: date, shift_id: str) -> int:
        """Roster a shift for one day; a second assignment for the same day replaces the first."""
        employee_id = require_non_empty(employee_id, "employee_id")
        shift_id = require_non_empty(shift_id, "shift_id")

        if self._shifts.get_by_id(shift_id) is None:
            raise ValidationError(f"Unknown shift: {shift_id}")

        return self._schedules.upsert(employee_id=employee_id, work_date=work_date, shift_id=shift_id)
