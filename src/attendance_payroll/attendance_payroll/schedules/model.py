from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional


@dataclass(frozen=True)
class RosterAssignment:
    employee_id: str
    work_date: date
    shift_id: str
    assignment_id: Optional[int] = None


@dataclass(frozen=True)
class RosterIndex:
    """Read-only (employee, date) -> shift id lookup.

    At most one shift per key; when built from a sequence, later entries replace
    earlier ones for the same key.
    """

    by_key: Mapping[tuple[str, date], str] = field(default_factory=dict)

    @classmethod
    def build(cls, assignments: Iterable[RosterAssignment]) -> "RosterIndex":
        by_key: dict[tuple[str, date], str] = {}
        for a in assignments:
            by_key[(a.employee_id, a.work_date)] = a.shift_id
        return cls(by_key=by_key)

    def shift_id_for(self, employee_id: str, work_date: date) -> Optional[str]:
        return self.by_key.get((employee_id, work_date))
