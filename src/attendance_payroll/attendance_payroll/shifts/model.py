from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.policy import PayrollPolicy


@dataclass(frozen=True)
class Shift:
    """Domain entity: a named work-time window.

    `night_shift` marks a window whose end falls on the next calendar day.
    """

    shift_id: str
    shift_name: str
    start_time: time
    end_time: time
    grace_minutes: int = 0
    night_shift: bool = False

    @property
    def label(self) -> str:
        return f"{self.shift_name} ({self.start_time:%H:%M}-{self.end_time:%H:%M})"


def fallback_shift(policy: PayrollPolicy) -> Shift:
    spec = policy.fallback_shift
    return Shift(
        shift_id=spec.shift_id,
        shift_name=spec.shift_name,
        start_time=spec.start_time,
        end_time=spec.end_time,
        grace_minutes=spec.grace_minutes,
        night_shift=False,
    )
