from __future__ import annotations

from ...core.enums import PunchStatus
from ..model import Punch, ShiftWindow
from .base import PunchStrategy, StatusDecision


class HalfDayStrategy(PunchStrategy):
    """Clock-out with less than half the shift worked."""

    def decide(self, *, punch: Punch, window: ShiftWindow) -> StatusDecision:
        return StatusDecision(status=PunchStatus.HALF_DAY, note="Worked under half the shift")
