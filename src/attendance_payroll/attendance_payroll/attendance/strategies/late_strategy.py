from __future__ import annotations

from ...core.enums import PunchStatus
from ..model import Punch, ShiftWindow
from .base import PunchStrategy, StatusDecision, minutes_between


class LateStrategy(PunchStrategy):
    """Clock-in after the grace limit."""

    def decide(self, *, punch: Punch, window: ShiftWindow) -> StatusDecision:
        late = minutes_between(window.start_ms, punch.timestamp)
        return StatusDecision(status=PunchStatus.LATE, note=f"Late by {late} min")
