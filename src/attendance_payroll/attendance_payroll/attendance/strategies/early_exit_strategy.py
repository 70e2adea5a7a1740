from __future__ import annotations

from ...core.enums import PunchStatus
from ..model import Punch, ShiftWindow
from .base import PunchStrategy, StatusDecision, minutes_between


class EarlyExitStrategy(PunchStrategy):
    """Clock-out before shift end, after at least half the shift."""

    def decide(self, *, punch: Punch, window: ShiftWindow) -> StatusDecision:
        early = minutes_between(punch.timestamp, window.end_ms)
        return StatusDecision(status=PunchStatus.EARLY_EXIT, note=f"Left {early} min early")
