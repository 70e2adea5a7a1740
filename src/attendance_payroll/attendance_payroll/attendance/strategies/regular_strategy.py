from __future__ import annotations

from ...core.enums import PunchStatus
from ..model import Punch, ShiftWindow
from .base import PunchStrategy, StatusDecision


class RegularStrategy(PunchStrategy):
    """On-time clock-in, or a clock-out at/after shift end."""

    def decide(self, *, punch: Punch, window: ShiftWindow) -> StatusDecision:
        return StatusDecision(status=PunchStatus.REGULAR)
