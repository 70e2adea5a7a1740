from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PunchType
from ..shifts.model import Shift
from .classifier import is_half_day, is_late, punch_window, shift_window
from .model import Punch, ShiftWindow
from .strategies.base import PunchStrategy, StatusDecision
from .strategies.early_exit_strategy import EarlyExitStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.regular_strategy import RegularStrategy


@dataclass
class PunchStatusFactory:
    """Factory Pattern: choose the strategy that tags a live punch."""

    cutoff_hour: int

    def for_clock_in(self, *, punch: Punch, shift: Shift) -> tuple[PunchStrategy, ShiftWindow]:
        window = punch_window(shift, punch, cutoff_hour=self.cutoff_hour)
        if is_late(punch, shift, window):
            return LateStrategy(), window
        return RegularStrategy(), window

    def for_clock_out(
        self, *, punch: Punch, shift: Shift, last_in: Optional[Punch]
    ) -> tuple[PunchStrategy, ShiftWindow]:
        if last_in is None:
            window = punch_window(shift, punch, cutoff_hour=self.cutoff_hour)
            if punch.timestamp < window.end_ms:
                return EarlyExitStrategy(), window
            return RegularStrategy(), window

        # The session is anchored on the day the employee clocked in.
        window = shift_window(shift, last_in.work_date)
        if is_half_day(punch.timestamp - last_in.timestamp, window):
            return HalfDayStrategy(), window
        if punch.timestamp < window.end_ms:
            return EarlyExitStrategy(), window
        return RegularStrategy(), window

    def decide(self, *, punch: Punch, shift: Shift, last_in: Optional[Punch] = None) -> StatusDecision:
        if punch.punch_type == PunchType.IN:
            strategy, window = self.for_clock_in(punch=punch, shift=shift)
        else:
            strategy, window = self.for_clock_out(punch=punch, shift=shift, last_in=last_in)
        return strategy.decide(punch=punch, window=window)
