from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import PunchStatus
from ..model import Punch, ShiftWindow


@dataclass(frozen=True)
class StatusDecision:
    status: PunchStatus
    note: Optional[str] = None


class PunchStrategy(ABC):
    """Strategy Pattern: encapsulate how a live punch gets its status tag."""

    @abstractmethod
    def decide(self, *, punch: Punch, window: ShiftWindow) -> StatusDecision:
        raise NotImplementedError


def minutes_between(earlier_ms: int, later_ms: int) -> int:
    return int((later_ms - earlier_ms) / 60000)
