from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time

from . import constants


@dataclass(frozen=True)
class FallbackShiftSpec:
    """Literal shift used when no shift table defines the general shift."""

    shift_id: str = constants.GENERAL_SHIFT_ID
    shift_name: str = constants.GENERAL_SHIFT_NAME
    start_time: time = constants.GENERAL_SHIFT_START
    end_time: time = constants.GENERAL_SHIFT_END
    grace_minutes: int = constants.DEFAULT_GRACE_MINUTES


@dataclass(frozen=True)
class PayrollPolicy:
    """Overridable knobs of the attendance/payroll engine."""

    general_shift_id: str = constants.GENERAL_SHIFT_ID
    fallback_shift: FallbackShiftSpec = field(default_factory=FallbackShiftSpec)
    infractions_per_penalty_day: int = constants.INFRACTIONS_PER_PENALTY_DAY
    night_out_cutoff_hour: int = constants.NIGHT_OUT_CUTOFF_HOUR
    default_annual_ctc: float = constants.DEFAULT_ANNUAL_CTC
    generated_by: str = constants.DEFAULT_GENERATED_BY

    @classmethod
    def from_settings(cls, settings) -> "PayrollPolicy":
        """Build a policy from a settings module, keeping defaults for missing names."""
        general_shift_id = str(getattr(settings, "GENERAL_SHIFT_ID", constants.GENERAL_SHIFT_ID))
        return cls(
            general_shift_id=general_shift_id,
            fallback_shift=FallbackShiftSpec(shift_id=general_shift_id),
            infractions_per_penalty_day=int(
                getattr(settings, "INFRACTIONS_PER_PENALTY_DAY", constants.INFRACTIONS_PER_PENALTY_DAY)
            ),
            night_out_cutoff_hour=int(getattr(settings, "NIGHT_OUT_CUTOFF_HOUR", constants.NIGHT_OUT_CUTOFF_HOUR)),
            default_annual_ctc=float(getattr(settings, "DEFAULT_ANNUAL_CTC", constants.DEFAULT_ANNUAL_CTC)),
            generated_by=str(getattr(settings, "PAYROLL_GENERATED_BY", constants.DEFAULT_GENERATED_BY)),
        )


DEFAULT_POLICY = PayrollPolicy()
