"""Constants and defaults.

Note: Keep policy literals here so the engine never hard-codes them.
"""

from datetime import time

GENERAL_SHIFT_ID = "GS"
GENERAL_SHIFT_NAME = "General Shift"
GENERAL_SHIFT_START = time(9, 0)
GENERAL_SHIFT_END = time(18, 0)
DEFAULT_GRACE_MINUTES = 15

INFRACTIONS_PER_PENALTY_DAY = 3

# A night-shift OUT before this hour closes the shift that began the day before.
NIGHT_OUT_CUTOFF_HOUR = 12

DEFAULT_ANNUAL_CTC = 600000

# Salary structure synthesis from a flat annual CTC.
BASIC_RATE = 0.40
HRA_RATE = 0.20
ALLOWANCES_RATE = 0.40
PF_RATE = 0.12
ESI_RATE = 0.0075
ESI_GROSS_CEILING = 21000
PROFESSIONAL_TAX = 200
TDS_RATE = 0.05

DEFAULT_GENERATED_BY = "system"
