from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Direction of a single punch event."""

    IN = "CLOCK_IN"
    OUT = "CLOCK_OUT"


class DayOutcome(str, Enum):
    """Attendance outcome of one calendar day."""

    PRESENT = "Present"
    LATE = "Late"
    EARLY_EXIT = "Early Exit"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class PunchStatus(str, Enum):
    """Status tag stored on a punch when it is recorded."""

    REGULAR = "Regular"
    LATE = "Late"
    EARLY_EXIT = "Early Exit"
    OVERTIME = "Overtime"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"
    REGULARIZED = "Regularized"


class LiveStatus(str, Enum):
    """What a manager sees for a team member on the current day."""

    ON_LEAVE = "On Leave"
    WORKING = "Working"
    LATE_IN = "Late In"
    PRESENT = "Present"
    LATE = "Late"
    EARLY_EXIT = "Early Exit"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"


class CalendarMark(str, Enum):
    """Why a calendar day is paid, or how it was classified."""

    HOLIDAY = "Holiday"
    LEAVE = "Leave"
    WEEKEND = "Weekend"
    WORKDAY = "Workday"


class RequestStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ExpenseStatus(str, Enum):
    PENDING_MANAGER = "Pending_Manager"
    PENDING_HR = "Pending_HR"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DELETED = "Deleted"


class PayrollStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
