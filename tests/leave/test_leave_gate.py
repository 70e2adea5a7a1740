from datetime import date

from src.attendance_payroll.attendance_payroll.core.enums import CalendarMark, RequestStatus
from src.attendance_payroll.attendance_payroll.leave.gate import free_day_mark, is_fully_paid_day
from src.attendance_payroll.attendance_payroll.leave.model import Holiday, LeaveRequest

DIWALI = Holiday(holiday_date=date(2024, 10, 20), name="Diwali")


def _leave(status=RequestStatus.APPROVED, employee_id="u1"):
    return LeaveRequest(employee_id=employee_id, start_date=date(2025, 10, 13), end_date=date(2025, 10, 15), status=status)


def test_holiday_matches_on_day_and_month_in_any_year():
    assert is_fully_paid_day("u1", date(2025, 10, 20), leaves=[], holidays=[DIWALI])
    assert is_fully_paid_day("u1", date(2031, 10, 20), leaves=[], holidays=[DIWALI])
    assert not is_fully_paid_day("u1", date(2025, 10, 21), leaves=[], holidays=[DIWALI])


def test_approved_leave_covers_both_endpoints():
    leaves = [_leave()]

    assert is_fully_paid_day("u1", date(2025, 10, 13), leaves=leaves, holidays=[])
    assert is_fully_paid_day("u1", date(2025, 10, 15), leaves=leaves, holidays=[])
    assert not is_fully_paid_day("u1", date(2025, 10, 16), leaves=leaves, holidays=[])


def test_only_approved_leave_of_the_same_employee_counts():
    day = date(2025, 10, 14)

    assert not is_fully_paid_day("u1", day, leaves=[_leave(RequestStatus.PENDING)], holidays=[])
    assert not is_fully_paid_day("u1", day, leaves=[_leave(RequestStatus.REJECTED)], holidays=[])
    assert not is_fully_paid_day("u1", day, leaves=[_leave(employee_id="u2")], holidays=[])


def test_weekend_is_not_part_of_the_gate():
    saturday = date(2025, 10, 18)

    assert not is_fully_paid_day("u1", saturday, leaves=[], holidays=[])
    assert free_day_mark("u1", saturday, leaves=[], holidays=[]) == CalendarMark.WEEKEND


def test_free_day_mark_prefers_holiday_then_leave():
    sunday_holiday = Holiday(holiday_date=date(2025, 10, 19), name="Sunday holiday")
    leaves = [LeaveRequest(employee_id="u1", start_date=date(2025, 10, 19), end_date=date(2025, 10, 19), status=RequestStatus.APPROVED)]

    assert free_day_mark("u1", date(2025, 10, 19), leaves=leaves, holidays=[sunday_holiday]) == CalendarMark.HOLIDAY
    assert free_day_mark("u1", date(2025, 10, 19), leaves=leaves, holidays=[]) == CalendarMark.LEAVE
    assert free_day_mark("u1", date(2025, 10, 15), leaves=[], holidays=[]) is None
