from datetime import date, datetime, time

from src.attendance_payroll.attendance_payroll.common.datetime_utils import to_epoch_ms
from src.attendance_payroll.attendance_payroll.core.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.schedules.model import RosterAssignment, RosterIndex
from src.attendance_payroll.attendance_payroll.shifts.model import Shift
from src.attendance_payroll.attendance_payroll.shifts.resolver import find_shift, resolve_shift

GS = Shift(shift_id="GS", shift_name="General Shift", start_time=time(9, 0), end_time=time(18, 0), grace_minutes=15)
MS = Shift(shift_id="MS", shift_name="Morning Shift", start_time=time(6, 0), end_time=time(15, 0), grace_minutes=15)
NS = Shift(
    shift_id="NS",
    shift_name="Night Shift",
    start_time=time(22, 0),
    end_time=time(7, 0),
    grace_minutes=15,
    night_shift=True,
)
SHIFTS = {s.shift_id: s for s in (GS, MS, NS)}
DAY = date(2025, 10, 15)
DAY_MS = to_epoch_ms(datetime(2025, 10, 15, 10, 30))


def test_roster_assignment_wins_over_employee_default():
    roster = RosterIndex.build([RosterAssignment(employee_id="u1", work_date=DAY, shift_id="MS")])
    employees = {"u1": Employee(employee_id="u1", name="A", shift_id="NS")}

    shift = resolve_shift("u1", DAY_MS, roster=roster, employees=employees, shifts=SHIFTS)

    assert shift.shift_id == "MS"


def test_roster_only_applies_to_its_own_day():
    roster = RosterIndex.build([RosterAssignment(employee_id="u1", work_date=date(2025, 10, 14), shift_id="MS")])
    employees = {"u1": Employee(employee_id="u1", name="A", shift_id="NS")}

    assert resolve_shift("u1", DAY_MS, roster=roster, employees=employees, shifts=SHIFTS).shift_id == "NS"


def test_employee_default_then_general_shift():
    employees = {
        "u1": Employee(employee_id="u1", name="A", shift_id="NS"),
        "u2": Employee(employee_id="u2", name="B"),
    }

    assert resolve_shift("u1", DAY_MS, roster=RosterIndex(), employees=employees, shifts=SHIFTS).shift_id == "NS"
    assert resolve_shift("u2", DAY_MS, roster=RosterIndex(), employees=employees, shifts=SHIFTS).shift_id == "GS"


def test_unknown_shift_ids_fall_through():
    roster = RosterIndex.build([RosterAssignment(employee_id="u1", work_date=DAY, shift_id="GONE")])
    employees = {"u1": Employee(employee_id="u1", name="A", shift_id="ALSO_GONE")}

    assert resolve_shift("u1", DAY_MS, roster=roster, employees=employees, shifts=SHIFTS).shift_id == "GS"


def test_literal_fallback_when_shift_table_is_empty():
    shift = resolve_shift("nobody", DAY_MS, roster=RosterIndex(), employees={}, shifts={})

    assert shift.shift_id == "GS"
    assert shift.start_time == time(9, 0)
    assert shift.end_time == time(18, 0)
    assert shift.grace_minutes == 15
    assert shift.night_shift is False


def test_find_shift_reports_missing_general_shift():
    assert find_shift("nobody", DAY, roster=RosterIndex(), employees={}, shifts={}) is None


def test_general_shift_id_comes_from_policy():
    policy = PayrollPolicy(general_shift_id="MS")

    shift = resolve_shift("nobody", DAY_MS, roster=RosterIndex(), employees={}, shifts=SHIFTS, policy=policy)

    assert shift.shift_id == "MS"


def test_later_roster_entries_replace_earlier_ones():
    roster = RosterIndex.build(
        [
            RosterAssignment(employee_id="u1", work_date=DAY, shift_id="MS"),
            RosterAssignment(employee_id="u1", work_date=DAY, shift_id="NS"),
        ]
    )

    assert roster.shift_id_for("u1", DAY) == "NS"
