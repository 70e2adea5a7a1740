from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta

from src.attendance_payroll.attendance_payroll.attendance.daybook import AttendanceSnapshot, month_days
from src.attendance_payroll.attendance_payroll.attendance.model import Punch
from src.attendance_payroll.attendance_payroll.common.datetime_utils import to_epoch_ms
from src.attendance_payroll.attendance_payroll.core.enums import DayOutcome, ExpenseStatus, PunchType, RequestStatus
from src.attendance_payroll.attendance_payroll.employees.model import Employee, SalaryStructure
from src.attendance_payroll.attendance_payroll.expenses.model import ExpenseClaim
from src.attendance_payroll.attendance_payroll.leave.model import Holiday, LeaveRequest
from src.attendance_payroll.attendance_payroll.payroll.engine import run_payroll, run_payroll_batch, tally_month
from src.attendance_payroll.attendance_payroll.shifts.model import Shift

GS = Shift(shift_id="GS", shift_name="General Shift", start_time=time(9, 0), end_time=time(18, 0), grace_minutes=15)
NS = Shift(
    shift_id="NS",
    shift_name="Night Shift",
    start_time=time(22, 0),
    end_time=time(7, 0),
    grace_minutes=15,
    night_shift=True,
)

HOLIDAYS = [Holiday(holiday_date=date(2024, 10, 20), name="Diwali")]
LEAVES = [LeaveRequest(employee_id="e1", start_date=date(2025, 10, 21), end_date=date(2025, 10, 21), status=RequestStatus.APPROVED)]


def ms(*args) -> int:
    return to_epoch_ms(datetime(*args))


def _day_punches(employee_id: str, day: date, in_at: time, out_at: time) -> list[Punch]:
    return [
        Punch(employee_id=employee_id, punch_type=PunchType.IN, timestamp=to_epoch_ms(datetime.combine(day, in_at))),
        Punch(employee_id=employee_id, punch_type=PunchType.OUT, timestamp=to_epoch_ms(datetime.combine(day, out_at))),
    ]


def _october_punches() -> list[Punch]:
    """e1: absent on the 7th, half day on the 8th, late on the 9th, 10th and 13th."""
    punches: list[Punch] = []
    day = date(2025, 10, 1)
    while day.month == 10:
        if day.weekday() < 5 and day.day not in (7, 20, 21):
            if day.day == 8:
                punches += _day_punches("e1", day, time(9, 0), time(12, 0))
            elif day.day in (9, 10, 13):
                punches += _day_punches("e1", day, time(9, 30), time(18, 0))
            else:
                punches += _day_punches("e1", day, time(9, 0), time(18, 0))
        day += timedelta(days=1)
    return punches


EXPENSES = [
    ExpenseClaim(employee_id="e1", amount=1250, status=ExpenseStatus.APPROVED, approved_at=ms(2025, 10, 10, 12, 0)),
    ExpenseClaim(employee_id="e1", amount=500, status=ExpenseStatus.APPROVED, approved_at=ms(2025, 11, 2, 12, 0)),
    ExpenseClaim(employee_id="e1", amount=999, status=ExpenseStatus.PENDING_HR),
]


def _run(employees, **overrides):
    kwargs = dict(
        month=10,
        year=2025,
        employees=employees,
        punches=_october_punches(),
        leaves=LEAVES,
        holidays=HOLIDAYS,
        expenses=EXPENSES,
        shifts=[GS, NS],
        roster=[],
        created_at=ms(2025, 11, 1, 10, 0),
    )
    kwargs.update(overrides)
    return run_payroll_batch(**kwargs)


def test_month_run_for_punctual_but_imperfect_employee():
    batch = _run([Employee(employee_id="e1", name="A", shift_id="GS", salary=720000)])
    record = batch.record_for("e1")

    assert batch.month == "October 2025"
    assert record.total_days == 31
    assert record.penalty_days == 1
    assert record.payable_days == 28.5
    assert record.unpaid_days == 2.5
    assert record.lop_deduction == 2903
    assert record.penalty_deduction == 1935
    assert record.reimbursements == 1250
    assert record.gross_pay == 60000
    assert record.deductions == 6080 + 2903 + 1935
    assert record.net_pay == 50332
    assert record.generated_by == "system"
    assert record.record_id == f"pay_e1_{batch.run_id}"


def test_employee_without_punches_or_salary():
    record = _run([Employee(employee_id="e2", name="B")]).record_for("e2")

    # 23 weekdays, one of them a holiday
    assert record.unpaid_days == 22
    assert record.payable_days == 9
    assert record.gross_pay == 50000


def test_payable_plus_unpaid_equals_days_in_month():
    batch = _run(
        [
            Employee(employee_id="e1", name="A", salary=720000),
            Employee(employee_id="e2", name="B"),
        ]
    )

    for record in batch.records:
        assert record.payable_days + record.unpaid_days == record.total_days


def test_one_bad_employee_does_not_stop_the_batch():
    broken = SalaryStructure(
        annual_ctc=0, basic=math.nan, hra=0, allowances=0, pf_employee=0, esi_employee=0, professional_tax=0, tds=0
    )
    batch = _run(
        [
            Employee(employee_id="e1", name="A", salary=720000),
            Employee(employee_id="e3", name="C", salary_structure=broken),
            Employee(employee_id="e2", name="B"),
        ]
    )

    assert [r.employee_id for r in batch.records] == ["e1", "e2"]
    assert [f.employee_id for f in batch.failures] == ["e3"]


def test_running_twice_produces_distinct_records():
    employees = [Employee(employee_id="e1", name="A", salary=720000)]

    first = _run(employees)
    second = _run(employees)

    assert first.run_id != second.run_id
    assert first.records[0].record_id != second.records[0].record_id
    assert first.records[0].net_pay == second.records[0].net_pay


def test_run_payroll_returns_records_only():
    records = run_payroll(
        month=10,
        year=2025,
        employees=[Employee(employee_id="e2", name="B")],
        punches=[],
        leaves=[],
        holidays=[],
        expenses=[],
        shifts=[],
        roster=[],
        generated_by="hr-admin",
    )

    assert len(records) == 1
    assert records[0].generated_by == "hr-admin"


def test_night_shift_punches_are_grouped_by_calendar_day():
    employees = [Employee(employee_id="n1", name="N", shift_id="NS")]
    punches = [
        Punch(employee_id="n1", punch_type=PunchType.IN, timestamp=ms(2025, 10, 1, 22, 0)),
        Punch(employee_id="n1", punch_type=PunchType.OUT, timestamp=ms(2025, 10, 2, 7, 0)),
    ]
    snapshot = AttendanceSnapshot.build(
        employees=employees, shifts=[GS, NS], roster=[], punches=punches, leaves=[], holidays=[]
    )

    days = month_days(snapshot, "n1", month=10, year=2025)

    assert days[0].outcome == DayOutcome.HALF_DAY
    assert days[1].outcome == DayOutcome.HALF_DAY
    assert days[0].shift.shift_id == "NS"
    assert tally_month(snapshot, "n1", month=10, year=2025).unpaid_days == 1 + 21
