from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.attendance_payroll.attendance_payroll.attendance.controller import register as register_attendance
from src.attendance_payroll.attendance_payroll.attendance.daybook import DayResult
from src.attendance_payroll.attendance_payroll.attendance.model import DayClassification, Punch
from src.attendance_payroll.attendance_payroll.core.enums import CalendarMark, DayOutcome, PunchStatus, PunchType
from src.attendance_payroll.attendance_payroll.core.exceptions import PayrollAlreadyRunError, ValidationError
from src.attendance_payroll.attendance_payroll.main import _register_error_handlers
from src.attendance_payroll.attendance_payroll.payroll.controller import register as register_payroll
from src.attendance_payroll.attendance_payroll.payroll.model import PayrollBatch, PayrollFailure
from src.attendance_payroll.attendance_payroll.schedules.controller import register as register_schedules


class StubPayrollService:
    def __init__(self):
        self.ran: list[tuple[int, int, bool]] = []

    def run_month(self, *, month, year, force=False, generated_by=None):
        if self.ran and not force:
            raise PayrollAlreadyRunError("Payroll for October 2025 already exists; pass force to run it again")
        self.ran.append((month, year, force))
        return PayrollBatch(run_id="r1", month="October 2025", failures=[PayrollFailure(employee_id="x", reason="bad")])

    def history(self, employee_id):
        return []

    def payslip(self, *, employee_id, record_id):
        if record_id != "pay_e1_r1":
            raise ValidationError("Payroll record not found")
        return "PAYSLIP - October 2025\n"


class StubAttendanceService:
    def record_punch(self, employee_id, punch_type, *, now_ms=None, remarks=None):
        return Punch(
            employee_id=employee_id,
            punch_type=punch_type,
            timestamp=now_ms or 0,
            punch_id="p1",
            status=PunchStatus.REGULAR,
            shift_id="GS",
        )

    def month_calendar(self, employee_id, *, month, year):
        if month > 12:
            raise ValidationError(f"month out of range: {month}")
        return [
            DayResult(work_date=date(year, month, 1), mark=CalendarMark.HOLIDAY),
            DayResult(
                work_date=date(year, month, 2),
                mark=CalendarMark.WORKDAY,
                classification=DayClassification(outcome=DayOutcome.LATE),
            ),
        ]


class StubScheduleService:
    def assign(self, *, employee_id, work_date, shift_id):
        if shift_id != "GS":
            raise ValidationError(f"Unknown shift: {shift_id}")
        return 7


@pytest.fixture
def client():
    app = Flask(__name__)
    container = SimpleNamespace(
        payroll_service=StubPayrollService(),
        attendance_service=StubAttendanceService(),
        schedule_service=StubScheduleService(),
    )
    _register_error_handlers(app)
    register_attendance(app, container)
    register_schedules(app, container)
    register_payroll(app, container)
    return app.test_client()


def test_payroll_run_then_conflict_then_forced(client):
    first = client.post("/api/payroll/run", json={"month": 10, "year": 2025})
    second = client.post("/api/payroll/run", json={"month": 10, "year": 2025})
    forced = client.post("/api/payroll/run", json={"month": 10, "year": 2025, "force": True})

    assert first.status_code == 201
    assert first.get_json()["failures"] == [{"employee_id": "x", "reason": "bad"}]
    assert second.status_code == 409
    assert forced.status_code == 201


def test_payroll_run_requires_month_and_year(client):
    resp = client.post("/api/payroll/run", json={"month": "oct"})

    assert resp.status_code == 400
    assert "month and year" in resp.get_json()["error"]


def test_payslip_is_plain_text(client):
    ok = client.get("/api/payroll/e1/pay_e1_r1/payslip")
    missing = client.get("/api/payroll/e1/nope/payslip")

    assert ok.status_code == 200
    assert ok.mimetype == "text/plain"
    assert ok.get_data(as_text=True).startswith("PAYSLIP")
    assert missing.status_code == 400


def test_record_punch_route(client):
    resp = client.post("/api/punches", json={"employee_id": "e1", "type": "CLOCK_IN", "timestamp": 1760500800000})
    bad = client.post("/api/punches", json={"employee_id": "e1", "type": "LUNCH"})
    bad_ts = client.post("/api/punches", json={"employee_id": "e1", "type": "CLOCK_IN", "timestamp": "noon"})

    assert resp.status_code == 201
    assert resp.get_json()["status"] == "Regular"
    assert resp.get_json()["type"] == PunchType.IN.value
    assert bad.status_code == 400
    assert bad_ts.status_code == 400
    assert "timestamp" in bad_ts.get_json()["error"]


def test_assign_shift_route(client):
    ok = client.post("/api/schedules", json={"employee_id": "e1", "work_date": "2025-10-15", "shift_id": "GS"})
    bad_date = client.post("/api/schedules", json={"employee_id": "e1", "work_date": "15/10/2025", "shift_id": "GS"})
    bad_shift = client.post("/api/schedules", json={"employee_id": "e1", "work_date": "2025-10-15", "shift_id": "ZZ"})

    assert ok.status_code == 201
    assert ok.get_json() == {"assignment_id": 7}
    assert bad_date.status_code == 400
    assert bad_shift.status_code == 400


def test_calendar_and_history_routes(client):
    cal = client.get("/api/attendance/e1/calendar?month=10&year=2025")
    bad = client.get("/api/attendance/e1/calendar?month=13&year=2025")
    history = client.get("/api/payroll/e1")

    assert cal.status_code == 200
    assert cal.get_json()["days"] == [
        {"date": "2025-10-01", "mark": "Holiday", "outcome": None, "shift": None},
        {"date": "2025-10-02", "mark": "Workday", "outcome": "Late", "shift": None},
    ]
    assert bad.status_code == 400
    assert history.get_json() == []
