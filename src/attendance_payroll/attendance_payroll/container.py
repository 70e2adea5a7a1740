from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import PunchStatusFactory
from .attendance.loader import SnapshotLoader
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.policy import DEFAULT_POLICY, PayrollPolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .expenses.mysql_expense_repository import MySQLExpenseRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .shifts.mysql_shift_repository import MySQLShiftRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    policy: PayrollPolicy

    employees_repo: MySQLEmployeeRepository
    shifts_repo: MySQLShiftRepository
    schedules_repo: MySQLScheduleRepository
    attendance_repo: MySQLAttendanceRepository
    leave_repo: MySQLLeaveRepository
    expenses_repo: MySQLExpenseRepository
    payroll_repo: MySQLPayrollRepository

    attendance_service: AttendanceService
    schedule_service: ScheduleService
    payroll_service: PayrollService


def build_container(*, db_config: dict, policy: PayrollPolicy = DEFAULT_POLICY) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leave_repo = MySQLLeaveRepository(conn)
    expenses_repo = MySQLExpenseRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    loader = SnapshotLoader(attendance_repo, shifts_repo, schedules_repo, leave_repo, policy=policy)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        loader,
        policy=policy,
        status_factory=PunchStatusFactory(cutoff_hour=policy.night_out_cutoff_hour),
    )
    schedule_service = ScheduleService(schedules_repo, shifts_repo)
    payroll_service = PayrollService(
        payroll_repo,
        employees_repo,
        attendance_repo,
        shifts_repo,
        schedules_repo,
        leave_repo,
        expenses_repo,
        policy=policy,
        calculator=StandardPayrollCalculator(infractions_per_penalty_day=policy.infractions_per_penalty_day),
    )

    return Container(
        conn=conn,
        policy=policy,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        expenses_repo=expenses_repo,
        payroll_repo=payroll_repo,
        attendance_service=attendance_service,
        schedule_service=schedule_service,
        payroll_service=payroll_service,
    )
