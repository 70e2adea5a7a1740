from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, SalaryStructure
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, name, manager_id, shift_id, status, salary,
           annual_ctc, basic, hra, allowances, pf_employee, pf_rate,
           esi_employee, esi_rate, professional_tax, tds
    FROM employees
"""


def _optional_float(value) -> Optional[float]:
    return float(value) if value is not None else None


def _to_employee(r: dict) -> Employee:
    structure = None
    if r.get("basic") is not None:
        structure = SalaryStructure(
            annual_ctc=float(r.get("annual_ctc") or 0),
            basic=float(r["basic"]),
            hra=float(r.get("hra") or 0),
            allowances=float(r.get("allowances") or 0),
            pf_employee=float(r.get("pf_employee") or 0),
            esi_employee=float(r.get("esi_employee") or 0),
            professional_tax=float(r.get("professional_tax") or 0),
            tds=float(r.get("tds") or 0),
            pf_rate=_optional_float(r.get("pf_rate")),
            esi_rate=_optional_float(r.get("esi_rate")),
        )

    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        manager_id=r.get("manager_id"),
        shift_id=r.get("shift_id"),
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
        salary=_optional_float(r.get("salary")),
        salary_structure=structure,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s", (str(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_team(self, manager_id: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE manager_id=%s AND status=%s ORDER BY name", (str(manager_id), EmployeeStatus.ACTIVE.value))
            return [_to_employee(r) for r in fetchall(cur)]
