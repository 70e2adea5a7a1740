import math

import pytest

from src.attendance_payroll.attendance_payroll.common.money import round_half_up
from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError
from src.attendance_payroll.attendance_payroll.core.policy import PayrollPolicy
from src.attendance_payroll.attendance_payroll.employees.model import Employee, SalaryStructure
from src.attendance_payroll.attendance_payroll.employees.salary import (
    generate_structure,
    structure_for,
    validate_structure,
)


def test_generate_structure_above_esi_ceiling():
    s = generate_structure(600000)

    assert s.monthly_gross == 50000
    assert (s.basic, s.hra, s.allowances) == (20000, 10000, 20000)
    assert s.pf_employee == 2400
    assert s.esi_employee == 0
    assert s.professional_tax == 200
    assert s.tds == 2500
    assert s.statutory_deductions == 5100


def test_generate_structure_below_esi_ceiling_charges_esi():
    s = generate_structure(240000)

    assert s.monthly_gross == 20000
    assert s.pf_employee == 960
    assert s.esi_employee == 150
    assert s.tds == 1000
    assert s.statutory_deductions == 2310


def test_structure_for_prefers_stored_then_flat_salary_then_default():
    stored = SalaryStructure(
        annual_ctc=0, basic=1, hra=2, allowances=3, pf_employee=0, esi_employee=0, professional_tax=0, tds=0
    )

    assert structure_for(Employee(employee_id="a", name="A", salary=900000, salary_structure=stored)) is stored
    assert structure_for(Employee(employee_id="b", name="B", salary=900000)).monthly_gross == 75000
    assert structure_for(Employee(employee_id="c", name="C")).monthly_gross == 50000
    assert structure_for(Employee(employee_id="d", name="D"), PayrollPolicy(default_annual_ctc=120000)).monthly_gross == 10000


@pytest.mark.parametrize("basic", [-1.0, math.nan, math.inf])
def test_validate_structure_rejects_bad_amounts(basic):
    s = SalaryStructure(
        annual_ctc=0, basic=basic, hra=0, allowances=0, pf_employee=0, esi_employee=0, professional_tax=0, tds=0
    )

    with pytest.raises(ValidationError):
        validate_structure(s)


def test_round_half_up_rounds_halves_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2903.2258) == 2903


def test_round_half_up_moves_negative_halves_towards_zero():
    assert round_half_up(-100.5) == -100
    assert round_half_up(-2.5) == -2
    assert round_half_up(-100.6) == -101
    assert round_half_up(-0.4) == 0
