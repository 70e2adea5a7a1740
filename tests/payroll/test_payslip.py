from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.model import PayrollRecord
from src.attendance_payroll.attendance_payroll.payroll.payslip import render_payslip


def _record(**overrides) -> PayrollRecord:
    values = dict(
        record_id="pay_e1_run1",
        run_id="run1",
        employee_id="e1",
        month="October 2025",
        month_number=10,
        year=2025,
        total_days=31,
        payable_days=28.5,
        unpaid_days=2.5,
        penalty_days=1,
        lop_deduction=2903,
        penalty_deduction=1935,
        reimbursements=1250,
        gross_pay=60000,
        statutory_deductions=6080,
        deductions=10918,
        net_pay=50332,
        created_at=0,
        generated_by="system",
    )
    values.update(overrides)
    return PayrollRecord(**values)


def test_payslip_lists_earnings_deductions_and_net():
    text = render_payslip(Employee(employee_id="e1", name="Asha", salary=720000), _record())

    assert text.startswith("PAYSLIP - October 2025")
    assert "Asha (e1)" in text
    assert "Basic Salary        24,000.00" in text
    assert "Late Penalty        1,935.00" in text
    assert "REIMBURSEMENTS        1,250.00" in text
    assert "NET PAY               50,332.00" in text
    assert "ESI" not in text


def test_payslip_hides_empty_optional_lines():
    record = _record(penalty_days=0, penalty_deduction=0, reimbursements=0)

    text = render_payslip(Employee(employee_id="e1", name="Asha", salary=240000), record)

    assert "Late Penalty" not in text
    assert "REIMBURSEMENTS" not in text
    assert "Penalty days" not in text
    assert "ESI                 150.00" in text


def test_record_dict_carries_statutory_deductions_and_period():
    data = _record().to_dict()

    assert data["statutory_deductions"] == 6080
    assert data["month_number"] == 10
    assert data["year"] == 2025
    assert data["deductions"] == data["statutory_deductions"] + data["lop_deduction"] + data["penalty_deduction"]
