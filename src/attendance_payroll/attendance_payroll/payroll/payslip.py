from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from ..core.policy import DEFAULT_POLICY, PayrollPolicy
from ..employees.model import Employee
from ..employees.salary import structure_for
from .model import PayrollRecord

_env = Environment(undefined=StrictUndefined, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
_env.filters["inr"] = lambda value: f"{value:,.2f}"

PAYSLIP_TEMPLATE = _env.from_string(
    """\
PAYSLIP - {{ record.month }}
Employee: {{ employee.name }} ({{ employee.employee_id }})
Record:   {{ record.record_id }}

ATTENDANCE
  Total days      {{ record.total_days }}
  Payable days    {{ record.payable_days }}
  Unpaid days     {{ record.unpaid_days }}
{% if record.penalty_days %}
  Penalty days    {{ record.penalty_days }}
{% endif %}

EARNINGS
  Basic Salary        {{ structure.basic | inr }}
  HRA                 {{ structure.hra | inr }}
  Allowances          {{ structure.allowances | inr }}
  Total Earnings      {{ record.gross_pay | inr }}

DEDUCTIONS
  Provident Fund      {{ structure.pf_employee | inr }}
  Professional Tax    {{ structure.professional_tax | inr }}
  Income Tax (TDS)    {{ structure.tds | inr }}
{% if structure.esi_employee %}
  ESI                 {{ structure.esi_employee | inr }}
{% endif %}
  Loss of Pay         {{ record.lop_deduction | inr }}
{% if record.penalty_deduction %}
  Late Penalty        {{ record.penalty_deduction | inr }}
{% endif %}
  Total Deductions    {{ record.deductions | inr }}

{% if record.reimbursements %}
REIMBURSEMENTS        {{ record.reimbursements | inr }}

{% endif %}
NET PAY               {{ record.net_pay | inr }}
"""
)


def render_payslip(employee: Employee, record: PayrollRecord, *, policy: PayrollPolicy = DEFAULT_POLICY) -> str:
    """Plain-text payslip for one payroll record."""
    return PAYSLIP_TEMPLATE.render(employee=employee, record=record, structure=structure_for(employee, policy))
