"""Example: use the service layer directly (no Flask).

Controllers are thin; the payroll and attendance rules live in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    for day in container.attendance_service.month_calendar("u2", month=10, year=2025)[:7]:
        print(day.work_date, day.mark.value, day.outcome.value if day.outcome else "-")

    for record in container.payroll_service.history("u2"):
        print(record.month, record.net_pay)


if __name__ == "__main__":
    main()
