"""Run monthly payroll from the command line.

Usage: python scripts/run_payroll.py MONTH YEAR [--force]
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container
from src.attendance_payroll.attendance_payroll.core.exceptions import DomainError
from src.attendance_payroll.attendance_payroll.core.policy import PayrollPolicy


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate payroll records for one month")
    parser.add_argument("month", type=int)
    parser.add_argument("year", type=int)
    parser.add_argument("--force", action="store_true", help="run again even if the month already has records")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")

    container = build_container(db_config=dict(settings.DB_CONFIG), policy=PayrollPolicy.from_settings(settings))
    try:
        batch = container.payroll_service.run_month(month=args.month, year=args.year, force=args.force)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for r in batch.records:
        print(f"{r.employee_id}: payable={r.payable_days} unpaid={r.unpaid_days} net={r.net_pay}")
    for f in batch.failures:
        print(f"SKIPPED {f.employee_id}: {f.reason}", file=sys.stderr)
    print(f"OK: {batch.month} run_id={batch.run_id} records={len(batch.records)} failures={len(batch.failures)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
