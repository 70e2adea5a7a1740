from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def exists_for_month(self, month: str) -> bool:
        raise NotImplementedError

    def save_many(self, records: Iterable[PayrollRecord]) -> int:
        """Append records; existing rows are never updated."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def get(self, record_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError
