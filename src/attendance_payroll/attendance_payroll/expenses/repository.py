from __future__ import annotations

from typing import Protocol, Sequence

from .model import ExpenseClaim


class ExpenseRepository(Protocol):
    def list_approved_between(self, *, start_ms: int, end_ms: int) -> Sequence[ExpenseClaim]:
        """Approved claims with approved_at in [start_ms, end_ms)."""

        raise NotImplementedError
