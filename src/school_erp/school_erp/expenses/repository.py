from __future__ import annotations

from typing import Protocol, Sequence

from .model import Expense


class ExpenseRepository(Protocol):
    def list_all(self) -> Sequence[Expense]:
        raise NotImplementedError

    def receipt_numbers(self) -> set[str]:
        raise NotImplementedError

    def append(self, expense: Expense) -> None:
        raise NotImplementedError
