from __future__ import annotations

from typing import Sequence

from ..store.repository import GridStore
from ..store.schema import EXPENSE_LEDGER
from .model import Expense
from .repository import ExpenseRepository


class SheetExpenseRepository(ExpenseRepository):
    """Append-only ledger, same shape as the fee collection log."""

    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = EXPENSE_LEDGER

    def list_all(self) -> Sequence[Expense]:
        return [Expense.from_row(r) for r in self._store.get_rows(self._sheet.book, self._sheet.name)]

    def receipt_numbers(self) -> set[str]:
        return {e.receipt_number for e in self.list_all()}

    def append(self, expense: Expense) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        self._store.append_row(self._sheet.book, self._sheet.name, expense.to_row())
