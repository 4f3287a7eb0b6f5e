from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import date_key, now_local, parse_iso_date
from ..common.validators import require_non_empty, require_positive_amount
from ..core.constants import RECENT_TRANSACTIONS_LIMIT
from ..fees.receipts import ReceiptNumberGenerator
from ..store.locking import AdvisoryLock
from .model import Expense, ExpenseSummary
from .repository import ExpenseRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("expenses",)


class ExpenseService:
    def __init__(
        self,
        expenses: ExpenseRepository,
        lock: AdvisoryLock,
        *,
        receipts: Optional[ReceiptNumberGenerator] = None,
    ):
        self._expenses = expenses
        self._lock = lock
        self._receipts = receipts or ReceiptNumberGenerator("EX-")

    def summary(self, *, now: Optional[datetime] = None) -> ExpenseSummary:
        now = now or now_local()
        items = list(self._expenses.list_all())
        total = 0.0
        for e in items:
            key = date_key(e.date)
            if not key:
                continue
            spent_on = parse_iso_date(key)
            if spent_on.month == now.month and spent_on.year == now.year:
                total += e.amount
        items.reverse()
        return ExpenseSummary(monthly_expenses=total, recent_expenses=items[:RECENT_TRANSACTIONS_LIMIT])

    def add(self, expense: Expense) -> str:
        require_non_empty(expense.date, "Date")
        require_non_empty(expense.title, "Purpose")
        amount = require_positive_amount(expense.amount)

        def _write() -> str:
            receipt = self._receipts.next(self._expenses.receipt_numbers())
            self._expenses.append(replace(expense, amount=amount, receipt_number=receipt))
            return receipt

        receipt = self._lock.run(_write, LOCK_KEY)
        logger.info("Expense %s of %s recorded (%s)", receipt, amount, expense.category)
        return receipt

    def next_receipt_number(self) -> str:
        """Preview only; the number is re-drawn when the expense is saved."""
        return self._receipts.next(self._expenses.receipt_numbers())
