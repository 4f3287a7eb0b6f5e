from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp, now_local, parse_timestamp
from ..common.numbers import as_number
from ..common.validators import require_non_empty, require_positive_amount
from ..core.constants import RECENT_TRANSACTIONS_LIMIT
from ..store.locking import AdvisoryLock
from ..students.repository import StudentRepository
from .model import FeeDashboard, FeeSummary, FeeTransaction
from .receipts import ReceiptNumberGenerator
from .repository import FeeRepository

logger = logging.getLogger(__name__)


class FeeService:
    """Fee ledger: payments are appended, balances are always derived."""

    def __init__(
        self,
        fees: FeeRepository,
        students: StudentRepository,
        lock: AdvisoryLock,
        *,
        receipts: Optional[ReceiptNumberGenerator] = None,
    ):
        self._fees = fees
        self._students = students
        self._lock = lock
        self._receipts = receipts or ReceiptNumberGenerator("FE-")

    def record_payment(
        self,
        admission_no: str,
        amount,
        mode: str = "",
        remarks: str = "",
        *,
        now: Optional[datetime] = None,
    ) -> str:
        admission_no = require_non_empty(admission_no, "Admission number")
        value = require_positive_amount(amount)

        def _write() -> str:
            receipt = self._receipts.next(self._fees.receipt_numbers())
            self._fees.append(
                FeeTransaction(
                    timestamp=format_timestamp(now or now_local()),
                    admission_no=admission_no,
                    amount=value,
                    mode=str(mode or ""),
                    remarks=str(remarks or ""),
                    receipt_no=receipt,
                )
            )
            return receipt

        receipt = self._lock.run(_write, ("fees", admission_no))
        logger.info("Payment %s of %s recorded for %s", receipt, value, admission_no)
        return receipt

    def get_student_summary(self, admission_no: str, total_fees) -> FeeSummary:
        """Paid-to-date and dues; dues go negative on overpayment (no clamping)."""

        total = as_number(total_fees)
        history = list(self._fees.list_transactions(admission_no=str(admission_no)))
        paid = sum(t.amount for t in history)
        history.reverse()
        return FeeSummary(total_fees=total, paid_fees=paid, due_fees=total - paid, history=history)

    def get_monthly_dashboard(self, *, now: Optional[datetime] = None) -> FeeDashboard:
        now = now or now_local()
        students = {s.admission_no: s for s in self._students.list_all()}

        total = 0.0
        rows = []
        for t in self._fees.list_transactions():
            paid_at = parse_timestamp(t.timestamp)
            if paid_at and paid_at.month == now.month and paid_at.year == now.year:
                total += t.amount
            s = students.get(t.admission_no)
            rows.append(
                {
                    **t.to_dict(),
                    "admissionNo": t.admission_no,
                    "studentName": s.name if s else "Unknown",
                    "studentClass": f"{s.class_name}-{s.section}" if s else "",
                }
            )

        rows.reverse()
        return FeeDashboard(monthly_collection=total, recent_transactions=rows[:RECENT_TRANSACTIONS_LIMIT])
