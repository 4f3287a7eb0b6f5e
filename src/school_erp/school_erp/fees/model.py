from __future__ import annotations

from dataclasses import dataclass, field

from ..common.numbers import compact_number


@dataclass(frozen=True)
class FeeTransaction:
    """Domain entity: one immutable payment row."""

    timestamp: str
    admission_no: str
    amount: float
    mode: str
    remarks: str
    receipt_no: str

    def to_dict(self) -> dict:
        return {
            "date": self.timestamp,
            "amount": compact_number(self.amount),
            "mode": self.mode,
            "remarks": self.remarks,
            "receiptNo": self.receipt_no,
        }


@dataclass(frozen=True)
class FeeSummary:
    total_fees: float
    paid_fees: float
    due_fees: float
    history: list[FeeTransaction] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalFees": compact_number(self.total_fees),
            "paidFees": compact_number(self.paid_fees),
            "dueFees": compact_number(self.due_fees),
            "history": [t.to_dict() for t in self.history],
        }


@dataclass(frozen=True)
class FeeDashboard:
    monthly_collection: float
    recent_transactions: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "monthlyCollection": compact_number(self.monthly_collection),
            "recentTransactions": list(self.recent_transactions),
        }
