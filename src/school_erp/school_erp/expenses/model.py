from __future__ import annotations

from dataclasses import dataclass, field

from ..common.numbers import as_number, compact_number


@dataclass(frozen=True)
class Expense:
    date: str
    receipt_number: str
    category: str
    title: str
    amount: float
    payment_mode: str = ""
    reference: str = ""
    remarks: str = ""
    approved_by: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "Expense":
        c = list(row) + [""] * (9 - len(row))
        return cls(
            date=str(c[0]),
            receipt_number=str(c[1]),
            category=str(c[2]),
            title=str(c[3]),
            amount=as_number(c[4]),
            payment_mode=str(c[5]),
            reference=str(c[6]),
            remarks=str(c[7]),
            approved_by=str(c[8]),
        )

    @classmethod
    def from_dict(cls, d: dict) -> "Expense":
        return cls(
            date=str(d.get("date") or ""),
            receipt_number=str(d.get("receiptNumber") or ""),
            category=str(d.get("category") or ""),
            title=str(d.get("title") or ""),
            amount=d.get("amount"),
            payment_mode=str(d.get("paymentMode") or ""),
            reference=str(d.get("reference") or ""),
            remarks=str(d.get("remarks") or ""),
            approved_by=str(d.get("approvedBy") or ""),
        )

    def to_row(self) -> list[object]:
        return [
            self.date,
            self.receipt_number,
            self.category,
            self.title,
            compact_number(self.amount),
            self.payment_mode,
            self.reference,
            self.remarks,
            self.approved_by,
        ]

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "receiptNumber": self.receipt_number,
            "category": self.category,
            "title": self.title,
            "amount": compact_number(self.amount),
            "paymentMode": self.payment_mode,
            "reference": self.reference,
            "remarks": self.remarks,
            "approvedBy": self.approved_by,
        }


@dataclass(frozen=True)
class ExpenseSummary:
    monthly_expenses: float
    recent_expenses: list[Expense] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "monthlyExpenses": compact_number(self.monthly_expenses),
            "recentExpenses": [e.to_dict() for e in self.recent_expenses],
        }
