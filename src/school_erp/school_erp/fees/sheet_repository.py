from __future__ import annotations

from typing import Optional, Sequence

from ..common.numbers import as_number, compact_number
from ..store.repository import GridStore
from ..store.schema import FEE_COLLECTION_LOG
from .model import FeeTransaction
from .repository import FeeRepository


class SheetFeeRepository(FeeRepository):
    """Append-only collection log; rows are never updated or deleted."""

    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = FEE_COLLECTION_LOG

    def list_transactions(self, *, admission_no: Optional[str] = None) -> Sequence[FeeTransaction]:
        out = []
        for r in self._store.get_rows(self._sheet.book, self._sheet.name):
            cells = list(r) + [""] * (len(self._sheet.headers) - len(r))
            if admission_no is not None and cells[1] != str(admission_no):
                continue
            out.append(
                FeeTransaction(
                    timestamp=cells[0],
                    admission_no=cells[1],
                    amount=as_number(cells[2]),
                    mode=cells[3],
                    remarks=cells[4],
                    receipt_no=cells[5],
                )
            )
        return out

    def receipt_numbers(self) -> set[str]:
        return {r[5] for r in self._store.get_rows(self._sheet.book, self._sheet.name) if len(r) > 5}

    def append(self, tx: FeeTransaction) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        self._store.append_row(
            self._sheet.book,
            self._sheet.name,
            [tx.timestamp, tx.admission_no, compact_number(tx.amount), tx.mode, tx.remarks, tx.receipt_no],
        )
