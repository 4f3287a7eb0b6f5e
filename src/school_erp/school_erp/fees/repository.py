from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import FeeTransaction


class FeeRepository(Protocol):
    def list_transactions(self, *, admission_no: Optional[str] = None) -> Sequence[FeeTransaction]:
        """Payments in the order they were recorded."""

        raise NotImplementedError

    def receipt_numbers(self) -> set[str]:
        raise NotImplementedError

    def append(self, tx: FeeTransaction) -> None:
        raise NotImplementedError
