from __future__ import annotations

import uuid
from typing import Callable, Container, Optional

_MAX_ATTEMPTS = 8


class ReceiptNumberGenerator:
    """Receipt numbers like ``FE-3F9A0C12BE``: prefix plus 10 hex chars of a UUID4.

    ``next`` re-draws when the candidate is already taken, so numbers stay
    unique within whatever set of existing receipts the caller passes in.
    """

    def __init__(self, prefix: str, *, id_factory: Optional[Callable[[], uuid.UUID]] = None):
        self._prefix = prefix
        self._id_factory = id_factory or uuid.uuid4

    @property
    def prefix(self) -> str:
        return self._prefix

    def candidate(self) -> str:
        return f"{self._prefix}{self._id_factory().hex[:10].upper()}"

    def next(self, taken: Container[str] = ()) -> str:
        for _ in range(_MAX_ATTEMPTS):
            receipt = self.candidate()
            if receipt not in taken:
                return receipt
        raise RuntimeError(f"Could not allocate a unique {self._prefix} receipt number")
