from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StudentMark


class AttendanceRepository(Protocol):
    def list_marks(
        self,
        *,
        admission_no: Optional[str] = None,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        date: Optional[str] = None,
    ) -> Sequence[StudentMark]:
        """Marks in log order. Rows whose date does not parse are skipped."""

        raise NotImplementedError

    def upsert_mark(self, mark: StudentMark) -> bool:
        """Overwrite the (admission_no, date) mark in place or append it.

        Returns True when a new row was appended.
        """

        raise NotImplementedError

    def is_locked(self, *, class_name: str, section: str, date: str) -> bool:
        raise NotImplementedError

    def append_lock(self, *, class_name: str, section: str, date: str, marked_by: str, at: str) -> None:
        raise NotImplementedError

    def count_locks(self, *, class_name: str, section: str, date: str) -> int:
        raise NotImplementedError
