from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday, StaffMark


class StaffAttendanceRepository(Protocol):
    def list_marks(self, *, employee_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[StaffMark]:
        raise NotImplementedError

    def upsert_mark(self, mark: StaffMark) -> bool:
        """Update status/timestamp of the (date, employee) row or append one.

        Returns True when a new row was appended.
        """

        raise NotImplementedError

    def list_holidays(self, *, employee_id: str) -> Sequence[Holiday]:
        raise NotImplementedError

    def add_holiday(self, holiday: Holiday) -> None:
        raise NotImplementedError

    def remove_holiday(self, *, employee_id: str, date: str) -> bool:
        """Delete the first matching leave row.

        Raises NotFoundError when the holidays sheet does not exist at all.
        """

        raise NotImplementedError
