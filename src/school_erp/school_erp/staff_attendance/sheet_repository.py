from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import date_key
from ..core.exceptions import NotFoundError
from ..store.repository import GridStore
from ..store.schema import EMPLOYEE_ATTENDANCE_LOG, TEACHER_HOLIDAYS
from .model import Holiday, StaffMark
from .repository import StaffAttendanceRepository


def _to_mark(row: list[str]) -> Optional[StaffMark]:
    cells = list(row) + [""] * (4 - len(row))
    day = date_key(cells[0])
    if not day:
        return None
    return StaffMark(date=day, employee_id=cells[1], status=cells[2], timestamp=cells[3])


class SheetStaffAttendanceRepository(StaffAttendanceRepository):
    """Staff marks live in one flat log, scanned linearly."""

    def __init__(self, store: GridStore):
        self._store = store

    def list_marks(self, *, employee_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[StaffMark]:
        out = []
        for row in self._store.get_rows(EMPLOYEE_ATTENDANCE_LOG.book, EMPLOYEE_ATTENDANCE_LOG.name):
            mark = _to_mark(row)
            if mark is None:
                continue
            if employee_id is not None and mark.employee_id != str(employee_id):
                continue
            if date is not None and mark.date != date:
                continue
            out.append(mark)
        return out

    def upsert_mark(self, mark: StaffMark) -> bool:
        book, sheet = EMPLOYEE_ATTENDANCE_LOG.book, EMPLOYEE_ATTENDANCE_LOG.name
        self._store.get_or_create_sheet(book, sheet, EMPLOYEE_ATTENDANCE_LOG.headers)
        row = [mark.date, mark.employee_id, mark.status, mark.timestamp]
        for i, existing in enumerate(self._store.get_rows(book, sheet)):
            m = _to_mark(existing)
            if m and m.date == mark.date and m.employee_id == mark.employee_id:
                self._store.update_row(book, sheet, i, row)
                return False
        self._store.append_row(book, sheet, row)
        return True

    def list_holidays(self, *, employee_id: str) -> Sequence[Holiday]:
        rows = self._store.get_rows(TEACHER_HOLIDAYS.book, TEACHER_HOLIDAYS.name)
        return [
            Holiday(date=r[0], employee_id=r[1], reason=r[2] if len(r) > 2 else "")
            for r in rows
            if len(r) > 1 and r[1] == str(employee_id)
        ]

    def add_holiday(self, holiday: Holiday) -> None:
        self._store.get_or_create_sheet(TEACHER_HOLIDAYS.book, TEACHER_HOLIDAYS.name, TEACHER_HOLIDAYS.headers)
        self._store.append_row(
            TEACHER_HOLIDAYS.book,
            TEACHER_HOLIDAYS.name,
            [holiday.date, holiday.employee_id, holiday.reason, holiday.marked_by, holiday.at],
        )

    def remove_holiday(self, *, employee_id: str, date: str) -> bool:
        book, sheet = TEACHER_HOLIDAYS.book, TEACHER_HOLIDAYS.name
        if not self._store.sheet_exists(book, sheet):
            raise NotFoundError("No record found")
        for i, r in enumerate(self._store.get_rows(book, sheet)):
            if len(r) > 1 and r[1] == str(employee_id) and date_key(r[0]) == date:
                self._store.delete_row(book, sheet, i)
                return True
        return False
