from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import date_key
from ..core.enums import AttendanceMark
from ..store.repository import GridStore
from ..store.schema import ATTENDANCE_LOCKS, STUDENT_ATTENDANCE_LOG
from .model import StudentMark
from .repository import AttendanceRepository


def _to_mark(row: list[str]) -> Optional[StudentMark]:
    cells = list(row) + [""] * (len(STUDENT_ATTENDANCE_LOG.headers) - len(row))
    day = date_key(cells[0])
    if not day:
        return None
    try:
        status = AttendanceMark(cells[7].strip())
    except ValueError:
        return None
    return StudentMark(
        date=day,
        admission_no=cells[1],
        class_name=cells[2],
        section=cells[3],
        roll_no=cells[4],
        name=cells[5],
        photo_url=cells[6],
        status=status,
        marked_by=cells[8],
        marked_at=cells[9],
    )


def _to_row(mark: StudentMark) -> list[object]:
    return [
        mark.date,
        mark.admission_no,
        mark.class_name,
        mark.section,
        mark.roll_no,
        mark.name,
        mark.photo_url,
        mark.status.value,
        mark.marked_by,
        mark.marked_at,
    ]


class SheetAttendanceRepository(AttendanceRepository):
    """Student marks as an append/upsert log of (date, student, status) rows."""

    def __init__(self, store: GridStore):
        self._store = store

    def list_marks(
        self,
        *,
        admission_no: Optional[str] = None,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        date: Optional[str] = None,
    ) -> Sequence[StudentMark]:
        out = []
        for row in self._store.get_rows(STUDENT_ATTENDANCE_LOG.book, STUDENT_ATTENDANCE_LOG.name):
            mark = _to_mark(row)
            if mark is None:
                continue
            if admission_no is not None and mark.admission_no != str(admission_no):
                continue
            if class_name is not None and mark.class_name != str(class_name):
                continue
            if section is not None and mark.section != str(section):
                continue
            if date is not None and mark.date != date:
                continue
            out.append(mark)
        return out

    def upsert_mark(self, mark: StudentMark) -> bool:
        book, sheet = STUDENT_ATTENDANCE_LOG.book, STUDENT_ATTENDANCE_LOG.name
        self._store.get_or_create_sheet(book, sheet, STUDENT_ATTENDANCE_LOG.headers)
        for i, row in enumerate(self._store.get_rows(book, sheet)):
            existing = _to_mark(row)
            if existing and existing.admission_no == mark.admission_no and existing.date == mark.date:
                self._store.update_row(book, sheet, i, _to_row(mark))
                return False
        self._store.append_row(book, sheet, _to_row(mark))
        return True

    def _matching_locks(self, class_name: str, section: str, date: str) -> list[list[str]]:
        rows = self._store.get_rows(ATTENDANCE_LOCKS.book, ATTENDANCE_LOCKS.name)
        return [
            r
            for r in rows
            if len(r) >= 3 and r[0] == str(class_name) and r[1] == str(section) and date_key(r[2]) == date
        ]

    def is_locked(self, *, class_name: str, section: str, date: str) -> bool:
        return bool(self._matching_locks(class_name, section, date))

    def count_locks(self, *, class_name: str, section: str, date: str) -> int:
        return len(self._matching_locks(class_name, section, date))

    def append_lock(self, *, class_name: str, section: str, date: str, marked_by: str, at: str) -> None:
        self._store.get_or_create_sheet(ATTENDANCE_LOCKS.book, ATTENDANCE_LOCKS.name, ATTENDANCE_LOCKS.headers)
        self._store.append_row(
            ATTENDANCE_LOCKS.book,
            ATTENDANCE_LOCKS.name,
            [class_name, section, date, marked_by or "System", at],
        )
