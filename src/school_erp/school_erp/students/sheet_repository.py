from __future__ import annotations

from typing import Optional, Sequence

from ..store.archive import archive_record
from ..store.repository import GridStore
from ..store.schema import STUDENTS_MASTER
from .model import Student
from .repository import StudentRepository


class SheetStudentRepository(StudentRepository):
    def __init__(self, store: GridStore):
        self._store = store
        self._sheet = STUDENTS_MASTER

    def _rows(self) -> list[list[str]]:
        return self._store.get_rows(self._sheet.book, self._sheet.name)

    def _index_of(self, admission_no: str) -> int:
        for i, r in enumerate(self._rows()):
            if r and str(r[0]) == str(admission_no):
                return i
        return -1

    def list_all(self) -> Sequence[Student]:
        return [Student.from_row(r) for r in self._rows() if r and r[0]]

    def get(self, admission_no: str) -> Optional[Student]:
        for s in self.list_all():
            if s.admission_no == str(admission_no):
                return s
        return None

    def list_roster(self, class_name: str, section: str) -> Sequence[Student]:
        return [
            s
            for s in self.list_all()
            if s.class_name == str(class_name) and s.section == str(section) and s.is_active
        ]

    def add(self, student: Student) -> None:
        self._store.get_or_create_sheet(self._sheet.book, self._sheet.name, self._sheet.headers)
        self._store.append_row(self._sheet.book, self._sheet.name, student.to_row())

    def update(self, student: Student) -> bool:
        idx = self._index_of(student.admission_no)
        if idx == -1:
            return False
        self._store.update_row(self._sheet.book, self._sheet.name, idx, student.to_row())
        return True

    def archive(self, admission_no: str, *, deleted_by: Optional[str] = None) -> bool:
        rows = self._rows()
        for i, r in enumerate(rows):
            if r and str(r[0]) == str(admission_no):
                archive_record(self._store, module="STUDENTS", record_id=str(admission_no), row=r, deleted_by=deleted_by)
                self._store.delete_row(self._sheet.book, self._sheet.name, i)
                return True
        return False
