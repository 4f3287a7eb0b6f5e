from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import Role, StudentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..store.locking import AdvisoryLock
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

LOCK_KEY = ("students",)


class StudentService:
    """Use case: enrol, edit and archive students."""

    def __init__(self, students: StudentRepository, lock: AdvisoryLock):
        self._students = students
        self._lock = lock

    def list_for(
        self,
        *,
        role: Optional[str] = None,
        assigned_class: str = "",
        assigned_section: str = "",
    ) -> Sequence[Student]:
        students = self._students.list_all()
        if role == Role.TEACHER.value:
            # Teachers only see their own class/section.
            students = [
                s for s in students if s.class_name == str(assigned_class) and s.section == str(assigned_section)
            ]
        return students

    def get(self, admission_no: str) -> Student:
        student = self._students.get(str(admission_no))
        if not student:
            raise NotFoundError("Not found")
        return student

    def add(self, student: Student) -> None:
        require_non_empty(student.admission_no, "Admission number")
        require_non_empty(student.name, "Name")

        def _write() -> None:
            if self._students.get(student.admission_no):
                raise ValidationError(f"Admission number {student.admission_no} already exists")
            self._students.add(replace(student, status=StudentStatus.ACTIVE.value))

        self._lock.run(_write, LOCK_KEY)
        logger.info("Student %s registered", student.admission_no)

    def update(self, student: Student) -> Student:
        require_non_empty(student.admission_no, "Admission number")
        if student.status not in {s.value for s in StudentStatus}:
            raise ValidationError(f"Unknown student status: {student.status}")

        def _write() -> None:
            if not self._students.update(student):
                raise NotFoundError("Not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Student %s updated", student.admission_no)
        return student

    def archive(self, admission_no: str, *, deleted_by: Optional[str] = None) -> None:
        def _write() -> None:
            if not self._students.archive(str(admission_no), deleted_by=deleted_by):
                raise NotFoundError("Not found")

        self._lock.run(_write, LOCK_KEY)
        logger.info("Student %s archived by %s", admission_no, deleted_by or "System")

    def next_admission_number(self, *, now: Optional[datetime] = None) -> str:
        """Current year followed by a 3-digit sequence, e.g. 2024007."""

        year = str((now or now_local()).year)
        highest = 0
        for s in self._students.list_all():
            suffix = s.admission_no[len(year):]
            if s.admission_no.startswith(year) and suffix.isdigit():
                highest = max(highest, int(suffix))
        return f"{year}{highest + 1:03d}"
