from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, now_local
from ..common.numbers import as_number, compact_number
from ..common.validators import require_list, require_non_empty
from ..core.exceptions import NotFoundError
from ..store.locking import AdvisoryLock
from ..students.repository import StudentRepository
from .model import ExamDefinition, SubjectDefinition, SubjectMark
from .repository import ResultsRepository

logger = logging.getLogger(__name__)


class ResultsService:
    def __init__(self, results: ResultsRepository, students: StudentRepository, lock: AdvisoryLock):
        self._results = results
        self._students = students
        self._lock = lock

    def create_exam(
        self,
        exam_name: str,
        subjects: list,
        created_by: str = "",
        *,
        now: Optional[datetime] = None,
    ) -> str:
        exam_name = require_non_empty(exam_name, "Exam name")
        exam = ExamDefinition(
            exam_id=f"EXM-{uuid.uuid4().hex[:10].upper()}",
            exam_name=exam_name,
            created_by=str(created_by or ""),
            created_at=format_timestamp(now or now_local()),
            subjects=[SubjectDefinition.from_dict(s) for s in (subjects or [])],
        )
        self._lock.run(lambda: self._results.add_exam(exam), ("exams",))
        logger.info("Exam %s (%s) created by %s", exam.exam_id, exam_name, exam.created_by or "unknown")
        return exam.exam_id

    def list_exams(self) -> Sequence[ExamDefinition]:
        return self._results.list_exams()

    def save_marks(
        self,
        admission_no: str,
        exam_name: str,
        marks: list,
        class_name: str,
        section: str,
        *,
        now: Optional[datetime] = None,
    ) -> int:
        admission_no = require_non_empty(admission_no, "Admission number")
        exam_name = require_non_empty(exam_name, "Exam name")
        require_list(marks, "Marks")
        at = format_timestamp(now or now_local())
        rows = [
            SubjectMark(
                admission_no=admission_no,
                exam_name=exam_name,
                subject=require_non_empty(m.get("subject"), "Subject"),
                marks=as_number(m.get("marks")),
                max_marks=as_number(m.get("maxMarks")),
                at=at,
            )
            for m in marks
        ]
        written = self._lock.run(
            lambda: self._results.upsert_marks(class_name, section, rows), ("results", class_name, section)
        )
        logger.info("Saved %d marks for %s in %s", written, admission_no, exam_name)
        return written

    def add_marks(self, admission_no: str, exam_name: str, marks: list, *, now: Optional[datetime] = None) -> int:
        """Same as ``save_marks`` with the class resolved from the student record."""

        student = self._students.get(str(admission_no))
        if not student:
            raise NotFoundError("Student record not found")
        return self.save_marks(admission_no, exam_name, marks, student.class_name, student.section, now=now)

    def class_results(self, exam_name: str, class_name: str, section: str) -> dict:
        grid: dict[str, dict] = {}
        for m in self._results.list_marks(class_name, section):
            if m.exam_name == exam_name:
                grid.setdefault(m.admission_no, {})[m.subject] = compact_number(m.marks)
        return grid

    def student_results(self, admission_no: str) -> list[dict]:
        student = self._students.get(str(admission_no))
        if not student:
            return []
        grouped: dict[str, list] = {}
        for m in self._results.list_marks(student.class_name, student.section):
            if m.admission_no == student.admission_no:
                grouped.setdefault(m.exam_name, []).append(m.to_dict())
        return [{"examName": name, "subjects": subjects} for name, subjects in grouped.items()]
