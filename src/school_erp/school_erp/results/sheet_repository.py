from __future__ import annotations

from typing import Iterable, Sequence

from ..store.repository import GridStore
from ..store.schema import EXAM_REGISTRY, MARKS_TEMPLATE, class_sheet_name
from .model import ExamDefinition, SubjectMark
from .repository import ResultsRepository


class SheetResultsRepository(ResultsRepository):
    """Exam registry plus one marks sheet per class-section."""

    def __init__(self, store: GridStore):
        self._store = store

    def list_exams(self) -> Sequence[ExamDefinition]:
        return [ExamDefinition.from_row(r) for r in self._store.get_rows(EXAM_REGISTRY.book, EXAM_REGISTRY.name)]

    def add_exam(self, exam: ExamDefinition) -> None:
        self._store.get_or_create_sheet(EXAM_REGISTRY.book, EXAM_REGISTRY.name, EXAM_REGISTRY.headers)
        self._store.append_row(EXAM_REGISTRY.book, EXAM_REGISTRY.name, exam.to_row())

    def list_marks(self, class_name: str, section: str) -> Sequence[SubjectMark]:
        sheet = class_sheet_name(class_name, section)
        return [SubjectMark.from_row(r) for r in self._store.get_rows(MARKS_TEMPLATE.book, sheet)]

    def upsert_marks(self, class_name: str, section: str, marks: Iterable[SubjectMark]) -> int:
        """Overwrite per (student, exam, subject), append new cells. Returns rows written."""

        schema = MARKS_TEMPLATE.for_sheet(class_sheet_name(class_name, section))
        self._store.get_or_create_sheet(schema.book, schema.name, schema.headers)
        existing = [SubjectMark.from_row(r) for r in self._store.get_rows(schema.book, schema.name)]

        written = 0
        for mark in marks:
            idx = next((i for i, m in enumerate(existing) if m.same_cell(mark)), -1)
            if idx > -1:
                self._store.update_row(schema.book, schema.name, idx, mark.to_row())
                existing[idx] = mark
            else:
                self._store.append_row(schema.book, schema.name, mark.to_row())
                existing.append(mark)
            written += 1
        return written
