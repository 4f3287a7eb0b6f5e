from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import ExamDefinition, SubjectMark


class ResultsRepository(Protocol):
    def list_exams(self) -> Sequence[ExamDefinition]:
        raise NotImplementedError

    def add_exam(self, exam: ExamDefinition) -> None:
        raise NotImplementedError

    def list_marks(self, class_name: str, section: str) -> Sequence[SubjectMark]:
        raise NotImplementedError

    def upsert_marks(self, class_name: str, section: str, marks: Iterable[SubjectMark]) -> int:
        raise NotImplementedError
