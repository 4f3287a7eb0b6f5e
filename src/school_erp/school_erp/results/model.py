from __future__ import annotations

import json
from dataclasses import dataclass, field

from ..common.numbers import as_number, compact_number


@dataclass(frozen=True)
class SubjectDefinition:
    name: str
    max_marks: float

    @classmethod
    def from_dict(cls, d: dict) -> "SubjectDefinition":
        return cls(name=str(d.get("name") or d.get("subject") or ""), max_marks=as_number(d.get("maxMarks")))

    def to_dict(self) -> dict:
        return {"name": self.name, "maxMarks": compact_number(self.max_marks)}


@dataclass(frozen=True)
class ExamDefinition:
    exam_id: str
    exam_name: str
    created_by: str = ""
    created_at: str = ""
    subjects: list[SubjectDefinition] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: list[str]) -> "ExamDefinition":
        c = list(row) + [""] * (5 - len(row))
        try:
            raw = json.loads(c[4]) if c[4] else []
        except ValueError:
            raw = []
        return cls(
            exam_id=str(c[0]),
            exam_name=str(c[1]),
            created_by=str(c[2]),
            created_at=str(c[3]),
            subjects=[SubjectDefinition.from_dict(s) for s in raw if isinstance(s, dict)],
        )

    def to_row(self) -> list[object]:
        return [
            self.exam_id,
            self.exam_name,
            self.created_by,
            self.created_at,
            json.dumps([s.to_dict() for s in self.subjects]),
        ]

    def to_dict(self) -> dict:
        return {
            "examId": self.exam_id,
            "examName": self.exam_name,
            "subjects": [s.to_dict() for s in self.subjects],
        }


@dataclass(frozen=True)
class SubjectMark:
    admission_no: str
    exam_name: str
    subject: str
    marks: float
    max_marks: float
    at: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "SubjectMark":
        c = list(row) + [""] * (6 - len(row))
        return cls(
            admission_no=str(c[0]),
            exam_name=str(c[1]),
            subject=str(c[2]),
            marks=as_number(c[3]),
            max_marks=as_number(c[4]),
            at=str(c[5]),
        )

    def to_row(self) -> list[object]:
        return [
            self.admission_no,
            self.exam_name,
            self.subject,
            compact_number(self.marks),
            compact_number(self.max_marks),
            self.at,
        ]

    def same_cell(self, other: "SubjectMark") -> bool:
        return (
            self.admission_no == other.admission_no
            and self.exam_name == other.exam_name
            and self.subject == other.subject
        )

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "marks": compact_number(self.marks),
            "maxMarks": compact_number(self.max_marks),
        }
