from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Homework:
    homework_id: str
    date: str
    subject: str
    content: str
    teacher_name: str
    created_at: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "Homework":
        c = list(row) + [""] * (6 - len(row))
        return cls(
            homework_id=str(c[0]),
            date=str(c[1]),
            subject=str(c[2]),
            content=str(c[3]),
            teacher_name=str(c[4] or "Faculty"),
            created_at=str(c[5]),
        )

    def to_row(self) -> list[object]:
        return [self.homework_id, self.date, self.subject, self.content, self.teacher_name, self.created_at]

    def to_dict(self) -> dict:
        return {
            "id": self.homework_id,
            "date": self.date,
            "subject": self.subject,
            "content": self.content,
            "teacherName": self.teacher_name,
        }
