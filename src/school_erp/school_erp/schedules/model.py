from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    """One weekly recurring period: (day, time slot, class) -> teacher/subject."""

    schedule_id: str
    teacher_id: str
    teacher_name: str
    day: str
    time_slot: str
    subject: str
    class_name: str

    @classmethod
    def from_row(cls, row: list[str]) -> "ScheduleEntry":
        cells = list(row) + [""] * (7 - len(row))
        return cls(*(str(c) for c in cells[:7]))

    def to_row(self) -> list[object]:
        return [
            self.schedule_id,
            self.teacher_id,
            self.teacher_name,
            self.day,
            self.time_slot,
            self.subject,
            self.class_name,
        ]

    def to_dict(self) -> dict:
        return {
            "id": self.schedule_id,
            "teacherId": self.teacher_id,
            "teacherName": self.teacher_name,
            "day": self.day,
            "timeSlot": self.time_slot,
            "subject": self.subject,
            "className": self.class_name,
        }

    def same_slot(self, *, day: str, time_slot: str, class_name: str) -> bool:
        return self.day == day and self.time_slot == time_slot and self.class_name == class_name
